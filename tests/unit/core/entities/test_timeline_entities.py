"""
Tests for the serialized shape of timeline entities.
"""

from datetime import date, datetime, timezone

from src.core.entities.timeline import (
    BatchFailure,
    BatchTimelineResult,
    CacheStatistics,
    SeriesTimeline,
    TimelineEntry,
    TimelineStatus,
)
from src.core.value_objects import AnimeType


def _entry(mal_id: int, order: int, premiere: date | None = None) -> TimelineEntry:
    return TimelineEntry(
        mal_id=mal_id,
        title=f"Anime {mal_id}",
        title_english=None,
        anime_type=AnimeType.TV,
        premiere_date=premiere,
        num_episodes=12,
        episode_duration=24,
        chronological_order=order,
        is_main_entry=True,
    )


class TestSeriesTimelineToDict:
    """Tests for SeriesTimeline.to_dict."""

    def test_exact_fields(self) -> None:
        generated = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        timeline = SeriesTimeline(
            root_mal_id=1,
            entries=(_entry(1, 1, date(2013, 4, 7)), _entry(2, 2)),
            total_entries=2,
            main_timeline_count=2,
            last_updated=generated,
        )

        data = timeline.to_dict()

        assert set(data) == {
            "rootMalId", "entries", "totalEntries", "mainTimelineCount", "lastUpdated",
        }
        assert data["lastUpdated"] == "2024-01-01T12:00:00+00:00"
        assert data["entries"][0] == {
            "malId": 1,
            "title": "Anime 1",
            "titleEnglish": None,
            "animeType": "tv",
            "premiereDate": "2013-04-07",
            "numEpisodes": 12,
            "episodeDuration": 24,
            "chronologicalOrder": 1,
            "isMainEntry": True,
            "relationshipPath": [],
        }
        assert data["entries"][1]["premiereDate"] is None


class TestOtherShapes:
    """Tests for status, cache statistics and batch serialization."""

    def test_status_to_dict(self) -> None:
        assert TimelineStatus(exists=False).to_dict() == {
            "exists": False,
            "cached": False,
            "stale": False,
            "lastUpdated": None,
            "entryCount": 0,
            "mainEntryCount": 0,
        }

    def test_batch_to_dict(self) -> None:
        result = BatchTimelineResult(failed=[BatchFailure(mal_id=9, error="not found")])
        assert result.to_dict() == {
            "successful": [],
            "failed": [{"malId": 9, "error": "not found"}],
        }

    def test_cache_statistics_to_dict(self) -> None:
        assert CacheStatistics().to_dict() == {
            "totalCachedTimelines": 0,
            "staleTimelines": 0,
            "averageTimelineSize": 0,
            "oldestCache": None,
            "newestCache": None,
        }
