"""
Tests unitaires pour TimelineService.

Verifie l'orchestration de la generation des timelines:
- Racine absente (NotFound) vs racine isolee (timeline d'une entree)
- Assemblage : ordre, compteurs, horodatage
- Lots : isolation des echecs, jamais d'exception
- Statut, rafraichissement, absence de cache
"""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from src.core.exceptions import TimelineGenerationError, TimelineNotFoundError
from src.core.value_objects import AnimeType, RelationshipType
from src.services.chronological_sorter import ChronologicalSorter
from src.services.timeline import TimelineService

SEQUEL = RelationshipType.SEQUEL


@pytest.fixture
def aot_store(anime_factory, graph_store):
    """Deux saisons TV reliees par une relation sequel."""
    animes = [
        anime_factory(1, anime_type=AnimeType.TV, premiere_date=date(2013, 4, 7), num_episodes=25),
        anime_factory(2, anime_type=AnimeType.TV, premiere_date=date(2017, 4, 1), num_episodes=12),
    ]
    return graph_store(animes, [(1, 2, SEQUEL)])


class TestGetTimeline:
    """Tests pour get_timeline()."""

    def test_two_season_scenario(self, aot_store) -> None:
        """Racine 1 (2013, 25 ep.) -> sequel 2 (2017, 12 ep.)."""
        timeline = TimelineService(store=aot_store).get_timeline(1)

        assert timeline.root_mal_id == 1
        assert [e.mal_id for e in timeline.entries] == [1, 2]
        assert [e.chronological_order for e in timeline.entries] == [1, 2]
        assert timeline.total_entries == 2
        assert timeline.main_timeline_count == 2

    def test_root_may_be_a_later_entry(self, aot_store) -> None:
        """La racine n'est pas forcement la premiere entree chronologique."""
        timeline = TimelineService(store=aot_store).get_timeline(2)

        assert timeline.root_mal_id == 2
        assert [e.mal_id for e in timeline.entries] == [1, 2]

    def test_unknown_root_raises_not_found(self, graph_store) -> None:
        service = TimelineService(store=graph_store([], []))

        with pytest.raises(TimelineNotFoundError) as exc_info:
            service.get_timeline(999)

        assert exc_info.value.mal_id == 999

    def test_isolated_root_gives_single_entry(self, anime_factory, graph_store) -> None:
        store = graph_store([anime_factory(7, anime_type=AnimeType.OVA)], [])

        timeline = TimelineService(store=store).get_timeline(7)

        assert timeline.total_entries == 1
        assert timeline.entries[0].mal_id == 7
        assert timeline.entries[0].chronological_order == 1
        assert timeline.entries[0].is_main_entry is False
        assert timeline.main_timeline_count == 0

    def test_main_count_matches_predicate(self, anime_factory, graph_store) -> None:
        animes = [
            anime_factory(1, anime_type=AnimeType.TV),
            anime_factory(2, anime_type=AnimeType.MOVIE),
            anime_factory(3, anime_type=AnimeType.OVA),
            anime_factory(4, anime_type=AnimeType.SPECIAL),
        ]
        edges = [(1, i, RelationshipType.SIDE_STORY) for i in (2, 3, 4)]

        timeline = TimelineService(store=graph_store(animes, edges)).get_timeline(1)

        assert timeline.main_timeline_count == 2
        assert timeline.main_timeline_count == sum(e.is_main_entry for e in timeline.entries)

    def test_last_updated_is_timezone_aware(self, aot_store) -> None:
        before = datetime.now().astimezone()

        timeline = TimelineService(store=aot_store).get_timeline(1)

        assert timeline.last_updated.tzinfo is not None
        assert timeline.last_updated >= before

    def test_always_recomputed_from_store(self, aot_store) -> None:
        """Deux appels relisent le store : aucun cache."""
        service = TimelineService(store=aot_store)

        first = service.get_timeline(1)
        second = service.get_timeline(1)

        assert first is not second
        assert aot_store.get_relationships.call_count == 4

    def test_unexpected_error_is_wrapped(self, aot_store) -> None:
        sorter = MagicMock(spec=ChronologicalSorter)
        sorter.sort.side_effect = RuntimeError("boom")
        service = TimelineService(store=aot_store, sorter=sorter)

        with pytest.raises(TimelineGenerationError, match="boom") as exc_info:
            service.get_timeline(1)

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_store_failure_on_root_lookup_is_not_found(self, graph_store) -> None:
        """Un store en panne renvoie None : la racine est rapportee introuvable."""
        store = graph_store([], [])
        store.get_anime_info.side_effect = None
        store.get_anime_info.return_value = None

        with pytest.raises(TimelineNotFoundError):
            TimelineService(store=store).get_timeline(1)


class TestBatch:
    """Tests pour batch_get_timelines()."""

    def test_failures_do_not_stop_the_batch(self, aot_store) -> None:
        result = TimelineService(store=aot_store).batch_get_timelines([1, 404, 2])

        assert [t.root_mal_id for t in result.successful] == [1, 2]
        assert len(result.failed) == 1
        assert result.failed[0].mal_id == 404
        assert "404" in result.failed[0].error

    def test_batch_never_raises(self, aot_store) -> None:
        aot_store.get_anime_info.side_effect = RuntimeError("store down")

        result = TimelineService(store=aot_store).batch_get_timelines([1, 2])

        assert result.successful == []
        assert [f.mal_id for f in result.failed] == [1, 2]

    def test_empty_batch(self, aot_store) -> None:
        result = TimelineService(store=aot_store).batch_get_timelines([])

        assert result.successful == []
        assert result.failed == []


class TestStatusAndRefresh:
    """Tests pour get_timeline_status(), refresh_timeline() et invalidate_timeline()."""

    def test_status_for_existing_root(self, aot_store) -> None:
        status = TimelineService(store=aot_store).get_timeline_status(1)

        assert status.exists is True
        assert status.cached is False
        assert status.stale is False
        assert status.entry_count == 2
        assert status.main_entry_count == 2
        assert status.last_updated is not None

    def test_status_for_unknown_root(self, graph_store) -> None:
        status = TimelineService(store=graph_store([], [])).get_timeline_status(5)

        assert status.exists is False
        assert status.entry_count == 0
        assert status.last_updated is None

    def test_refresh_returns_fresh_timeline(self, aot_store) -> None:
        timeline = TimelineService(store=aot_store).refresh_timeline(1)

        assert timeline.total_entries == 2

    def test_invalidate_is_a_no_op(self, aot_store) -> None:
        service = TimelineService(store=aot_store)

        service.invalidate_timeline(1)

        aot_store.get_anime_info.assert_not_called()

    def test_close_closes_store(self, aot_store) -> None:
        TimelineService(store=aot_store).close()

        aot_store.close.assert_called_once()

    def test_cache_statistics_are_empty(self, aot_store) -> None:
        stats = TimelineService(store=aot_store).get_cache_statistics()

        assert stats.total_cached_timelines == 0
        assert stats.stale_timelines == 0
        assert stats.average_timeline_size == 0
        assert stats.oldest_cache is None
        assert stats.newest_cache is None

    def test_cleanup_stale_cache_removes_nothing(self, aot_store) -> None:
        service = TimelineService(store=aot_store)

        assert service.cleanup_stale_cache() == 0
        assert service.cleanup_stale_cache(max_age_hours=1) == 0
        aot_store.get_anime_info.assert_not_called()


class TestSpecialTitles:
    """Titres avec accolades et caracteres non ASCII dans l'orchestration."""

    @pytest.fixture
    def brace_store(self, anime_factory, graph_store):
        animes = [
            anime_factory(1, title="Kara no {Kyoukai}", premiere_date=date(2007, 12, 1)),
            anime_factory(2, title="{0} {title!r} 空の境界", premiere_date=date(2008, 1, 26)),
        ]
        return graph_store(animes, [(1, 2, SEQUEL)])

    def test_root_with_braces_produces_timeline(self, brace_store, log_messages) -> None:
        timeline = TimelineService(store=brace_store).get_timeline(1)

        assert [e.title for e in timeline.entries] == [
            "Kara no {Kyoukai}",
            "{0} {title!r} 空の境界",
        ]
        assert any("Kara no {Kyoukai}" in message for message in log_messages)

    def test_non_ascii_root_produces_timeline(self, brace_store, log_messages) -> None:
        timeline = TimelineService(store=brace_store).get_timeline(2)

        assert timeline.root_mal_id == 2
        assert timeline.total_entries == 2

    def test_batch_and_status_with_braces(self, brace_store, log_messages) -> None:
        service = TimelineService(store=brace_store)

        result = service.batch_get_timelines([1, 2])
        status = service.get_timeline_status(1)

        assert result.failed == []
        assert len(result.successful) == 2
        assert status.exists is True
