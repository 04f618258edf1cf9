"""
Timeline entities.

Derived, never persisted structures produced by the timeline subsystem:
traversal results, chronologically ordered entries and the assembled
series timeline with its JSON shape.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from src.core.entities.anime import AnimeInfo, AnimeRelationship
from src.core.value_objects import AnimeType


@dataclass
class RelationshipNode:
    """A discovered catalog entry together with every edge touching it."""

    mal_id: int
    anime_info: AnimeInfo
    relationships: list[AnimeRelationship] = field(default_factory=list)


@dataclass
class GraphTraversalResult:
    """
    Outcome of a breadth-first traversal from a root entry.

    Attributes:
        nodes: Discovered nodes keyed by MAL ID (only IDs with a catalog entry)
        visited_order: Every visited ID in first-visit order, including
            IDs without a catalog entry
        cycles_detected: Cycle paths found through back-edges (diagnostic only)
    """

    nodes: dict[int, RelationshipNode] = field(default_factory=dict)
    visited_order: list[int] = field(default_factory=list)
    cycles_detected: list[list[int]] = field(default_factory=list)


@dataclass(frozen=True)
class TimelineEntry:
    """
    One entry of a series timeline.

    Attributes:
        mal_id: MyAnimeList ID
        title: Main title
        title_english: English title
        anime_type: Broadcast format
        premiere_date: First air date
        num_episodes: Number of episodes
        episode_duration: Episode duration in minutes
        chronological_order: 1-based rank after sorting
        is_main_entry: True for TV series and movies
        relationship_path: Reserved, always empty
    """

    mal_id: int
    title: str
    title_english: Optional[str]
    anime_type: AnimeType
    premiere_date: Optional[date]
    num_episodes: Optional[int]
    episode_duration: Optional[int]
    chronological_order: int
    is_main_entry: bool
    relationship_path: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serializes the entry to its JSON shape."""
        return {
            "malId": self.mal_id,
            "title": self.title,
            "titleEnglish": self.title_english,
            "animeType": self.anime_type.value,
            "premiereDate": self.premiere_date.isoformat() if self.premiere_date else None,
            "numEpisodes": self.num_episodes,
            "episodeDuration": self.episode_duration,
            "chronologicalOrder": self.chronological_order,
            "isMainEntry": self.is_main_entry,
            "relationshipPath": list(self.relationship_path),
        }


@dataclass(frozen=True)
class SeriesTimeline:
    """
    Complete chronological timeline of a connected group of entries.

    Computed fresh on every request and never cached.
    """

    root_mal_id: int
    entries: tuple[TimelineEntry, ...]
    total_entries: int
    main_timeline_count: int
    last_updated: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serializes the timeline to its JSON shape."""
        return {
            "rootMalId": self.root_mal_id,
            "entries": [entry.to_dict() for entry in self.entries],
            "totalEntries": self.total_entries,
            "mainTimelineCount": self.main_timeline_count,
            "lastUpdated": self.last_updated.isoformat(),
        }


@dataclass(frozen=True)
class TimelineStatus:
    """Whether a timeline can be generated for an entry, with its counts."""

    exists: bool
    cached: bool = False
    stale: bool = False
    last_updated: Optional[datetime] = None
    entry_count: int = 0
    main_entry_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "exists": self.exists,
            "cached": self.cached,
            "stale": self.stale,
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
            "entryCount": self.entry_count,
            "mainEntryCount": self.main_entry_count,
        }


@dataclass(frozen=True)
class CacheStatistics:
    """Timeline cache figures. All zero while timelines are never cached."""

    total_cached_timelines: int = 0
    stale_timelines: int = 0
    average_timeline_size: float = 0
    oldest_cache: Optional[datetime] = None
    newest_cache: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCachedTimelines": self.total_cached_timelines,
            "staleTimelines": self.stale_timelines,
            "averageTimelineSize": self.average_timeline_size,
            "oldestCache": self.oldest_cache.isoformat() if self.oldest_cache else None,
            "newestCache": self.newest_cache.isoformat() if self.newest_cache else None,
        }


@dataclass(frozen=True)
class BatchFailure:
    """A root ID whose timeline could not be generated, with the error message."""

    mal_id: int
    error: str


@dataclass
class BatchTimelineResult:
    """Successes and failures of a batch timeline generation."""

    successful: list[SeriesTimeline] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "successful": [timeline.to_dict() for timeline in self.successful],
            "failed": [{"malId": f.mal_id, "error": f.error} for f in self.failed],
        }
