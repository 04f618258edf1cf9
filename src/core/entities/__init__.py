"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
Derived timeline structures are computed per request and never persisted.

Exports:
- AnimeInfo: Catalog entry for one anime title
- AnimeRelationship: Typed relationship between two catalog entries
- RelationshipNode: Discovered entry with its edges
- GraphTraversalResult: Outcome of a relationship graph traversal
- TimelineEntry: One chronologically ranked entry
- SeriesTimeline: Ordered timeline of a connected group of entries
- TimelineStatus: Timeline availability and counts
- CacheStatistics: Timeline cache figures (always empty)
- BatchFailure, BatchTimelineResult: Batch generation outcome
"""

from src.core.entities.anime import AnimeInfo, AnimeRelationship
from src.core.entities.timeline import (
    BatchFailure,
    BatchTimelineResult,
    CacheStatistics,
    GraphTraversalResult,
    RelationshipNode,
    SeriesTimeline,
    TimelineEntry,
    TimelineStatus,
)

__all__ = [
    "AnimeInfo",
    "AnimeRelationship",
    "RelationshipNode",
    "GraphTraversalResult",
    "TimelineEntry",
    "SeriesTimeline",
    "TimelineStatus",
    "CacheStatistics",
    "BatchFailure",
    "BatchTimelineResult",
]
