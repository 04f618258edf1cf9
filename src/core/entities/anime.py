"""
Anime catalog entities.

Entities representing catalog entries (anime titles keyed by their
MyAnimeList ID) and the typed relationships linking them together.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from src.core.value_objects import AnimeStatus, AnimeType, RelationshipType


@dataclass
class AnimeInfo:
    """
    Catalog entry for one anime title.

    Populated by the metadata ingestion collaborator, read-only from the
    timeline subsystem's point of view.

    Attributes:
        mal_id: MyAnimeList ID (unique external key)
        title: Main (romaji) title
        title_english: English title
        title_japanese: Japanese title
        image_url: Cover image URL
        rating: Average score (0-10)
        premiere_date: First air date
        num_episodes: Number of episodes
        episode_duration: Duration of one episode in minutes
        anime_type: Broadcast format (tv, movie, ova, ...)
        status: Airing status
        source: Source material (manga, light_novel, original, ...)
        studios: Tuple of studio names
        genres: Tuple of genre names
        id: Internal database ID
        created_at: Record creation timestamp
        updated_at: Record last update timestamp
    """

    mal_id: int
    title: str = ""
    title_english: Optional[str] = None
    title_japanese: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    premiere_date: Optional[date] = None
    num_episodes: Optional[int] = None
    episode_duration: Optional[int] = None
    anime_type: AnimeType = AnimeType.UNKNOWN
    status: Optional[AnimeStatus] = None
    source: Optional[str] = None
    studios: tuple[str, ...] = ()
    genres: tuple[str, ...] = ()
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class AnimeRelationship:
    """
    Typed relationship between two catalog entries.

    Stored directed (source -> target) but semantically undirected: an edge
    connects its two endpoints whichever one is the source. The target may
    reference an ID with no catalog entry yet.

    Attributes:
        source_mal_id: MAL ID of the source entry
        target_mal_id: MAL ID of the target entry
        relationship_type: Relationship tag (sequel, prequel, side_story, ...)
        id: Internal database ID
        created_at: Record creation timestamp
    """

    source_mal_id: int
    target_mal_id: int
    relationship_type: RelationshipType
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def connected_ids(self, mal_id: int) -> list[int]:
        """Returns the endpoint(s) on the other side of the edge seen from mal_id."""
        connected: list[int] = []
        if self.source_mal_id == mal_id:
            connected.append(self.target_mal_id)
        if self.target_mal_id == mal_id:
            connected.append(self.source_mal_id)
        return connected
