"""
Modeles SQLModel pour la base de donnees AnimeChrono.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- anime_info: Entrees du catalogue (cle externe unique : mal_id)
- anime_relationships: Relations typees entre entrees (triplet unique)
- timeline_cache: Schema reserve, jamais lu ni ecrit par le calcul des timelines

Les champs JSON (*_json) permettent de stocker des listes (studios, genres)
de maniere serialisee dans SQLite.
"""

from __future__ import annotations

import json
from datetime import date, datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class AnimeInfoModel(SQLModel, table=True):
    """
    Modele representant une entree du catalogue d'animes.

    Les metadonnees proviennent de MyAnimeList via le client d'ingestion.
    L'ecriture est un upsert sur mal_id.
    """

    __tablename__ = "anime_info"

    id: int | None = Field(default=None, primary_key=True)
    mal_id: int = Field(unique=True, index=True)
    title: str
    title_english: str | None = None
    title_japanese: str | None = None
    image_url: str | None = None
    rating: float | None = None  # Note moyenne MAL (0-10)
    premiere_date: date | None = None
    num_episodes: int | None = None
    episode_duration: int | None = None  # Minutes par episode
    anime_type: str = Field(default="unknown")
    status: str | None = None
    source: str | None = None  # ex: "manga", "light_novel", "original"
    studios_json: str | None = None  # JSON: ["Wit Studio"]
    genres_json: str | None = None  # JSON: ["Action", "Drama"]
    created_at: datetime | None = Field(default_factory=datetime.utcnow)
    updated_at: datetime | None = Field(default_factory=datetime.utcnow)

    @property
    def studios(self) -> list[str]:
        """Retourne les studios deserialises."""
        if self.studios_json:
            return json.loads(self.studios_json)
        return []

    @studios.setter
    def studios(self, value: list[str]) -> None:
        """Serialise les studios en JSON."""
        self.studios_json = json.dumps(value)

    @property
    def genres(self) -> list[str]:
        """Retourne les genres deserialises."""
        if self.genres_json:
            return json.loads(self.genres_json)
        return []

    @genres.setter
    def genres(self, value: list[str]) -> None:
        """Serialise les genres en JSON."""
        self.genres_json = json.dumps(value)


class AnimeRelationshipModel(SQLModel, table=True):
    """
    Modele representant une relation orientee entre deux entrees.

    Pas de cle etrangere : une relation peut viser un mal_id
    pas encore present dans anime_info.
    """

    __tablename__ = "anime_relationships"
    __table_args__ = (
        UniqueConstraint(
            "source_mal_id",
            "target_mal_id",
            "relationship_type",
            name="uq_anime_relationships_triple",
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    source_mal_id: int = Field(index=True)
    target_mal_id: int = Field(index=True)
    relationship_type: str
    created_at: datetime | None = Field(default_factory=datetime.utcnow)


class TimelineCacheModel(SQLModel, table=True):
    """
    Modele du cache de timelines.

    Present dans le schema uniquement : les timelines sont toujours
    recalculees depuis anime_info et anime_relationships.
    """

    __tablename__ = "timeline_cache"

    id: int | None = Field(default=None, primary_key=True)
    root_mal_id: int = Field(unique=True, index=True)
    timeline_data: str  # JSON serialise de SeriesTimeline
    cache_version: int = Field(default=1)
    created_at: datetime | None = Field(default_factory=datetime.utcnow)
    updated_at: datetime | None = Field(default_factory=datetime.utcnow)
