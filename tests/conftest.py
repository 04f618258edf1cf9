"""
Fixtures pytest partagees pour les tests AnimeChrono.

Ce module contient les fixtures communes utilisees dans les tests:
- Fabrique d'entrees AnimeInfo
- Mock de ITimelineStore construit depuis un graphe en memoire
- Base SQLite en memoire et store SQLModel associe
- Settings de test avec chemins temporaires
- Capture des messages loguru
"""

from collections.abc import Callable, Iterable, Iterator
from datetime import date
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pytest
from loguru import logger
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.config import Settings
from src.core.entities.anime import AnimeInfo, AnimeRelationship
from src.core.ports.timeline_store import ITimelineStore
from src.core.value_objects import AnimeType, RelationshipType
from src.infrastructure.persistence import models  # noqa: F401
from src.infrastructure.persistence.repositories import SQLModelTimelineStore

Edge = tuple[int, int, RelationshipType]


def make_anime(
    mal_id: int,
    anime_type: AnimeType = AnimeType.TV,
    premiere_date: Optional[date] = None,
    num_episodes: Optional[int] = None,
    title: Optional[str] = None,
    **kwargs,
) -> AnimeInfo:
    """Construit une AnimeInfo de test avec un titre par defaut."""
    return AnimeInfo(
        mal_id=mal_id,
        title=title or f"Anime {mal_id}",
        anime_type=anime_type,
        premiere_date=premiere_date,
        num_episodes=num_episodes,
        **kwargs,
    )


@pytest.fixture
def anime_factory() -> Callable[..., AnimeInfo]:
    """Fabrique d'AnimeInfo (voir make_anime)."""
    return make_anime


@pytest.fixture
def graph_store() -> Callable[[Iterable[AnimeInfo], Iterable[Edge]], MagicMock]:
    """
    Fabrique de mocks ITimelineStore adosses a un graphe en memoire.

    Le mock renvoie les entrees par ID et les relations touchant un ID
    (source ou cible), comme le ferait un store reel.
    """

    def build(animes: Iterable[AnimeInfo], edges: Iterable[Edge]) -> MagicMock:
        catalog = {anime.mal_id: anime for anime in animes}
        relationships = [
            AnimeRelationship(source_mal_id=s, target_mal_id=t, relationship_type=r)
            for s, t, r in edges
        ]

        mock = MagicMock(spec=ITimelineStore)
        mock.get_anime_info.side_effect = lambda mal_id: catalog.get(mal_id)
        mock.get_relationships.side_effect = lambda mal_id: [
            rel
            for rel in relationships
            if mal_id in (rel.source_mal_id, rel.target_mal_id)
        ]
        return mock

    return build


@pytest.fixture
def session() -> Iterator[Session]:
    """Session SQLModel sur une base SQLite en memoire, tables creees."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


@pytest.fixture
def store(session: Session) -> SQLModelTimelineStore:
    """Store SQLModel sur la base en memoire."""
    return SQLModelTimelineStore(session=session)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base et logs de chaque test.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        batch_max_size=5,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """
    Capture les messages loguru de niveau DEBUG et plus.

    Garantit qu'un handler est actif : loguru ne formate un message que
    si au moins un handler l'accepte.
    """
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
