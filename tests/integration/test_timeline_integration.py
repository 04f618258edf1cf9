"""
Tests d'integration de la generation de timeline avec le vrai store.

Ces tests utilisent SQLModelTimelineStore sur une base SQLite en memoire
(pas de mocks) pour valider le flow complet : store, parcours, tri et
assemblage par TimelineService.
"""

from datetime import date

import pytest

from src.core.exceptions import StoreUnavailableError, TimelineNotFoundError
from src.core.value_objects import AnimeType, RelationshipType
from src.infrastructure.persistence.repositories import SQLModelTimelineStore
from src.services.timeline import TimelineService


@pytest.fixture
def service(store: SQLModelTimelineStore) -> TimelineService:
    return TimelineService(store=store)


@pytest.fixture
def two_seasons(store, anime_factory) -> SQLModelTimelineStore:
    """Deux saisons TV reliees par une relation sequel."""
    store.store_anime_info(
        anime_factory(1, premiere_date=date(2013, 4, 7), num_episodes=25)
    )
    store.store_anime_info(
        anime_factory(2, premiere_date=date(2017, 4, 1), num_episodes=12)
    )
    store.store_relationship(1, 2, RelationshipType.SEQUEL)
    return store


class TestTimelineFromDatabase:
    """Generation de timeline de bout en bout sur SQLite."""

    def test_sequel_pair_from_root(self, two_seasons, service) -> None:
        timeline = service.get_timeline(1)

        assert [e.mal_id for e in timeline.entries] == [1, 2]
        assert [e.chronological_order for e in timeline.entries] == [1, 2]
        assert timeline.total_entries == 2
        assert timeline.main_timeline_count == 2

    def test_sequel_pair_from_target(self, two_seasons, service) -> None:
        """La relation est suivie dans les deux sens."""
        timeline = service.get_timeline(2)

        assert timeline.root_mal_id == 2
        assert [e.mal_id for e in timeline.entries] == [1, 2]

    def test_mutual_edges_and_duplicates(self, two_seasons, service) -> None:
        two_seasons.store_relationship(2, 1, RelationshipType.PREQUEL)
        two_seasons.store_relationship(1, 2, RelationshipType.SEQUEL)

        timeline = service.get_timeline(1)

        assert len(two_seasons.get_relationships(1)) == 2
        assert [e.mal_id for e in timeline.entries] == [1, 2]

    def test_dangling_relationship_is_ignored(self, two_seasons, service) -> None:
        two_seasons.store_relationship(2, 99, RelationshipType.SPIN_OFF)

        timeline = service.get_timeline(1)

        assert [e.mal_id for e in timeline.entries] == [1, 2]

    def test_side_story_is_not_main(self, two_seasons, service, anime_factory) -> None:
        two_seasons.store_anime_info(
            anime_factory(3, anime_type=AnimeType.OVA, premiere_date=date(2013, 12, 9))
        )
        two_seasons.store_relationship(1, 3, RelationshipType.SIDE_STORY)

        timeline = service.get_timeline(2)

        assert [e.mal_id for e in timeline.entries] == [1, 3, 2]
        assert timeline.main_timeline_count == 2
        assert timeline.entries[1].is_main_entry is False

    def test_unknown_root(self, store, service) -> None:
        with pytest.raises(TimelineNotFoundError):
            service.get_timeline(42)

    def test_closed_store(self, two_seasons, service) -> None:
        service.close()

        with pytest.raises(TimelineNotFoundError):
            service.get_timeline(1)
        with pytest.raises(StoreUnavailableError):
            two_seasons.store_relationship(1, 2, RelationshipType.SEQUEL)
