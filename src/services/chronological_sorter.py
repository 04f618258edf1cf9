"""
Service de tri chronologique des entrees d'une timeline.

ChronologicalSorter ordonne un ensemble d'entrees du catalogue et leur
attribue un rang chronologique (1..N). Fonction pure, sans E/S,
deterministe pour un ensemble d'entrees donne.

Criteres (le premier qui differe l'emporte):
1. Date de premiere diffusion croissante (date connue avant date inconnue)
2. Priorite de l'entree, derivee de son format (tv=1, movie=2, ova=3, special=4, autre=5)
3. Entree principale (tv, movie) avant entree secondaire
4. Priorite du format (tv=1 ... unknown=7)
5. Nombre d'episodes decroissant (inconnu = 0)

Note: le critere 2 tient lieu de priorite de relation. La table
RELATIONSHIP_TYPE_PRIORITIES existe mais n'intervient pas dans le tri.
"""

from collections.abc import Iterable
from datetime import date

from src.core.entities.anime import AnimeInfo
from src.core.entities.timeline import TimelineEntry
from src.core.value_objects import AnimeType, RelationshipType

MAIN_TIMELINE_TYPES = frozenset({AnimeType.TV, AnimeType.MOVIE})

ANIME_TYPE_PRIORITIES: dict[AnimeType, int] = {
    AnimeType.TV: 1,
    AnimeType.MOVIE: 2,
    AnimeType.OVA: 3,
    AnimeType.SPECIAL: 4,
    AnimeType.ONA: 5,
    AnimeType.MUSIC: 6,
    AnimeType.UNKNOWN: 7,
}

# Priorite d'une entree : seuls tv, movie, ova et special sont distingues
_ENTRY_PRIORITIES: dict[AnimeType, int] = {
    AnimeType.TV: 1,
    AnimeType.MOVIE: 2,
    AnimeType.OVA: 3,
    AnimeType.SPECIAL: 4,
}
_DEFAULT_ENTRY_PRIORITY = 5

RELATIONSHIP_TYPE_PRIORITIES: dict[RelationshipType, int] = {
    RelationshipType.PREQUEL: 1,
    RelationshipType.SEQUEL: 2,
    RelationshipType.PARENT_STORY: 3,
    RelationshipType.SPIN_OFF: 4,
    RelationshipType.SIDE_STORY: 5,
    RelationshipType.ALTERNATIVE_VERSION: 6,
    RelationshipType.ALTERNATIVE_SETTING: 7,
    RelationshipType.ADAPTATION: 8,
    RelationshipType.CHARACTER: 9,
    RelationshipType.SUMMARY: 10,
    RelationshipType.FULL_STORY: 11,
    RelationshipType.OTHER: 12,
}

_UNMAPPED_PRIORITY = 999


def is_main_timeline_entry(anime: AnimeInfo) -> bool:
    """Une entree principale est une serie TV ou un film."""
    return anime.anime_type in MAIN_TIMELINE_TYPES


def entry_priority(anime: AnimeInfo) -> int:
    """Priorite de tri d'une entree, derivee de son format uniquement."""
    return _ENTRY_PRIORITIES.get(anime.anime_type, _DEFAULT_ENTRY_PRIORITY)


def anime_type_priority(anime_type: AnimeType) -> int:
    """Priorite d'un format (tv=1 ... unknown=7)."""
    return ANIME_TYPE_PRIORITIES.get(anime_type, _UNMAPPED_PRIORITY)


def relationship_type_priority(relationship_type: RelationshipType) -> int:
    """Priorite d'un type de relation (prequel=1 ... other=12)."""
    return RELATIONSHIP_TYPE_PRIORITIES.get(relationship_type, _UNMAPPED_PRIORITY)


def _sort_key(anime: AnimeInfo) -> tuple[bool, date, int, bool, int, int]:
    """
    Cle de tri composite.

    Deux dates inconnues sont egales sur le premier critere : elles
    partagent (True, date.min) et le departage passe aux criteres suivants.
    """
    premiere = anime.premiere_date
    return (
        premiere is None,
        premiere if premiere is not None else date.min,
        entry_priority(anime),
        not is_main_timeline_entry(anime),
        anime_type_priority(anime.anime_type),
        -(anime.num_episodes or 0),
    )


class ChronologicalSorter:
    """
    Service de tri chronologique (stateless).

    Le tri Python etant stable, deux entrees egales sur tous les criteres
    conservent leur ordre d'arrivee.
    """

    def sort(self, anime_list: Iterable[AnimeInfo]) -> list[TimelineEntry]:
        """
        Trie les entrees et leur attribue un rang chronologique.

        Args:
            anime_list: Entrees decouvertes (ordre quelconque)

        Returns:
            Entrees de timeline ordonnees, rangs 1..N sans trou ni doublon
        """
        ordered = sorted(anime_list, key=_sort_key)
        return [
            TimelineEntry(
                mal_id=anime.mal_id,
                title=anime.title,
                title_english=anime.title_english,
                anime_type=anime.anime_type,
                premiere_date=anime.premiere_date,
                num_episodes=anime.num_episodes,
                episode_duration=anime.episode_duration,
                chronological_order=index,
                is_main_entry=is_main_timeline_entry(anime),
            )
            for index, anime in enumerate(ordered, start=1)
        ]
