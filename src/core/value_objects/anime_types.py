"""
Objets valeur pour la classification des animes et de leurs relations.

Enumerations immutables reprenant les valeurs du catalogue MyAnimeList :
format de diffusion, statut de diffusion et type de relation entre deux titres.
"""

from enum import Enum
from typing import Optional


class AnimeType(Enum):
    """Format de diffusion d'un anime.

    Valeurs:
        TV: Serie televisee
        MOVIE: Film
        OVA: Original Video Animation
        SPECIAL: Episode special
        ONA: Original Net Animation
        MUSIC: Clip musical
        UNKNOWN: Format non determine
    """

    TV = "tv"
    MOVIE = "movie"
    OVA = "ova"
    SPECIAL = "special"
    ONA = "ona"
    MUSIC = "music"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "AnimeType":
        """Convertit une valeur brute en AnimeType, UNKNOWN si non reconnue."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.lower())
        except ValueError:
            return cls.UNKNOWN


class AnimeStatus(Enum):
    """Statut de diffusion d'un anime."""

    FINISHED_AIRING = "finished_airing"
    CURRENTLY_AIRING = "currently_airing"
    NOT_YET_AIRED = "not_yet_aired"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["AnimeStatus"]:
        """Convertit une valeur brute en AnimeStatus, None si absente ou inconnue."""
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


class RelationshipType(Enum):
    """Type de relation entre deux entrees du catalogue.

    La relation est stockee orientee (source -> cible) mais le parcours
    du graphe la traite comme non orientee.
    """

    SEQUEL = "sequel"
    PREQUEL = "prequel"
    SIDE_STORY = "side_story"
    ALTERNATIVE_VERSION = "alternative_version"
    ALTERNATIVE_SETTING = "alternative_setting"
    PARENT_STORY = "parent_story"
    SPIN_OFF = "spin_off"
    ADAPTATION = "adaptation"
    CHARACTER = "character"
    SUMMARY = "summary"
    FULL_STORY = "full_story"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> "RelationshipType":
        """Convertit une valeur brute en RelationshipType, OTHER si non reconnue."""
        if not value:
            return cls.OTHER
        try:
            return cls(value.lower())
        except ValueError:
            return cls.OTHER
