"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- AnimeType : Format de diffusion (tv, movie, ova, special, ona, music, unknown)
- AnimeStatus : Statut de diffusion (termine, en cours, pas encore diffuse)
- RelationshipType : Type de relation entre deux titres (sequel, prequel, ...)
"""

from src.core.value_objects.anime_types import (
    AnimeStatus,
    AnimeType,
    RelationshipType,
)

__all__ = [
    "AnimeType",
    "AnimeStatus",
    "RelationshipType",
]
