"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports de stockage :
- ITimelineStore : Catalogue d'animes et graphe des relations typées
"""

from src.core.ports.timeline_store import ITimelineStore

__all__ = [
    "ITimelineStore",
]
