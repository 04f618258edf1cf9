"""
Interface port pour le stockage des relations entre animes.

Interface abstraite (port) definissant le contrat d'acces aux entrees du
catalogue et aux relations typees qui les relient. Les implementations
(adaptateurs) fournissent le stockage concret (SQLite via SQLModel, mock
pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.anime import AnimeInfo, AnimeRelationship
from src.core.value_objects import RelationshipType


class ITimelineStore(ABC):
    """
    Interface de stockage du catalogue et du graphe de relations.

    Les lectures ne levent jamais d'exception : une erreur d'E/S est
    journalisee puis convertie en "absent" (None) ou "vide" ([]).
    Un store degrade appauvrit le resultat d'un parcours sans l'interrompre.
    """

    @abstractmethod
    def get_anime_info(self, mal_id: int) -> Optional[AnimeInfo]:
        """Recupere une entree du catalogue par son ID MAL, None si absente."""
        ...

    @abstractmethod
    def get_relationships(self, mal_id: int) -> list[AnimeRelationship]:
        """Recupere les relations dont l'entree est la source OU la cible."""
        ...

    @abstractmethod
    def store_anime_info(self, anime: AnimeInfo) -> AnimeInfo:
        """Insere ou remplace une entree (cle : ID MAL). Retourne l'entree stockee."""
        ...

    @abstractmethod
    def store_relationship(
        self,
        source_mal_id: int,
        target_mal_id: int,
        relationship_type: RelationshipType,
    ) -> None:
        """Insere une relation. Sans effet si le triplet existe deja."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Libere les ressources. Les appels suivants echouent proprement."""
        ...
