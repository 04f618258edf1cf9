"""
Exceptions du domaine timeline.

Hierarchie :
- TimelineError : base commune
- TimelineNotFoundError : l'entree racine n'existe pas (HTTP 404)
- TimelineGenerationError : tout autre echec de generation (HTTP 500)
- StoreUnavailableError : ecriture sur un store ferme ou indisponible

Les donnees partielles (entree liee absente, relations illisibles) ne sont
pas des exceptions : le noeud est ignore et l'omission journalisee.
"""

from typing import Optional


class TimelineError(Exception):
    """Erreur de base du sous-systeme timeline."""


class TimelineNotFoundError(TimelineError):
    """
    Exception levee quand l'entree racine d'une timeline est introuvable.

    Attributes:
        mal_id: ID MAL de la racine demandee
    """

    def __init__(self, mal_id: int) -> None:
        self.mal_id = mal_id
        super().__init__(f"Root anime with MAL ID {mal_id} not found")


class TimelineGenerationError(TimelineError):
    """
    Exception levee quand la generation echoue pour une autre raison.

    Attributes:
        mal_id: ID MAL de la racine demandee
    """

    def __init__(self, mal_id: int, reason: Optional[str] = None) -> None:
        self.mal_id = mal_id
        message = f"Failed to generate timeline for anime {mal_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class StoreUnavailableError(TimelineError):
    """Exception levee par une ecriture sur un store ferme ou en erreur."""
