"""
Dépendances partagées de l'application web.

Fournit la configuration et un TimelineService par requête, dont le store
est fermé en fin de requête.
"""

from collections.abc import Iterator

from fastapi import Request

from ..config import Settings
from ..services.timeline import TimelineService


def get_settings(request: Request) -> Settings:
    """Paramètres de l'application depuis le container DI."""
    return request.app.state.container.config()


def get_timeline_service(request: Request) -> Iterator[TimelineService]:
    """TimelineService sur une session fraîche, fermé après la requête."""
    service = request.app.state.container.timeline_service()
    try:
        yield service
    finally:
        service.close()
