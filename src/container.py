"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Chaque service timeline recoit explicitement son store : aucun store global.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelTimelineStore
from .services.chronological_sorter import ChronologicalSorter
from .services.timeline import TimelineService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.timeline_service()
        try:
            timeline = service.get_timeline(16498)
        finally:
            service.close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Store - Factory pour une session fraiche par requete
    timeline_store = providers.Factory(
        SQLModelTimelineStore,
        session=session,
    )

    # Tri (stateless - Singleton)
    chronological_sorter = providers.Singleton(ChronologicalSorter)

    # Orchestration - Factory, le store etant propre a chaque appel
    timeline_service = providers.Factory(
        TimelineService,
        store=timeline_store,
        sorter=chronological_sorter,
    )
