"""
Utilitaires partages pour les commandes CLI d'AnimeChrono.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- timeline_service_scope : context manager fournissant un TimelineService
  initialise puis fermant son store
- render_timeline : affichage d'une timeline sous forme de tableau Rich
"""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from src.container import Container
from src.core.entities.timeline import SeriesTimeline
from src.services.timeline import TimelineService

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


@contextmanager
def timeline_service_scope(container: Container | None = None) -> Iterator[TimelineService]:
    """
    Fournit un TimelineService sur une base initialisee, ferme en sortie.

    Args:
        container: Container DI a utiliser (nouveau container si None)
    """
    container = container or Container()
    container.database.init()
    service = container.timeline_service()
    try:
        yield service
    finally:
        service.close()


def render_timeline(timeline: SeriesTimeline) -> Table:
    """Construit le tableau Rich d'une timeline."""
    table = Table(
        title=f"Timeline MAL {timeline.root_mal_id}",
        caption=(
            f"{timeline.total_entries} entrees, "
            f"{timeline.main_timeline_count} principales"
        ),
    )
    table.add_column("#", justify="right", style="bold")
    table.add_column("MAL ID", justify="right")
    table.add_column("Titre")
    table.add_column("Type")
    table.add_column("Premiere")
    table.add_column("Episodes", justify="right")

    for entry in timeline.entries:
        title = entry.title
        if entry.title_english and entry.title_english != entry.title:
            title = f"{title}\n[dim]{entry.title_english}[/dim]"
        style = None if entry.is_main_entry else "dim"
        table.add_row(
            str(entry.chronological_order),
            str(entry.mal_id),
            title,
            entry.anime_type.value,
            entry.premiere_date.isoformat() if entry.premiere_date else "?",
            str(entry.num_episodes) if entry.num_episodes else "?",
            style=style,
        )
    return table
