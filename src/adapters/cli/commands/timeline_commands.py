"""
Commandes CLI de generation des timelines.

- timeline : timeline complete d'une entree
- batch : timelines de plusieurs entrees
- status : disponibilite d'une timeline
- related : entrees decouvertes et cycles detectes (diagnostic)
"""

import json
from typing import Annotated

import typer

from src.adapters.cli.helpers import (
    console,
    render_timeline,
    suppress_loguru,
    timeline_service_scope,
)
from src.container import Container
from src.core.exceptions import TimelineError, TimelineNotFoundError
from src.services.graph_traversal import GraphTraversalService


def timeline(
    mal_id: Annotated[int, typer.Argument(min=1, help="ID MyAnimeList de l'entree racine")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Sortie JSON au lieu du tableau")
    ] = False,
) -> None:
    """Affiche la timeline chronologique d'un anime."""
    with timeline_service_scope() as service:
        try:
            result = service.get_timeline(mal_id)
        except TimelineNotFoundError:
            console.print(f"[red]Erreur: MAL ID {mal_id} introuvable[/red]")
            raise typer.Exit(1)
        except TimelineError as e:
            console.print(f"[red]Erreur: {e}[/red]")
            raise typer.Exit(2)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    with suppress_loguru():
        console.print(render_timeline(result))


def batch(
    mal_ids: Annotated[list[int], typer.Argument(help="IDs MyAnimeList des racines")],
) -> None:
    """Genere les timelines de plusieurs animes."""
    with timeline_service_scope() as service:
        result = service.batch_get_timelines(mal_ids)

    with suppress_loguru():
        for item in result.successful:
            console.print(render_timeline(item))
        for failure in result.failed:
            console.print(f"[red]MAL ID {failure.mal_id}: {failure.error}[/red]")
        console.print(
            f"\n[bold]{len(result.successful)}[/bold] succes, "
            f"[bold]{len(result.failed)}[/bold] echecs"
        )
    if result.failed:
        raise typer.Exit(1)


def status(
    mal_id: Annotated[int, typer.Argument(min=1, help="ID MyAnimeList de l'entree")],
) -> None:
    """Indique si une timeline peut etre generee pour un anime."""
    with timeline_service_scope() as service:
        result = service.get_timeline_status(mal_id)

    if not result.exists:
        console.print(f"[yellow]Aucune timeline pour MAL ID {mal_id}[/yellow]")
        raise typer.Exit(1)
    console.print(
        f"[green]MAL ID {mal_id}[/green] : {result.entry_count} entrees, "
        f"{result.main_entry_count} principales"
    )


def related(
    mal_id: Annotated[int, typer.Argument(min=1, help="ID MyAnimeList de l'entree racine")],
) -> None:
    """Liste les entrees reliees et les cycles detectes (diagnostic)."""
    container = Container()
    container.database.init()
    store = container.timeline_store()
    traversal = GraphTraversalService(store)
    try:
        result = traversal.traverse(mal_id)
    finally:
        store.close()

    missing = [i for i in result.visited_order if i not in result.nodes]
    console.print(f"[bold cyan]Visites:[/bold cyan] {len(result.visited_order)}")
    for node_id in result.visited_order:
        node = result.nodes.get(node_id)
        if node is None:
            console.print(f"  {node_id} [dim](absent du catalogue)[/dim]")
        else:
            console.print(f"  {node_id} {node.anime_info.title}")
    if missing:
        console.print(f"[yellow]{len(missing)} entree(s) absente(s) du catalogue[/yellow]")
    for cycle in traversal.detect_cycles(result):
        console.print(f"[dim]Cycle: {' -> '.join(str(i) for i in cycle)}[/dim]")
