"""
Point d'entrée CLI d'AnimeChrono.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import batch, related, status, timeline
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

__version__ = "0.1.0"

app = typer.Typer(
    name="animechrono",
    help="Timelines chronologiques des séries d'animes",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """AnimeChrono - Timelines de séries d'animes."""
    settings = container.config()
    configure_logging(
        log_level=level_from_verbosity(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(timeline)
app.command()(batch)
app.command()(status)
app.command()(related)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration AnimeChrono")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Taille max d'un lot : {config.batch_max_size}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AnimeChrono v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API HTTP AnimeChrono."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    logger.debug("Démarrage d'AnimeChrono", version=__version__)
    app()


if __name__ == "__main__":
    main()
