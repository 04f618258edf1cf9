"""
Commandes CLI d'AnimeChrono.

Les commandes sont montees sur l'application Typer dans src/main.py.
"""

from src.adapters.cli.commands.timeline_commands import (
    batch,
    related,
    status,
    timeline,
)

__all__ = [
    "batch",
    "related",
    "status",
    "timeline",
]
