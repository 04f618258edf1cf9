"""
Implementations SQLModel des repositories.

Ce module contient l'implementation concrete de l'interface ITimelineStore
definie dans src/core/ports/timeline_store.py, utilisant SQLModel pour
la persistance SQLite.

Le repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.timeline_store import (
    SQLModelTimelineStore,
)

__all__ = [
    "SQLModelTimelineStore",
]
