"""
Couche infrastructure d'AnimeChrono.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage SQLite avec SQLModel (modeles et store timeline)

Architecture hexagonale : le store implemente ITimelineStore, ce qui permet
de changer de base sans modifier la logique metier.
"""
