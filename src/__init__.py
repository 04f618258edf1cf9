"""
AnimeChrono - Timelines chronologiques des séries d'animes.

Ce package découvre toutes les entrées reliées à un anime (suites,
préquelles, films, OVA...) dans un graphe de relations, puis les ordonne
en une timeline unique.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (parcours, tri, orchestration)
- adapters/ : Interface ligne de commande
- infrastructure/ : Persistance SQLite
- web/ : API HTTP
"""
