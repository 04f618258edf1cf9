"""
Couche adaptateurs.

Les adaptateurs exposent les services de l'application au monde extérieur.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

L'API HTTP (FastAPI) vit dans src/web/, la persistance dans
src/infrastructure/. Chaque adaptateur dépend de core/ mais core/ ne
dépend jamais des adaptateurs.
"""
