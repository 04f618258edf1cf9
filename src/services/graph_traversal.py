"""
Service de parcours du graphe de relations entre animes.

GraphTraversalService decouvre toutes les entrees reliees transitivement a
une entree racine, en parcours en largeur (BFS) avec detection de cycles.

Regles du parcours:
- File FIFO + ensemble des visites : chaque ID est traite au plus une fois (O(V+E))
- Les relations sont traitees comme non orientees (source ou cible)
- Une entree liee absente du catalogue est ignoree, le parcours continue
- Un arc vers un ID deja visite est un cycle, enregistre a titre de diagnostic,
  sauf l'arc par lequel le noeud courant a ete decouvert
"""

from collections import deque
from collections.abc import Iterable

from loguru import logger

from src.core.entities.anime import AnimeInfo, AnimeRelationship
from src.core.entities.timeline import GraphTraversalResult, RelationshipNode
from src.core.ports.timeline_store import ITimelineStore
from src.core.value_objects import RelationshipType


class GraphTraversalService:
    """
    Service de parcours en largeur du graphe de relations.

    Le store est injecte a la construction ; aucun store par defaut.

    Attributes:
        _store: Store du catalogue et des relations
    """

    def __init__(self, store: ITimelineStore) -> None:
        """
        Initialise le service avec le store a parcourir.

        Args:
            store: Implementation de ITimelineStore
        """
        self._store = store

    def traverse(self, root_mal_id: int) -> GraphTraversalResult:
        """
        Parcourt le graphe depuis la racine.

        Une racine absente du catalogue produit un resultat sans noeud :
        la verification d'existence incombe a l'appelant.

        Args:
            root_mal_id: ID MAL de l'entree racine

        Returns:
            GraphTraversalResult avec les noeuds, l'ordre de visite et les cycles
        """
        result = GraphTraversalResult()
        visited: set[int] = set()
        # Position de premiere visite, pour extraire les chemins de cycle
        visit_index: dict[int, int] = {}
        queue: deque[int] = deque([root_mal_id])
        queued: set[int] = {root_mal_id}
        # Arc par lequel chaque noeud a ete decouvert (arc d'arbre, pas un cycle)
        tree_edges: dict[int, AnimeRelationship] = {}

        while queue:
            current_id = queue.popleft()
            queued.discard(current_id)

            if current_id in visited:
                continue

            visited.add(current_id)
            visit_index[current_id] = len(result.visited_order)
            result.visited_order.append(current_id)

            try:
                anime_info = self._store.get_anime_info(current_id)
                if anime_info is None:
                    logger.warning(f"Entree introuvable pour MAL ID {current_id}, ignoree")
                    continue

                relationships = self._store.get_relationships(current_id)
                result.nodes[current_id] = RelationshipNode(
                    mal_id=current_id,
                    anime_info=anime_info,
                    relationships=relationships,
                )

                for relationship in relationships:
                    if tree_edges.get(current_id) == relationship:
                        continue
                    for connected_id in relationship.connected_ids(current_id):
                        if connected_id in visited:
                            start = visit_index[connected_id]
                            end = visit_index[current_id]
                            cycle = result.visited_order[start : end + 1] + [connected_id]
                            result.cycles_detected.append(cycle)
                        elif connected_id not in queued:
                            queue.append(connected_id)
                            queued.add(connected_id)
                            tree_edges[connected_id] = relationship
            except Exception:
                # Donnees partielles : le noeud est ignore, le parcours continue
                logger.exception(f"Erreur lors du traitement de MAL ID {current_id}")

        logger.debug(
            "Parcours termine",
            root_mal_id=root_mal_id,
            visited=len(result.visited_order),
            nodes=len(result.nodes),
            cycles=len(result.cycles_detected),
        )
        return result

    def find_all_related(self, root_mal_id: int) -> list[AnimeInfo]:
        """Retourne toutes les entrees decouvertes, dans l'ordre de visite."""
        result = self.traverse(root_mal_id)
        return [node.anime_info for node in result.nodes.values()]

    @staticmethod
    def detect_cycles(result: GraphTraversalResult) -> list[list[int]]:
        """Retourne les chemins de cycle releves pendant un parcours."""
        return result.cycles_detected

    @staticmethod
    def filter_relationships_by_type(
        relationships: Iterable[AnimeRelationship],
        types: Iterable[RelationshipType],
    ) -> list[AnimeRelationship]:
        """Filtre les relations dont le type appartient a types."""
        allowed = set(types)
        return [rel for rel in relationships if rel.relationship_type in allowed]
