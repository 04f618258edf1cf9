"""
Service de generation des timelines de series.

TimelineService orchestre la generation d'une timeline : verification de
la racine, parcours du graphe de relations, tri chronologique et
assemblage du resultat.

Les timelines sont recalculees a chaque appel depuis le store : aucun cache
n'est consulte ni alimente, la table timeline_cache restant inutilisee.
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from src.core.entities.timeline import (
    BatchFailure,
    BatchTimelineResult,
    CacheStatistics,
    SeriesTimeline,
    TimelineStatus,
)
from src.core.exceptions import (
    TimelineError,
    TimelineGenerationError,
    TimelineNotFoundError,
)
from src.core.ports.timeline_store import ITimelineStore
from src.services.chronological_sorter import ChronologicalSorter
from src.services.graph_traversal import GraphTraversalService


class TimelineService:
    """
    Service principal de generation des timelines.

    Compose GraphTraversalService et ChronologicalSorter autour d'un store
    injecte.

    Example:
        service = TimelineService(store=store)
        timeline = service.get_timeline(16498)
        for entry in timeline.entries:
            print(entry.chronological_order, entry.title)
    """

    def __init__(
        self,
        store: ITimelineStore,
        traversal: Optional[GraphTraversalService] = None,
        sorter: Optional[ChronologicalSorter] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            store: Store du catalogue et des relations
            traversal: Service de parcours (construit sur store si absent)
            sorter: Service de tri (instance neuve si absent)
        """
        self._store = store
        self._traversal = traversal or GraphTraversalService(store)
        self._sorter = sorter or ChronologicalSorter()

    def get_timeline(self, root_mal_id: int) -> SeriesTimeline:
        """
        Genere la timeline complete d'une entree.

        Une entree sans aucune relation produit une timeline d'une seule entree.

        Args:
            root_mal_id: ID MAL de l'entree racine

        Returns:
            SeriesTimeline ordonnee

        Raises:
            TimelineNotFoundError: La racine est absente du catalogue
                (ou le store est indisponible lors de sa lecture)
            TimelineGenerationError: Tout autre echec
        """
        logger.info(f"Generation de la timeline pour MAL ID {root_mal_id}")
        try:
            return self._build_timeline(root_mal_id)
        except TimelineError:
            raise
        except Exception as e:
            logger.exception(f"Echec de generation de la timeline MAL ID {root_mal_id}")
            raise TimelineGenerationError(root_mal_id, str(e)) from e

    def _build_timeline(self, root_mal_id: int) -> SeriesTimeline:
        root_anime = self._store.get_anime_info(root_mal_id)
        if root_anime is None:
            raise TimelineNotFoundError(root_mal_id)

        logger.debug("Racine trouvee : {}", root_anime.title, root_mal_id=root_mal_id)

        traversal = self._traversal.traverse(root_mal_id)
        related = [node.anime_info for node in traversal.nodes.values()]
        entries = self._sorter.sort(related)

        main_count = sum(1 for entry in entries if entry.is_main_entry)
        timeline = SeriesTimeline(
            root_mal_id=root_mal_id,
            entries=tuple(entries),
            total_entries=len(entries),
            main_timeline_count=main_count,
            last_updated=datetime.now(timezone.utc),
        )

        logger.info(
            "Timeline generee : {} entrees ({} principales)",
            timeline.total_entries,
            timeline.main_timeline_count,
            root_mal_id=root_mal_id,
        )
        return timeline

    def refresh_timeline(self, root_mal_id: int) -> SeriesTimeline:
        """Regenere la timeline. Equivalent a get_timeline, rien n'etant mis en cache."""
        logger.info(f"Rafraichissement de la timeline pour MAL ID {root_mal_id}")
        return self.get_timeline(root_mal_id)

    def invalidate_timeline(self, root_mal_id: int) -> None:
        """Sans effet : les timelines sont toujours recalculees depuis le store."""
        logger.debug(
            f"Rien a invalider pour MAL ID {root_mal_id} : timelines toujours recalculees"
        )

    def get_cache_statistics(self) -> CacheStatistics:
        """Statistiques du cache, toujours vides."""
        return CacheStatistics()

    def cleanup_stale_cache(self, max_age_hours: int = 24) -> int:
        """
        Sans effet : aucun cache a purger.

        Returns:
            Nombre de timelines supprimees (toujours 0)
        """
        logger.debug(f"Aucun cache a purger (age max {max_age_hours}h)")
        return 0

    def get_timeline_status(self, root_mal_id: int) -> TimelineStatus:
        """
        Indique si une timeline peut etre generee pour l'entree.

        Ne leve jamais : une racine absente ou un echec de generation
        donnent exists=False et des compteurs nuls.
        """
        try:
            timeline = self.get_timeline(root_mal_id)
        except TimelineError as e:
            logger.warning(f"Statut timeline MAL ID {root_mal_id} indisponible : {e}")
            return TimelineStatus(exists=False)

        return TimelineStatus(
            exists=True,
            cached=False,
            stale=False,
            last_updated=timeline.last_updated,
            entry_count=timeline.total_entries,
            main_entry_count=timeline.main_timeline_count,
        )

    def batch_get_timelines(self, root_mal_ids: Iterable[int]) -> BatchTimelineResult:
        """
        Genere les timelines de plusieurs racines, sequentiellement.

        Chaque ID est traite independamment : un echec est consigne dans
        failed et n'empeche pas le traitement des suivants. Ne leve jamais.

        Args:
            root_mal_ids: IDs MAL des racines

        Returns:
            BatchTimelineResult avec les succes et les echecs (ID, message)
        """
        ids = list(root_mal_ids)
        result = BatchTimelineResult()
        logger.info(f"Traitement par lot de {len(ids)} timelines")

        for mal_id in ids:
            try:
                result.successful.append(self.get_timeline(mal_id))
            except Exception as e:
                result.failed.append(BatchFailure(mal_id=mal_id, error=str(e)))
                logger.error(f"Echec de la timeline MAL ID {mal_id} : {e}")

        logger.info(
            f"Lot termine : {len(result.successful)} succes, {len(result.failed)} echecs"
        )
        return result

    def close(self) -> None:
        """Ferme le store sous-jacent."""
        self._store.close()
