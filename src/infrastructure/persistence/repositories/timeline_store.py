"""
Implementation SQLModel du store timeline.

Implemente l'interface ITimelineStore pour la persistance du catalogue
d'animes et des relations typees dans la base de donnees SQLite via SQLModel.

Les lectures privilegient la disponibilite : toute erreur de la base est
journalisee puis convertie en "absent" ou "vide".
"""

from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.anime import AnimeInfo, AnimeRelationship
from src.core.exceptions import StoreUnavailableError
from src.core.ports.timeline_store import ITimelineStore
from src.core.value_objects import AnimeStatus, AnimeType, RelationshipType
from src.infrastructure.persistence.models import (
    AnimeInfoModel,
    AnimeRelationshipModel,
)


class SQLModelTimelineStore(ITimelineStore):
    """
    Repository SQLModel pour le catalogue et le graphe de relations.

    Implemente ITimelineStore avec conversion bidirectionnelle
    entre les entites AnimeInfo/AnimeRelationship (domaine) et
    AnimeInfoModel/AnimeRelationshipModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session
        self._closed = False

    @property
    def closed(self) -> bool:
        """Indique si close() a deja ete appele."""
        return self._closed

    def _to_entity(self, model: AnimeInfoModel) -> AnimeInfo:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele AnimeInfoModel depuis la DB

        Retourne :
            L'entite AnimeInfo correspondante
        """
        return AnimeInfo(
            id=model.id,
            mal_id=model.mal_id,
            title=model.title,
            title_english=model.title_english,
            title_japanese=model.title_japanese,
            image_url=model.image_url,
            rating=model.rating,
            premiere_date=model.premiere_date,
            num_episodes=model.num_episodes,
            episode_duration=model.episode_duration,
            anime_type=AnimeType.parse(model.anime_type),
            status=AnimeStatus.parse(model.status),
            source=model.source,
            studios=tuple(model.studios),
            genres=tuple(model.genres),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply_to_model(self, entity: AnimeInfo, model: AnimeInfoModel) -> None:
        """Recopie les champs de l'entite sur le modele (hors id et created_at)."""
        model.mal_id = entity.mal_id
        model.title = entity.title
        model.title_english = entity.title_english
        model.title_japanese = entity.title_japanese
        model.image_url = entity.image_url
        model.rating = entity.rating
        model.premiere_date = entity.premiere_date
        model.num_episodes = entity.num_episodes
        model.episode_duration = entity.episode_duration
        model.anime_type = entity.anime_type.value
        model.status = entity.status.value if entity.status else None
        model.source = entity.source
        model.studios = list(entity.studios)
        model.genres = list(entity.genres)
        model.updated_at = datetime.utcnow()

    @staticmethod
    def _relationship_to_entity(model: AnimeRelationshipModel) -> AnimeRelationship:
        """Convertit un modele de relation en entite domaine."""
        return AnimeRelationship(
            id=model.id,
            source_mal_id=model.source_mal_id,
            target_mal_id=model.target_mal_id,
            relationship_type=RelationshipType.parse(model.relationship_type),
            created_at=model.created_at,
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreUnavailableError("Timeline store is closed")

    def get_anime_info(self, mal_id: int) -> Optional[AnimeInfo]:
        """Recupere une entree par son ID MAL, None si absente ou illisible."""
        if self._closed:
            logger.warning("Lecture sur un store ferme", mal_id=mal_id)
            return None
        try:
            statement = select(AnimeInfoModel).where(AnimeInfoModel.mal_id == mal_id)
            model = self._session.exec(statement).first()
            if model:
                return self._to_entity(model)
            return None
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Erreur lecture anime_info MAL ID {mal_id}: {e}")
            return None

    def get_relationships(self, mal_id: int) -> list[AnimeRelationship]:
        """Recupere les relations ou l'entree est source ou cible, [] en cas d'erreur."""
        if self._closed:
            logger.warning("Lecture sur un store ferme", mal_id=mal_id)
            return []
        try:
            statement = (
                select(AnimeRelationshipModel)
                .where(
                    or_(
                        AnimeRelationshipModel.source_mal_id == mal_id,
                        AnimeRelationshipModel.target_mal_id == mal_id,
                    )
                )
                .order_by(AnimeRelationshipModel.id)
            )
            models = self._session.exec(statement).all()
            return [self._relationship_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Erreur lecture relations MAL ID {mal_id}: {e}")
            return []

    def store_anime_info(self, anime: AnimeInfo) -> AnimeInfo:
        """
        Insere ou remplace une entree (cle : mal_id).

        L'entree est relue apres ecriture pour retourner l'etat stocke.

        Raises:
            StoreUnavailableError: Store ferme, ou entree illisible apres ecriture
            SQLAlchemyError: Erreur d'ecriture (propagee apres rollback)
        """
        self._ensure_open()
        try:
            statement = select(AnimeInfoModel).where(AnimeInfoModel.mal_id == anime.mal_id)
            model = self._session.exec(statement).first()
            if model is None:
                model = AnimeInfoModel(mal_id=anime.mal_id, title=anime.title)
            self._apply_to_model(anime, model)
            self._session.add(model)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception(f"Erreur ecriture anime_info MAL ID {anime.mal_id}")
            raise

        stored = self.get_anime_info(anime.mal_id)
        if stored is None:
            raise StoreUnavailableError(
                f"Failed to retrieve stored anime info for MAL ID {anime.mal_id}"
            )
        return stored

    def store_relationship(
        self,
        source_mal_id: int,
        target_mal_id: int,
        relationship_type: RelationshipType,
    ) -> None:
        """Insere une relation, sans effet si le triplet existe deja."""
        self._ensure_open()
        statement = select(AnimeRelationshipModel).where(
            AnimeRelationshipModel.source_mal_id == source_mal_id,
            AnimeRelationshipModel.target_mal_id == target_mal_id,
            AnimeRelationshipModel.relationship_type == relationship_type.value,
        )
        if self._session.exec(statement).first() is not None:
            return

        self._session.add(
            AnimeRelationshipModel(
                source_mal_id=source_mal_id,
                target_mal_id=target_mal_id,
                relationship_type=relationship_type.value,
            )
        )
        try:
            self._session.commit()
        except IntegrityError:
            # Insere entre-temps par un autre ecrivain
            self._session.rollback()
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception(
                f"Erreur ecriture relation {source_mal_id} -> {target_mal_id}"
            )
            raise

    def close(self) -> None:
        """Ferme la session. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._session.close()
