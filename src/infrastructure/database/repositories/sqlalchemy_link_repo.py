"""SQLAlchemy implementation of Link repository."""

from domain.entities.link import Link
from infrastructure.database.models import LinkModel
from infrastructure.database.repositories.sqlalchemy_collection_repo import (
    SQLAlchemyOrderedCollectionRepository,
)


class SQLAlchemyLinkRepository(SQLAlchemyOrderedCollectionRepository[Link]):
    """SQLAlchemy implementation of ILinkRepository."""

    model = LinkModel

    def _to_entity(self, model: LinkModel) -> Link:
        """Convert ORM model to domain entity."""
        return Link(
            id=model.id,
            profile_id=model.profile_id,
            title=model.title,
            url=model.url,
            description=model.description,
            thumbnail_url=model.thumbnail_url,
            order_index=model.order_index,
            is_visible=model.is_visible,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Link) -> LinkModel:
        """Convert domain entity to ORM model."""
        return LinkModel(
            id=entity.id,
            profile_id=entity.profile_id,
            title=entity.title,
            url=entity.url,
            description=entity.description,
            thumbnail_url=entity.thumbnail_url,
            order_index=entity.order_index,
            is_visible=entity.is_visible,
            created_at=entity.created_at,
        )
