"""SQLAlchemy implementation of Social repository."""

from domain.entities.social import Social
from infrastructure.database.models import SocialModel
from infrastructure.database.repositories.sqlalchemy_collection_repo import (
    SQLAlchemyOrderedCollectionRepository,
)


class SQLAlchemySocialRepository(SQLAlchemyOrderedCollectionRepository[Social]):
    """SQLAlchemy implementation of ISocialRepository."""

    model = SocialModel

    def _to_entity(self, model: SocialModel) -> Social:
        """Convert ORM model to domain entity."""
        return Social(
            id=model.id,
            profile_id=model.profile_id,
            platform=model.platform,
            url=model.url,
            icon=model.icon,
            order_index=model.order_index,
            is_visible=model.is_visible,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Social) -> SocialModel:
        """Convert domain entity to ORM model."""
        return SocialModel(
            id=entity.id,
            profile_id=entity.profile_id,
            platform=entity.platform,
            url=entity.url,
            icon=entity.icon,
            order_index=entity.order_index,
            is_visible=entity.is_visible,
            created_at=entity.created_at,
        )
