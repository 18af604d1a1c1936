"""SQLAlchemy implementation of Blog repository."""

from typing import Any

from sqlalchemy import ColumnElement

from domain.entities.blog import Blog
from infrastructure.database.models import BlogModel
from infrastructure.database.repositories.sqlalchemy_collection_repo import (
    SQLAlchemyCollectionRepository,
)


class SQLAlchemyBlogRepository(SQLAlchemyCollectionRepository[Blog]):
    """SQLAlchemy implementation of IBlogRepository (newest posts first)."""

    model = BlogModel

    def _public_filter(self) -> ColumnElement[bool]:
        return BlogModel.is_published.is_(True)

    def _order_by(self) -> tuple[Any, ...]:
        return (BlogModel.created_at.desc(),)

    def _to_entity(self, model: BlogModel) -> Blog:
        """Convert ORM model to domain entity."""
        return Blog(
            id=model.id,
            profile_id=model.profile_id,
            title=model.title,
            content=model.content,
            excerpt=model.excerpt,
            cover_image_url=model.cover_image_url,
            slug=model.slug,
            is_published=model.is_published,
            published_at=model.published_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Blog) -> BlogModel:
        """Convert domain entity to ORM model."""
        return BlogModel(
            id=entity.id,
            profile_id=entity.profile_id,
            title=entity.title,
            content=entity.content,
            excerpt=entity.excerpt,
            cover_image_url=entity.cover_image_url,
            slug=entity.slug,
            is_published=entity.is_published,
            published_at=entity.published_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
