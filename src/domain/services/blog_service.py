"""Blog post service."""

from datetime import datetime
from typing import Any
from uuid import UUID

from domain.entities.blog import Blog
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.collection_service import CollectionService


class BlogService(CollectionService[Blog]):
    """Service layer for Blog posts.

    Posts are ordered by creation time rather than by a manual position. The
    slug comes from the title, and a post is published on submission unless
    the caller asks for a draft.
    """

    collection = "blogs"

    async def _build(
        self,
        uow: IUnitOfWork,
        owner_id: UUID,
        is_published: bool = True,
        **fields: Any,
    ) -> Blog:
        blog = Blog(profile_id=owner_id, **fields)
        if is_published:
            blog.publish(datetime.utcnow())
        return blog
