"""Repository protocols for the collections owned by a profile."""

from typing import Protocol, TypeVar
from uuid import UUID

from domain.entities.blog import Blog
from domain.entities.link import Link
from domain.entities.product import Product
from domain.entities.social import Social

T = TypeVar("T")


class ICollectionRepository(Protocol[T]):
    """Repository interface shared by socials, links, products and blogs."""

    async def list_for_profile(self, profile_id: UUID) -> list[T]:
        """Get every record owned by a profile, hidden or not."""
        ...

    async def list_public(self, profile_id: UUID) -> list[T]:
        """Get the records of a profile that belong on the public page."""
        ...

    async def create(self, item: T) -> T:
        """Create a new record."""
        ...

    async def delete(self, id: UUID, profile_id: UUID) -> bool:
        """Delete a record owned by the profile and return success status."""
        ...


class IOrderedCollectionRepository(ICollectionRepository[T], Protocol[T]):
    """Collections sorted by a user-curated ``order_index``."""

    async def next_order_index(self, profile_id: UUID) -> int:
        """Position right after the highest one the profile currently holds."""
        ...


ISocialRepository = IOrderedCollectionRepository[Social]
ILinkRepository = IOrderedCollectionRepository[Link]
IProductRepository = IOrderedCollectionRepository[Product]
IBlogRepository = ICollectionRepository[Blog]
