"""Service layer shared by the collections a profile owns."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError
from domain.repositories.collection_repository import (
    ICollectionRepository,
    IOrderedCollectionRepository,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

T = TypeVar("T")


class CollectionService(ABC, Generic[T]):
    """Create, list and delete the records of one collection for an owner.

    Subclasses name the collection and say how to build a new record; every
    operation runs in its own Unit of Work.
    """

    collection: ClassVar[str]

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def _repo(self, uow: IUnitOfWork) -> ICollectionRepository[T]:
        return getattr(uow, self.collection)  # type: ignore[no-any-return]

    @abstractmethod
    async def _build(self, uow: IUnitOfWork, owner_id: UUID, **fields: Any) -> T:
        """Make the entity to insert for the owner."""

    async def list_for_owner(self, owner_id: UUID) -> list[T]:
        """Get every record the owner holds, ignoring visibility flags."""
        async with self._uow_factory() as uow:
            return await self._repo(uow).list_for_profile(owner_id)

    async def list_public(self, profile_id: UUID) -> list[T]:
        """Get the records of a profile that belong on the public page."""
        async with self._uow_factory() as uow:
            return await self._repo(uow).list_public(profile_id)

    async def add(self, owner_id: UUID, **fields: Any) -> T:
        """Create a record for the owner.

        The owner's profile row stays locked until commit so that concurrent
        appends for the same owner are applied one after the other.
        """
        async with self._uow_factory() as uow:
            owner = await uow.profiles.get_for_update(owner_id)
            if not owner:
                raise ProfileNotFoundError(str(owner_id))

            item = await self._build(uow, owner_id, **fields)
            created = await self._repo(uow).create(item)
            await uow.commit()

        logger.info(
            "collection_item_added",
            collection=self.collection,
            owner_id=str(owner_id),
            item_id=str(getattr(created, "id", "")),
        )
        return created

    async def remove(self, owner_id: UUID, item_id: UUID) -> bool:
        """Delete one of the owner's records. Unknown ids are a no-op."""
        async with self._uow_factory() as uow:
            deleted = await self._repo(uow).delete(item_id, owner_id)
            await uow.commit()

        logger.info(
            "collection_item_removed",
            collection=self.collection,
            owner_id=str(owner_id),
            item_id=str(item_id),
            deleted=deleted,
        )
        return deleted


class OrderedCollectionService(CollectionService[T]):
    """Collection whose records carry a user-curated ``order_index``."""

    entity: ClassVar[Callable[..., Any]]

    def _repo(self, uow: IUnitOfWork) -> IOrderedCollectionRepository[T]:
        return getattr(uow, self.collection)  # type: ignore[no-any-return]

    async def _build(self, uow: IUnitOfWork, owner_id: UUID, **fields: Any) -> T:
        order_index = await self._repo(uow).next_order_index(owner_id)
        return self.entity(profile_id=owner_id, order_index=order_index, **fields)  # type: ignore[no-any-return]
