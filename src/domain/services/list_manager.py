"""Owner-scoped list state behind the admin collection endpoints."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from uuid import UUID

import structlog

from core.exceptions import StoreError
from domain.services.collection_service import CollectionService

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class StoreFault:
    """A store failure recorded while loading or mutating a list."""

    operation: str
    error_code: str
    message: str


@dataclass(frozen=True, slots=True)
class ListOutcome(Generic[T]):
    """The list as last loaded, plus the fault of the operation if any."""

    items: list[T]
    fault: StoreFault | None = None

    @property
    def ok(self) -> bool:
        return self.fault is None


class EntityListManager(Generic[T]):
    """Keeps one owner's records of a collection and applies mutations.

    Every mutation is followed by a full reload, whether or not it
    succeeded. Store failures never raise out of the manager; they come back
    as the ``fault`` of the returned ``ListOutcome`` and the list keeps its
    last good contents.
    """

    def __init__(self, service: CollectionService[T], owner_id: UUID) -> None:
        self._service = service
        self._owner_id = owner_id
        self._items: list[T] = []

    @property
    def items(self) -> list[T]:
        return list(self._items)

    async def load(self) -> ListOutcome[T]:
        """Replace the list with the owner's current records."""
        return self._outcome(await self._reload())

    async def append(self, **fields: Any) -> ListOutcome[T]:
        """Insert a record for the owner, then reload."""
        fault = None
        try:
            await self._service.add(self._owner_id, **fields)
        except StoreError as exc:
            fault = self._fault("append", exc)
        reload_fault = await self._reload()
        return self._outcome(fault or reload_fault)

    async def remove(self, item_id: UUID) -> ListOutcome[T]:
        """Delete one of the owner's records by id, then reload."""
        fault = None
        try:
            await self._service.remove(self._owner_id, item_id)
        except StoreError as exc:
            fault = self._fault("remove", exc)
        reload_fault = await self._reload()
        return self._outcome(fault or reload_fault)

    async def _reload(self) -> StoreFault | None:
        try:
            self._items = await self._service.list_for_owner(self._owner_id)
        except StoreError as exc:
            return self._fault("load", exc)
        return None

    def _fault(self, operation: str, exc: StoreError) -> StoreFault:
        logger.warning(
            "collection_fault",
            collection=self._service.collection,
            owner_id=str(self._owner_id),
            operation=operation,
            error=exc.message,
        )
        return StoreFault(
            operation=operation,
            error_code=exc.error_code.value,
            message=exc.message,
        )

    def _outcome(self, fault: StoreFault | None) -> ListOutcome[T]:
        return ListOutcome(items=list(self._items), fault=fault)
