"""Shared SQLAlchemy plumbing for the collections owned by a profile."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class SQLAlchemyCollectionRepository(ABC, Generic[T]):
    """Base for repositories whose rows all hang off ``profile_id``.

    Subclasses set ``model`` and implement the public filter, the sort order
    and the entity/model conversions.
    """

    model: ClassVar[Any]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @abstractmethod
    def _public_filter(self) -> ColumnElement[bool]:
        ...

    @abstractmethod
    def _order_by(self) -> tuple[Any, ...]:
        ...

    @abstractmethod
    def _to_entity(self, model: Any) -> T:
        ...

    @abstractmethod
    def _to_model(self, entity: T) -> Any:
        ...

    async def list_for_profile(self, profile_id: UUID) -> list[T]:
        """Get every record owned by a profile."""
        stmt = (
            select(self.model)
            .where(self.model.profile_id == profile_id)
            .order_by(*self._order_by())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def list_public(self, profile_id: UUID) -> list[T]:
        """Get the records of a profile shown on the public page."""
        stmt = (
            select(self.model)
            .where(self.model.profile_id == profile_id, self._public_filter())
            .order_by(*self._order_by())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, item: T) -> T:
        """Create a new record."""
        model = self._to_model(item)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID, profile_id: UUID) -> bool:
        """Delete a record owned by the profile."""
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True


class SQLAlchemyOrderedCollectionRepository(SQLAlchemyCollectionRepository[T]):
    """Collections shown in ascending ``order_index`` and gated by ``is_visible``."""

    def _public_filter(self) -> ColumnElement[bool]:
        return self.model.is_visible.is_(True)  # type: ignore[no-any-return]

    def _order_by(self) -> tuple[Any, ...]:
        return (self.model.order_index,)

    async def next_order_index(self, profile_id: UUID) -> int:
        """Get max(order_index) + 1 for the profile, 1 when it holds nothing."""
        stmt = select(func.coalesce(func.max(self.model.order_index), 0)).where(
            self.model.profile_id == profile_id
        )
        result = await self._session.execute(stmt)
        return int(result.scalar() or 0) + 1
