"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StoreError
from infrastructure.database.repositories.sqlalchemy_blog_repo import SQLAlchemyBlogRepository
from infrastructure.database.repositories.sqlalchemy_link_repo import SQLAlchemyLinkRepository
from infrastructure.database.repositories.sqlalchemy_product_repo import SQLAlchemyProductRepository
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository
from infrastructure.database.repositories.sqlalchemy_social_repo import SQLAlchemySocialRepository

logger = structlog.get_logger()


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    Database errors escaping the context are rolled back and re-raised as
    ``StoreError`` so callers can tell a failed operation from an empty one.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def profiles(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        return SQLAlchemyProfileRepository(self._require_session())

    @property
    def socials(self) -> SQLAlchemySocialRepository:
        """Get social link repository."""
        return SQLAlchemySocialRepository(self._require_session())

    @property
    def links(self) -> SQLAlchemyLinkRepository:
        """Get link repository."""
        return SQLAlchemyLinkRepository(self._require_session())

    @property
    def products(self) -> SQLAlchemyProductRepository:
        """Get product repository."""
        return SQLAlchemyProductRepository(self._require_session())

    @property
    def blogs(self) -> SQLAlchemyBlogRepository:
        """Get blog repository."""
        return SQLAlchemyBlogRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            try:
                if exc_type:
                    await self.rollback()
            except SQLAlchemyError as rollback_exc:
                self._log_failure(rollback_exc)
                raise StoreError() from rollback_exc
            finally:
                await self._session.close()
                self._session = None

        if isinstance(exc_val, SQLAlchemyError):
            self._log_failure(exc_val)
            raise StoreError() from exc_val

    @staticmethod
    def _log_failure(exc: SQLAlchemyError) -> None:
        logger.error(
            "store_operation_failed",
            error=str(exc),
            error_type=type(exc).__name__,
        )
