"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.blog_service import BlogService
from domain.services.link_service import LinkService
from domain.services.product_service import ProductService
from domain.services.profile_view_service import ProfileViewService
from domain.services.social_service import SocialService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_view_service() -> ProfileViewService:
    """Get Profile view service instance."""
    return ProfileViewService(get_uow_factory())


@lru_cache
def get_social_service() -> SocialService:
    """Get Social service instance."""
    return SocialService(get_uow_factory())


@lru_cache
def get_link_service() -> LinkService:
    """Get Link service instance."""
    return LinkService(get_uow_factory())


@lru_cache
def get_product_service() -> ProductService:
    """Get Product service instance."""
    return ProductService(get_uow_factory())


@lru_cache
def get_blog_service() -> BlogService:
    """Get Blog service instance."""
    return BlogService(get_uow_factory())
