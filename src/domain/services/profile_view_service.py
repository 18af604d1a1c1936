"""Assembles the public profile page from a profile and its collections."""

from collections.abc import Callable

import structlog

from domain.entities.profile_view import ProfileView
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileViewService:
    """Builds the composite read model served on the public page."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def assemble(self, username: str) -> ProfileView:
        """Get a profile by username together with its public collections.

        Socials, links and products are limited to visible records in
        ascending ``order_index``; blogs to published posts, newest first.
        An unknown username yields ``ProfileView.empty()`` and no collection
        is queried.
        """
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_username(username)
            if not profile:
                logger.info("profile_not_found", username=username)
                return ProfileView.empty()

            view = ProfileView(
                profile=profile,
                socials=await uow.socials.list_public(profile.id),
                links=await uow.links.list_public(profile.id),
                products=await uow.products.list_public(profile.id),
                blogs=await uow.blogs.list_public(profile.id),
            )

        logger.info(
            "profile_view_assembled",
            username=username,
            socials=len(view.socials),
            links=len(view.links),
            products=len(view.products),
            blogs=len(view.blogs),
        )
        return view
