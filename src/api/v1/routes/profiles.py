"""Public profile page routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_profile_view_service
from api.v1.schemas.profile import ProfileViewResponse
from core.config import settings
from core.exceptions import ProfileNotFoundError
from core.rate_limit import READ_LIMIT, limiter
from domain.services.profile_view_service import ProfileViewService

router = APIRouter(tags=["profiles"])


async def _render(service: ProfileViewService, username: str) -> ProfileViewResponse:
    view = await service.assemble(username)
    if not view.found:
        raise ProfileNotFoundError(username)
    return ProfileViewResponse.from_view(view)


@router.get(
    "/profile",
    response_model=ProfileViewResponse,
    summary="Get the default public page",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_default_profile(
    request: Request,
    service: ProfileViewService = Depends(get_profile_view_service),
) -> ProfileViewResponse:
    """Get the page of the configured public username."""
    return await _render(service, settings.public_username)


@router.get(
    "/profiles/{username}",
    response_model=ProfileViewResponse,
    summary="Get a public page by username",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    username: str,
    service: ProfileViewService = Depends(get_profile_view_service),
) -> ProfileViewResponse:
    """
    Get a profile with its visible socials, links and products (in their
    manual order) and its published blog posts (newest first).
    """
    return await _render(service, username)
