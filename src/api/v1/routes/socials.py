"""Admin routes for the owner's Social links."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_social_service
from api.v1.schemas.common import StoreFaultResponse
from api.v1.schemas.social import SocialCreate, SocialListResponse, SocialResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.social import Social
from domain.services.list_manager import EntityListManager, ListOutcome
from domain.services.social_service import SocialService

router = APIRouter(prefix="/admin/socials", tags=["admin"])


def _respond(outcome: ListOutcome[Social], response: Response) -> SocialListResponse:
    if not outcome.ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return SocialListResponse(
        data=[SocialResponse.model_validate(item) for item in outcome.items],
        fault=StoreFaultResponse.from_fault(outcome.fault),
    )


@router.get("", response_model=SocialListResponse, summary="List socials")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_socials(
    request: Request,
    response: Response,
    user: CurrentUser,
    service: SocialService = Depends(get_social_service),
) -> SocialListResponse:
    """Get all socials of the owner, hidden ones included, by position."""
    outcome = await EntityListManager(service, user.id).load()
    return _respond(outcome, response)


@router.post(
    "",
    response_model=SocialListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a social",
    responses={
        201: {"description": "Social added, full list returned"},
        404: {"description": "Owner profile not found"},
        503: {"description": "Store failure, last known list returned"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_social(
    request: Request,
    response: Response,
    body: SocialCreate,
    user: CurrentUser,
    service: SocialService = Depends(get_social_service),
) -> SocialListResponse:
    """Append a social after the owner's last one and return the reloaded list."""
    outcome = await EntityListManager(service, user.id).append(**body.model_dump())
    return _respond(outcome, response)


@router.delete(
    "/{social_id}",
    response_model=SocialListResponse,
    summary="Remove a social",
    responses={503: {"description": "Store failure, last known list returned"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_social(
    request: Request,
    response: Response,
    social_id: UUID,
    user: CurrentUser,
    service: SocialService = Depends(get_social_service),
) -> SocialListResponse:
    """Remove a social and return the reloaded list. Unknown ids are ignored."""
    outcome = await EntityListManager(service, user.id).remove(social_id)
    return _respond(outcome, response)
