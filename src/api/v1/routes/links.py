"""Admin routes for the owner's Links."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_link_service
from api.v1.schemas.common import StoreFaultResponse
from api.v1.schemas.link import LinkCreate, LinkListResponse, LinkResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.link import Link
from domain.services.link_service import LinkService
from domain.services.list_manager import EntityListManager, ListOutcome

router = APIRouter(prefix="/admin/links", tags=["admin"])


def _respond(outcome: ListOutcome[Link], response: Response) -> LinkListResponse:
    if not outcome.ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return LinkListResponse(
        data=[LinkResponse.model_validate(item) for item in outcome.items],
        fault=StoreFaultResponse.from_fault(outcome.fault),
    )


@router.get("", response_model=LinkListResponse, summary="List links")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_links(
    request: Request,
    response: Response,
    user: CurrentUser,
    service: LinkService = Depends(get_link_service),
) -> LinkListResponse:
    """Get all links of the owner, hidden ones included, by position."""
    outcome = await EntityListManager(service, user.id).load()
    return _respond(outcome, response)


@router.post(
    "",
    response_model=LinkListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a link",
    responses={
        201: {"description": "Link added, full list returned"},
        404: {"description": "Owner profile not found"},
        503: {"description": "Store failure, last known list returned"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_link(
    request: Request,
    response: Response,
    body: LinkCreate,
    user: CurrentUser,
    service: LinkService = Depends(get_link_service),
) -> LinkListResponse:
    """Append a link card after the owner's last one and return the reloaded list."""
    outcome = await EntityListManager(service, user.id).append(**body.model_dump())
    return _respond(outcome, response)


@router.delete(
    "/{link_id}",
    response_model=LinkListResponse,
    summary="Remove a link",
    responses={503: {"description": "Store failure, last known list returned"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_link(
    request: Request,
    response: Response,
    link_id: UUID,
    user: CurrentUser,
    service: LinkService = Depends(get_link_service),
) -> LinkListResponse:
    """Remove a link and return the reloaded list."""
    outcome = await EntityListManager(service, user.id).remove(link_id)
    return _respond(outcome, response)
