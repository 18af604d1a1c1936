"""Admin routes for the owner's Blog posts."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_blog_service
from api.v1.schemas.blog import BlogCreate, BlogListResponse, BlogResponse
from api.v1.schemas.common import StoreFaultResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.blog import Blog
from domain.services.blog_service import BlogService
from domain.services.list_manager import EntityListManager, ListOutcome

router = APIRouter(prefix="/admin/blogs", tags=["admin"])


def _respond(outcome: ListOutcome[Blog], response: Response) -> BlogListResponse:
    if not outcome.ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return BlogListResponse(
        data=[BlogResponse.model_validate(item) for item in outcome.items],
        fault=StoreFaultResponse.from_fault(outcome.fault),
    )


@router.get("", response_model=BlogListResponse, summary="List blog posts")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_blogs(
    request: Request,
    response: Response,
    user: CurrentUser,
    service: BlogService = Depends(get_blog_service),
) -> BlogListResponse:
    """Get all posts of the owner, drafts included, newest first."""
    outcome = await EntityListManager(service, user.id).load()
    return _respond(outcome, response)


@router.post(
    "",
    response_model=BlogListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a blog",
    responses={
        201: {"description": "Blog added, full list returned"},
        404: {"description": "Owner profile not found"},
        503: {"description": "Store failure, last known list returned"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_blog(
    request: Request,
    response: Response,
    body: BlogCreate,
    user: CurrentUser,
    service: BlogService = Depends(get_blog_service),
) -> BlogListResponse:
    """
    Add a blog post and return the reloaded list.

    The slug is derived from the title; posts are published immediately
    unless `is_published` is false.
    """
    outcome = await EntityListManager(service, user.id).append(**body.model_dump())
    return _respond(outcome, response)


@router.delete(
    "/{blog_id}",
    response_model=BlogListResponse,
    summary="Remove a blog",
    responses={503: {"description": "Store failure, last known list returned"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    user: CurrentUser,
    service: BlogService = Depends(get_blog_service),
) -> BlogListResponse:
    """Remove a blog post and return the reloaded list."""
    outcome = await EntityListManager(service, user.id).remove(blog_id)
    return _respond(outcome, response)
