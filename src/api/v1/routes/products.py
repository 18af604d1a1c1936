"""Admin routes for the owner's Products."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_product_service
from api.v1.schemas.common import StoreFaultResponse
from api.v1.schemas.product import ProductCreate, ProductListResponse, ProductResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.product import Product
from domain.services.list_manager import EntityListManager, ListOutcome
from domain.services.product_service import ProductService

router = APIRouter(prefix="/admin/products", tags=["admin"])


def _respond(outcome: ListOutcome[Product], response: Response) -> ProductListResponse:
    if not outcome.ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ProductListResponse(
        data=[ProductResponse.model_validate(item) for item in outcome.items],
        fault=StoreFaultResponse.from_fault(outcome.fault),
    )


@router.get("", response_model=ProductListResponse, summary="List products")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_products(
    request: Request,
    response: Response,
    user: CurrentUser,
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """Get all products of the owner, hidden ones included."""
    outcome = await EntityListManager(service, user.id).load()
    return _respond(outcome, response)


@router.post(
    "",
    response_model=ProductListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product",
    responses={
        201: {"description": "Product added, full list returned"},
        404: {"description": "Owner profile not found"},
        503: {"description": "Store failure, last known list returned"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_product(
    request: Request,
    response: Response,
    body: ProductCreate,
    user: CurrentUser,
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """Append a product and return the reloaded list."""
    outcome = await EntityListManager(service, user.id).append(**body.model_dump())
    return _respond(outcome, response)


@router.delete(
    "/{product_id}",
    response_model=ProductListResponse,
    summary="Remove a product",
    responses={503: {"description": "Store failure, last known list returned"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_product(
    request: Request,
    response: Response,
    product_id: UUID,
    user: CurrentUser,
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """Remove a product and return the reloaded list."""
    outcome = await EntityListManager(service, user.id).remove(product_id)
    return _respond(outcome, response)
