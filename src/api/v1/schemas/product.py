"""Pydantic schemas for Product API."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import StoreFaultResponse, UrlStr


class ProductCreate(BaseModel):
    """Schema for adding a Product."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    currency: str = Field("USD", pattern=r"^[A-Za-z]{3}$")
    image_url: UrlStr | None = None
    purchase_url: UrlStr
    is_visible: bool = True


class ProductResponse(BaseModel):
    """Schema for Product response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "223e4567-e89b-12d3-a456-426614174000",
                "name": "Preset pack",
                "description": "Twelve film-style presets",
                "price": "19.99",
                "currency": "USD",
                "image_url": None,
                "purchase_url": "https://shop.example.com/presets",
                "order_index": 1,
                "is_visible": True,
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    description: str | None = None
    price: Decimal
    currency: str
    image_url: str | None = None
    purchase_url: str
    order_index: int
    is_visible: bool
    created_at: datetime


class ProductListResponse(BaseModel):
    """Schema for the owner's list of Products."""

    data: list[ProductResponse]
    fault: StoreFaultResponse | None = None
