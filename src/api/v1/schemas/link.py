"""Pydantic schemas for Link API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import StoreFaultResponse, UrlStr


class LinkCreate(BaseModel):
    """Schema for adding a Link."""

    title: str = Field(..., min_length=1, max_length=255)
    url: UrlStr
    description: str | None = Field(None, max_length=1000)
    thumbnail_url: UrlStr | None = None
    is_visible: bool = True


class LinkResponse(BaseModel):
    """Schema for Link response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    url: str
    description: str | None = None
    thumbnail_url: str | None = None
    order_index: int
    is_visible: bool
    created_at: datetime


class LinkListResponse(BaseModel):
    """Schema for the owner's list of Links."""

    data: list[LinkResponse]
    fault: StoreFaultResponse | None = None
