"""Pydantic schemas for Social API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import StoreFaultResponse, UrlStr
from domain.entities.social import IconKind


class SocialCreate(BaseModel):
    """Schema for adding a Social link. ``icon`` defaults to the platform."""

    platform: str = Field(..., min_length=1, max_length=50)
    url: UrlStr
    icon: str | None = Field(None, max_length=50)
    is_visible: bool = True


class SocialResponse(BaseModel):
    """Schema for Social response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "platform": "Twitter",
                "url": "https://twitter.com/demo",
                "icon": "twitter",
                "icon_kind": "twitter",
                "order_index": 1,
                "is_visible": True,
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    platform: str
    url: str
    icon: str
    icon_kind: IconKind
    order_index: int
    is_visible: bool
    created_at: datetime


class SocialListResponse(BaseModel):
    """Schema for the owner's list of Socials."""

    data: list[SocialResponse]
    fault: StoreFaultResponse | None = None
