"""Pydantic schemas for Blog API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import StoreFaultResponse, UrlStr


class BlogCreate(BaseModel):
    """Schema for adding a Blog post. The slug is derived from the title."""

    title: str = Field(..., min_length=1, max_length=255)
    excerpt: str = Field(..., min_length=1, max_length=500)
    content: str = ""
    cover_image_url: UrlStr | None = None
    is_published: bool = True


class BlogResponse(BaseModel):
    """Schema for Blog response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    excerpt: str
    content: str
    cover_image_url: str | None = None
    is_published: bool
    published_at: datetime | None = None
    created_at: datetime


class BlogListResponse(BaseModel):
    """Schema for the owner's list of Blog posts."""

    data: list[BlogResponse]
    fault: StoreFaultResponse | None = None
