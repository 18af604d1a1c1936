"""Pydantic schemas for the public profile page."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from api.v1.schemas.blog import BlogResponse
from api.v1.schemas.link import LinkResponse
from api.v1.schemas.product import ProductResponse
from api.v1.schemas.social import SocialResponse
from domain.entities.profile_view import ProfileView


class ProfileResponse(BaseModel):
    """Schema for the profile header."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    display_name: str
    bio: str
    avatar_url: str | None = None
    theme: str
    created_at: datetime


class ProfileViewResponse(BaseModel):
    """Schema for the assembled public page."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "profile": {
                    "id": "6fdb0787-d11e-4ea2-b204-38a0168a6186",
                    "username": "demo",
                    "display_name": "Demo User",
                    "bio": "Maker of small things.",
                    "avatar_url": None,
                    "theme": "default",
                    "created_at": "2026-01-28T10:00:00",
                },
                "socials": [],
                "links": [],
                "products": [],
                "blogs": [],
            }
        },
    )

    profile: ProfileResponse
    socials: list[SocialResponse]
    links: list[LinkResponse]
    products: list[ProductResponse]
    blogs: list[BlogResponse]

    @classmethod
    def from_view(cls, view: ProfileView) -> "ProfileViewResponse":
        return cls(
            profile=ProfileResponse.model_validate(view.profile),
            socials=[SocialResponse.model_validate(s) for s in view.socials],
            links=[LinkResponse.model_validate(link) for link in view.links],
            products=[ProductResponse.model_validate(p) for p in view.products],
            blogs=[BlogResponse.model_validate(b) for b in view.blogs],
        )
