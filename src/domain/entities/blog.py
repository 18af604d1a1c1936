"""Blog post domain entity."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def derive_slug(title: str) -> str:
    """Derive a URL slug from a post title.

    Lowercases, collapses each run of non ``[a-z0-9]`` characters into a
    single ``-`` and trims ``-`` from both ends, so re-deriving a slug
    returns it unchanged::

        >>> derive_slug("Hello, World!")
        'hello-world'
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


@dataclass
class Blog:
    """Domain entity for a blog post."""

    profile_id: UUID
    title: str
    id: UUID = field(default_factory=uuid4)
    content: str = ""
    excerpt: str = ""
    cover_image_url: str | None = None
    slug: str = ""
    is_published: bool = False
    published_at: datetime | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Fill in the slug and keep updated_at >= created_at."""
        if not self.slug:
            self.slug = derive_slug(self.title)
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def publish(self, at: datetime | None = None) -> None:
        """Mark the post as published."""
        self.is_published = True
        self.published_at = at or datetime.utcnow()
        self.updated_at = self.published_at
