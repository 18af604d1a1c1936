"""Composite read model for the public profile page."""

from dataclasses import dataclass, field

from domain.entities.blog import Blog
from domain.entities.link import Link
from domain.entities.product import Product
from domain.entities.profile import Profile
from domain.entities.social import Social


@dataclass(frozen=True, slots=True)
class ProfileView:
    """Read-only value object: a profile bundled with its public collections.

    An absent ``profile`` means the username matched nothing; the four
    collections are then always empty.
    """

    profile: Profile | None
    socials: list[Social] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    blogs: list[Blog] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ProfileView":
        return cls(profile=None)

    @property
    def found(self) -> bool:
        return self.profile is not None
