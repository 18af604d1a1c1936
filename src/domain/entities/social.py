"""Social link domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class IconKind(StrEnum):
    """Icons the public page knows how to draw for a social link."""

    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    GLOBE = "globe"
    EMAIL = "email"

    @classmethod
    def from_key(cls, key: str | None) -> "IconKind":
        """Resolve a stored icon key, falling back to the globe icon."""
        if not key:
            return cls.GLOBE
        try:
            return cls(key.strip().lower())
        except ValueError:
            return cls.GLOBE


@dataclass
class Social:
    """Domain entity for a social profile link."""

    profile_id: UUID
    platform: str
    url: str
    id: UUID = field(default_factory=uuid4)
    icon: str = ""
    order_index: int = 0
    is_visible: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Default the icon key to the platform name, always lowercased."""
        self.icon = (self.icon or self.platform).strip().lower()

    @property
    def icon_kind(self) -> IconKind:
        return IconKind.from_key(self.icon)
