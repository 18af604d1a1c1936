"""Link domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Link:
    """Domain entity for a custom link card."""

    profile_id: UUID
    title: str
    url: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    thumbnail_url: str | None = None
    order_index: int = 0
    is_visible: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)
