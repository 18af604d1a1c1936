"""Product domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass
class Product:
    """Domain entity for a product tile."""

    profile_id: UUID
    name: str
    purchase_url: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    price: Decimal = Decimal("0")
    currency: str = "USD"
    image_url: str | None = None
    order_index: int = 0
    is_visible: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Normalize price to two decimal places and currency to upper case."""
        if self.price < 0:
            raise ValueError("Product price must not be negative")
        self.price = Decimal(self.price).quantize(Decimal("0.01"))
        self.currency = self.currency.upper()
