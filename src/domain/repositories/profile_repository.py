"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities (read-only)."""

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_by_username(self, username: str) -> Profile | None:
        """Get a profile by exact, case-sensitive username."""
        ...

    async def get_for_update(self, id: UUID) -> Profile | None:
        """Get a profile by ID, holding a row lock until the transaction ends."""
        ...
