"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.profile import Profile


class FakeUnitOfWork:
    """Fake Unit of Work with the profile and collection repository mocks."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.socials = AsyncMock()
        self.links = AsyncMock()
        self.products = AsyncMock()
        self.blogs = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def owner_id() -> UUID:
    """A random owner (profile) ID."""
    return uuid4()


@pytest.fixture
def profile(owner_id: UUID) -> Profile:
    """The owner's profile."""
    return Profile(id=owner_id, username="demo", display_name="Demo User")
