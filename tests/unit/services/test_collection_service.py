"""Unit tests for the collection services."""

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from core.exceptions import ProfileNotFoundError
from domain.entities.blog import Blog
from domain.entities.link import Link
from domain.entities.product import Product
from domain.entities.profile import Profile
from domain.entities.social import Social
from domain.services.blog_service import BlogService
from domain.services.link_service import LinkService
from domain.services.product_service import ProductService
from domain.services.social_service import SocialService
from tests.unit.conftest import FakeUnitOfWork


def _echo(item):  # repository create() returns what it was given
    return item


# --- add (ordered collections) ---


class TestOrderedAdd:
    @pytest.mark.asyncio
    async def test_link_gets_next_position(
        self, uow: FakeUnitOfWork, owner_id: UUID, profile: Profile
    ):
        uow.profiles.get_for_update.return_value = profile
        uow.links.next_order_index.return_value = 4
        uow.links.create.side_effect = _echo
        service = LinkService(lambda: uow)

        result = await service.add(owner_id, title="Portfolio", url="https://example.com/work")

        assert isinstance(result, Link)
        assert result.profile_id == owner_id
        assert result.order_index == 4
        uow.profiles.get_for_update.assert_called_once_with(owner_id)
        uow.links.next_order_index.assert_called_once_with(owner_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_first_item_is_position_one(
        self, uow: FakeUnitOfWork, owner_id: UUID, profile: Profile
    ):
        uow.profiles.get_for_update.return_value = profile
        uow.socials.next_order_index.return_value = 1
        uow.socials.create.side_effect = _echo
        service = SocialService(lambda: uow)

        result = await service.add(owner_id, platform="Twitter", url="https://twitter.com/demo")

        assert isinstance(result, Social)
        assert result.order_index == 1
        assert result.icon == "twitter"

    @pytest.mark.asyncio
    async def test_product_fields_pass_through(
        self, uow: FakeUnitOfWork, owner_id: UUID, profile: Profile
    ):
        uow.profiles.get_for_update.return_value = profile
        uow.products.next_order_index.return_value = 2
        uow.products.create.side_effect = _echo
        service = ProductService(lambda: uow)

        result = await service.add(
            owner_id,
            name="Preset pack",
            price=Decimal("19.99"),
            currency="usd",
            purchase_url="https://shop.example.com/presets",
        )

        assert isinstance(result, Product)
        assert result.price == Decimal("19.99")
        assert result.currency == "USD"

    @pytest.mark.asyncio
    async def test_unknown_owner_raises(self, uow: FakeUnitOfWork, owner_id: UUID):
        uow.profiles.get_for_update.return_value = None
        service = LinkService(lambda: uow)

        with pytest.raises(ProfileNotFoundError):
            await service.add(owner_id, title="Orphan", url="https://example.com/x")

        uow.links.create.assert_not_called()
        assert not uow.committed


# --- add (blogs) ---


class TestBlogAdd:
    @pytest.mark.asyncio
    async def test_publishes_by_default(
        self, uow: FakeUnitOfWork, owner_id: UUID, profile: Profile
    ):
        uow.profiles.get_for_update.return_value = profile
        uow.blogs.create.side_effect = _echo
        service = BlogService(lambda: uow)

        result = await service.add(owner_id, title="Hello, World!", excerpt="First post")

        assert isinstance(result, Blog)
        assert result.slug == "hello-world"
        assert result.is_published is True
        assert result.published_at is not None
        assert uow.committed

    @pytest.mark.asyncio
    async def test_draft_when_not_published(
        self, uow: FakeUnitOfWork, owner_id: UUID, profile: Profile
    ):
        uow.profiles.get_for_update.return_value = profile
        uow.blogs.create.side_effect = _echo
        service = BlogService(lambda: uow)

        result = await service.add(
            owner_id, title="Work in progress", excerpt="Soon", is_published=False
        )

        assert result.is_published is False
        assert result.published_at is None


# --- list / remove ---


class TestListAndRemove:
    @pytest.mark.asyncio
    async def test_list_for_owner_includes_hidden(self, uow: FakeUnitOfWork, owner_id: UUID):
        items = [
            Link(profile_id=owner_id, title="A", url="https://a.example.com/", order_index=1),
            Link(
                profile_id=owner_id,
                title="B",
                url="https://b.example.com/",
                order_index=2,
                is_visible=False,
            ),
        ]
        uow.links.list_for_profile.return_value = items
        service = LinkService(lambda: uow)

        result = await service.list_for_owner(owner_id)

        assert result == items
        uow.links.list_for_profile.assert_called_once_with(owner_id)

    @pytest.mark.asyncio
    async def test_list_public_delegates(self, uow: FakeUnitOfWork, owner_id: UUID):
        uow.blogs.list_public.return_value = []
        service = BlogService(lambda: uow)

        assert await service.list_public(owner_id) == []
        uow.blogs.list_public.assert_called_once_with(owner_id)

    @pytest.mark.asyncio
    async def test_remove_is_scoped_to_owner(self, uow: FakeUnitOfWork, owner_id: UUID):
        item_id = uuid4()
        uow.products.delete.return_value = True
        service = ProductService(lambda: uow)

        assert await service.remove(owner_id, item_id) is True
        uow.products.delete.assert_called_once_with(item_id, owner_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_remove_unknown_id_is_noop(self, uow: FakeUnitOfWork, owner_id: UUID):
        uow.socials.delete.return_value = False
        service = SocialService(lambda: uow)

        assert await service.remove(owner_id, uuid4()) is False


# --- abstract hooks ---


class TestAbstractHooks:
    def test_service_without_build_cannot_be_instantiated(self, uow: FakeUnitOfWork):
        from domain.services.collection_service import CollectionService

        class Unbuildable(CollectionService[Link]):
            collection = "links"

        with pytest.raises(TypeError):
            Unbuildable(lambda: uow)

    def test_concrete_services_instantiate(self, uow: FakeUnitOfWork):
        for service_cls in (SocialService, LinkService, ProductService, BlogService):
            assert service_cls(lambda: uow).collection
