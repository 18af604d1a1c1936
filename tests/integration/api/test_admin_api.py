"""Integration tests for the owner-facing collection APIs."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


class TestLinksAdminAPI:
    """Integration tests for /api/v1/admin/links."""

    @pytest.mark.asyncio
    async def test_list_links_empty(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/api/v1/admin/links")

        assert response.status_code == 200
        assert response.json() == {"data": [], "fault": None}

    @pytest.mark.asyncio
    async def test_add_link_returns_full_list(self, authenticated_client: AsyncClient):
        """Test POST /api/v1/admin/links."""
        response = await authenticated_client.post(
            "/api/v1/admin/links",
            json={"title": "Portfolio", "url": "https://example.com/work"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["fault"] is None
        assert len(body["data"]) == 1
        link = body["data"][0]
        assert link["title"] == "Portfolio"
        assert link["url"] == "https://example.com/work"
        assert link["order_index"] == 1
        assert link["is_visible"] is True

    @pytest.mark.asyncio
    async def test_url_stored_as_submitted(self, authenticated_client: AsyncClient):
        await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "Home", "url": "https://example.com"}
        )

        admin = await authenticated_client.get("/api/v1/admin/links")
        public = await authenticated_client.get("/api/v1/profiles/demo")

        assert admin.json()["data"][0]["url"] == "https://example.com"
        assert public.json()["links"][0]["url"] == "https://example.com"

    @pytest.mark.asyncio
    async def test_consecutive_adds_get_distinct_positions(
        self, authenticated_client: AsyncClient
    ):
        await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "A", "url": "https://example.com/a"}
        )
        response = await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "B", "url": "https://example.com/b"}
        )

        data = response.json()["data"]
        assert [(link["title"], link["order_index"]) for link in data] == [("A", 1), ("B", 2)]

    @pytest.mark.asyncio
    async def test_admin_list_includes_hidden(self, authenticated_client: AsyncClient):
        await authenticated_client.post(
            "/api/v1/admin/links",
            json={"title": "Hidden", "url": "https://example.com/h", "is_visible": False},
        )

        response = await authenticated_client.get("/api/v1/admin/links")

        data = response.json()["data"]
        assert len(data) == 1
        assert data[0]["is_visible"] is False

    @pytest.mark.asyncio
    async def test_remove_link(self, authenticated_client: AsyncClient):
        """Test DELETE /api/v1/admin/links/{id}."""
        create = await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "Gone", "url": "https://example.com/gone"}
        )
        link_id = create.json()["data"][0]["id"]

        response = await authenticated_client.delete(f"/api/v1/admin/links/{link_id}")

        assert response.status_code == 200
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_remove_unknown_link_is_noop(self, authenticated_client: AsyncClient):
        await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "Stay", "url": "https://example.com/stay"}
        )

        response = await authenticated_client.delete(f"/api/v1/admin/links/{uuid4()}")

        assert response.status_code == 200
        assert [link["title"] for link in response.json()["data"]] == ["Stay"]

    @pytest.mark.asyncio
    async def test_add_link_rejects_invalid_url(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "Bad", "url": "not a url"}
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_store_failure_returns_fault(self, authenticated_client: AsyncClient, engine):
        from infrastructure.database.models import LinkModel

        async with engine.begin() as conn:
            await conn.run_sync(LinkModel.__table__.drop)

        response = await authenticated_client.post(
            "/api/v1/admin/links", json={"title": "A", "url": "https://example.com/a"}
        )

        assert response.status_code == 503
        body = response.json()
        assert body["data"] == []
        assert body["fault"]["operation"] == "append"
        assert body["fault"]["error_code"] == "DATABASE_ERROR"


class TestSocialsAdminAPI:
    """Integration tests for /api/v1/admin/socials."""

    @pytest.mark.asyncio
    async def test_add_social_defaults_icon_to_platform(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/socials",
            json={"platform": "Instagram", "url": "https://instagram.com/demo"},
        )

        assert response.status_code == 201
        social = response.json()["data"][0]
        assert social["icon"] == "instagram"
        assert social["icon_kind"] == "instagram"
        assert social["order_index"] == 1

    @pytest.mark.asyncio
    async def test_add_social_with_unknown_icon(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/socials",
            json={"platform": "Blog", "url": "https://blog.example.com/", "icon": "rss"},
        )

        social = response.json()["data"][0]
        assert social["icon"] == "rss"
        assert social["icon_kind"] == "globe"

    @pytest.mark.asyncio
    async def test_remove_social(self, authenticated_client: AsyncClient):
        create = await authenticated_client.post(
            "/api/v1/admin/socials",
            json={"platform": "LinkedIn", "url": "https://linkedin.com/in/demo"},
        )
        social_id = create.json()["data"][0]["id"]

        response = await authenticated_client.delete(f"/api/v1/admin/socials/{social_id}")

        assert response.status_code == 200
        assert response.json()["data"] == []


class TestProductsAdminAPI:
    """Integration tests for /api/v1/admin/products."""

    @pytest.mark.asyncio
    async def test_add_product(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/products",
            json={
                "name": "Ebook",
                "description": "Forty pages",
                "price": "9.5",
                "currency": "eur",
                "purchase_url": "https://shop.example.com/ebook",
            },
        )

        assert response.status_code == 201
        product = response.json()["data"][0]
        assert product["price"] == "9.50"
        assert product["currency"] == "EUR"
        assert product["order_index"] == 1

    @pytest.mark.asyncio
    async def test_add_product_rejects_negative_price(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/products",
            json={
                "name": "Broken",
                "price": "-1",
                "purchase_url": "https://shop.example.com/broken",
            },
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_add_product_requires_purchase_url(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/products", json={"name": "No link", "price": "1.00"}
        )

        assert response.status_code == 422


class TestBlogsAdminAPI:
    """Integration tests for /api/v1/admin/blogs."""

    @pytest.mark.asyncio
    async def test_add_blog_derives_slug_and_publishes(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/blogs",
            json={"title": "Hello, World!", "excerpt": "First post", "content": "Body"},
        )

        assert response.status_code == 201
        blog = response.json()["data"][0]
        assert blog["slug"] == "hello-world"
        assert blog["is_published"] is True
        assert blog["published_at"] is not None

    @pytest.mark.asyncio
    async def test_duplicate_titles_share_a_slug(self, authenticated_client: AsyncClient):
        for _ in range(2):
            response = await authenticated_client.post(
                "/api/v1/admin/blogs", json={"title": "Same title", "excerpt": "x"}
            )
            assert response.status_code == 201

        slugs = [b["slug"] for b in response.json()["data"]]
        assert slugs == ["same-title", "same-title"]

    @pytest.mark.asyncio
    async def test_draft_listed_for_owner_only(self, authenticated_client: AsyncClient):
        await authenticated_client.post(
            "/api/v1/admin/blogs",
            json={"title": "Draft", "excerpt": "Soon", "is_published": False},
        )

        admin = await authenticated_client.get("/api/v1/admin/blogs")
        public = await authenticated_client.get("/api/v1/profiles/demo")

        assert [b["title"] for b in admin.json()["data"]] == ["Draft"]
        assert admin.json()["data"][0]["published_at"] is None
        assert public.json()["blogs"] == []

    @pytest.mark.asyncio
    async def test_add_blog_requires_excerpt(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/admin/blogs", json={"title": "No excerpt"}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_remove_blog(self, authenticated_client: AsyncClient):
        create = await authenticated_client.post(
            "/api/v1/admin/blogs", json={"title": "Temp", "excerpt": "x"}
        )
        blog_id = create.json()["data"][0]["id"]

        response = await authenticated_client.delete(f"/api/v1/admin/blogs/{blog_id}")

        assert response.status_code == 200
        assert response.json()["data"] == []


class TestAdminAuth:
    """Admin endpoints require a bearer token."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("collection", ["socials", "links", "products", "blogs"])
    async def test_requires_token(self, client: AsyncClient, collection: str):
        response = await client.get(f"/api/v1/admin/{collection}")

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"
