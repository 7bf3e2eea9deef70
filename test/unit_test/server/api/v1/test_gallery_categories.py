"""
Unit tests for Gallery Category API endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def create_category(client: AsyncClient, name: str, **extra) -> dict:
    response = await client.post("/api/v1/gallery-categories", json={"name": name, **extra})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateCategory:
    """Test category creation and slug generation."""

    async def test_slug_generated_from_name(self, client: AsyncClient):
        data = await create_category(client, "  Nail Art & Design ", description="Hand-painted designs")

        assert data["name"] == "Nail Art & Design"
        assert data["slug"] == "nail-art-design"
        assert data["description"] == "Hand-painted designs"
        assert data["isActive"] is True

    async def test_explicit_slug(self, client: AsyncClient):
        data = await create_category(client, "Gel Polish", slug="gel")
        assert data["slug"] == "gel"

    async def test_invalid_explicit_slug(self, client: AsyncClient):
        response = await client.post("/api/v1/gallery-categories", json={"name": "Gel", "slug": "Gel Polish"})
        assert response.status_code == 422

    async def test_duplicate_name_ignores_case(self, client: AsyncClient):
        await create_category(client, "Manicure")

        response = await client.post("/api/v1/gallery-categories", json={"name": "MANICURE", "slug": "mani"})
        assert response.status_code == 409
        assert response.json()["detail"] == "Category with this name already exists"

    async def test_duplicate_slug(self, client: AsyncClient):
        await create_category(client, "Nail Art")

        response = await client.post("/api/v1/gallery-categories", json={"name": "Nail-Art"})
        assert response.status_code == 409
        assert response.json()["detail"] == "Category with this slug already exists"

    async def test_name_without_slug_characters(self, client: AsyncClient):
        response = await client.post("/api/v1/gallery-categories", json={"name": "!!!"})
        assert response.status_code == 400

    async def test_blank_name(self, client: AsyncClient):
        response = await client.post("/api/v1/gallery-categories", json={"name": "   "})
        assert response.status_code == 422

    async def test_requires_admin(self, public_client: AsyncClient):
        response = await public_client.post("/api/v1/gallery-categories", json={"name": "Manicure"})
        assert response.status_code == 401


class TestReadCategories:
    async def test_list_ordered_by_sort_index(self, client: AsyncClient, public_client: AsyncClient):
        await create_category(client, "Pedicure", sortIndex=2)
        await create_category(client, "Manicure", sortIndex=1)

        response = await public_client.get("/api/v1/gallery-categories")
        assert response.status_code == 200
        body = response.json()
        assert [item["slug"] for item in body["data"]] == ["manicure", "pedicure"]
        assert body["pagination"]["limit"] == 100

    async def test_list_active_only(self, client: AsyncClient):
        await create_category(client, "Manicure")
        await create_category(client, "Hidden", isActive=False)

        response = await client.get("/api/v1/gallery-categories", params={"isActive": "true"})
        assert [item["slug"] for item in response.json()["data"]] == ["manicure"]

    async def test_search_name_and_slug(self, client: AsyncClient, public_client: AsyncClient):
        """Test search matches the name or the slug case-insensitively."""
        await create_category(client, "Nail Art")
        await create_category(client, "Gel Polish", slug="gel-shine")
        await create_category(client, "Pedicure")

        response = await public_client.get("/api/v1/gallery-categories", params={"search": "ART"})
        assert [item["slug"] for item in response.json()["data"]] == ["nail-art"]

        response = await public_client.get("/api/v1/gallery-categories", params={"search": "shine"})
        assert [item["name"] for item in response.json()["data"]] == ["Gel Polish"]
        assert response.json()["pagination"]["total"] == 1

    async def test_search_treats_wildcards_literally(self, client: AsyncClient):
        await create_category(client, "Manicure")

        response = await client.get("/api/v1/gallery-categories", params={"search": "%"})
        assert response.json()["data"] == []

    async def test_get_by_id_and_slug(self, client: AsyncClient, public_client: AsyncClient):
        created = await create_category(client, "Nail Art")

        by_id = await public_client.get(f"/api/v1/gallery-categories/{created['id']}")
        by_slug = await public_client.get("/api/v1/gallery-categories/slug/nail-art")
        assert by_id.json()["id"] == by_slug.json()["id"] == created["id"]

    async def test_get_missing(self, public_client: AsyncClient):
        assert (await public_client.get("/api/v1/gallery-categories/999")).status_code == 404
        assert (await public_client.get("/api/v1/gallery-categories/slug/nope")).status_code == 404


class TestUpdateCategory:
    async def test_rename_regenerates_slug(self, client: AsyncClient):
        created = await create_category(client, "Nail Art")

        response = await client.patch(f"/api/v1/gallery-categories/{created['id']}", json={"name": "Nail Designs"})
        assert response.status_code == 200
        assert response.json()["slug"] == "nail-designs"

    async def test_update_other_fields_keeps_slug(self, client: AsyncClient):
        created = await create_category(client, "Nail Art", slug="art")

        response = await client.patch(
            f"/api/v1/gallery-categories/{created['id']}", json={"description": "New", "sortIndex": 3}
        )
        data = response.json()
        assert data["slug"] == "art"
        assert data["description"] == "New"
        assert data["sortIndex"] == 3

    async def test_rename_conflict(self, client: AsyncClient):
        await create_category(client, "Manicure")
        other = await create_category(client, "Pedicure")

        response = await client.patch(f"/api/v1/gallery-categories/{other['id']}", json={"name": "manicure"})
        assert response.status_code == 409

    async def test_update_missing(self, client: AsyncClient):
        response = await client.patch("/api/v1/gallery-categories/999", json={"name": "X"})
        assert response.status_code == 404


class TestDeleteCategory:
    async def test_delete(self, client: AsyncClient):
        created = await create_category(client, "Manicure")

        assert (await client.delete(f"/api/v1/gallery-categories/{created['id']}")).status_code == 204
        assert (await client.get(f"/api/v1/gallery-categories/{created['id']}")).status_code == 404

    async def test_all_category_is_protected(self, client: AsyncClient):
        created = await create_category(client, "All")

        response = await client.delete(f"/api/v1/gallery-categories/{created['id']}")
        assert response.status_code == 400
        assert response.json()["detail"] == 'Cannot delete the "all" category (system default)'

    async def test_referenced_category_is_protected(self, client: AsyncClient):
        created = await create_category(client, "Manicure")
        await client.post(
            "/api/v1/gallery",
            json={"imageUrl": "https://cdn.pinknail.com/1.jpg", "title": "Pink French", "categoryId": created["id"]},
        )

        response = await client.delete(f"/api/v1/gallery-categories/{created['id']}")
        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot delete category: 1 gallery item(s) reference this category"

    async def test_delete_missing(self, client: AsyncClient):
        assert (await client.delete("/api/v1/gallery-categories/999")).status_code == 404
