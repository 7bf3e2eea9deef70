"""
Unit tests for Service Menu API endpoints.

Tests cover CRUD operations, public versus admin access, filtering,
ordering, pagination and the booking reference check on delete.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

SERVICE_PAYLOAD = {
    "name": "Classic Manicure",
    "description": "Shape, cuticle care and polish",
    "price": 25.0,
    "duration": 30,
    "category": "manicure",
}


async def create_service(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/api/v1/services", json={**SERVICE_PAYLOAD, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateService:
    """Test service creation endpoint."""

    async def test_create_service_success(self, client: AsyncClient):
        data = await create_service(client, imageUrl="https://cdn.pinknail.com/manicure.jpg", featured=True)

        assert data["id"] > 0
        assert data["name"] == "Classic Manicure"
        assert data["price"] == 25.0
        assert data["duration"] == 30
        assert data["category"] == "manicure"
        assert data["imageUrl"] == "https://cdn.pinknail.com/manicure.jpg"
        assert data["featured"] is True
        assert data["isActive"] is True
        assert data["sortIndex"] == 0
        assert "createdAt" in data and "updatedAt" in data

    async def test_create_service_duplicate_name(self, client: AsyncClient):
        await create_service(client)

        response = await client.post("/api/v1/services", json=SERVICE_PAYLOAD)
        assert response.status_code == 409

    @pytest.mark.parametrize(
        "field, value",
        [
            ("price", -1),
            ("duration", 14),
            ("category", "waxing"),
            ("name", ""),
        ],
    )
    async def test_create_service_validation(self, client: AsyncClient, field, value):
        response = await client.post("/api/v1/services", json={**SERVICE_PAYLOAD, field: value})
        assert response.status_code == 422

    async def test_create_service_boundaries(self, client: AsyncClient):
        """Test a free 15 minute service is accepted."""
        data = await create_service(client, price=0, duration=15)
        assert data["price"] == 0
        assert data["duration"] == 15

    async def test_create_service_requires_admin(self, public_client: AsyncClient):
        response = await public_client.post("/api/v1/services", json=SERVICE_PAYLOAD)
        assert response.status_code == 401


class TestReadServices:
    """Test service retrieval and listing."""

    async def test_get_service_public(self, client: AsyncClient, public_client: AsyncClient):
        created = await create_service(client)

        response = await public_client.get(f"/api/v1/services/{created['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Classic Manicure"

    async def test_get_service_not_found(self, public_client: AsyncClient):
        response = await public_client.get("/api/v1/services/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Service with ID 999 not found"

    async def test_list_services_envelope(self, client: AsyncClient, public_client: AsyncClient):
        await create_service(client)

        response = await public_client.get("/api/v1/services")
        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 1
        assert body["pagination"] == {"total": 1, "page": 1, "limit": 10, "totalPages": 1}

    async def test_list_services_filters(self, client: AsyncClient):
        await create_service(client)
        await create_service(client, name="Spa Pedicure", category="pedicure", featured=True)
        await create_service(client, name="Retired Art", category="nail-art", isActive=False)

        response = await client.get("/api/v1/services", params={"category": "pedicure"})
        assert [item["name"] for item in response.json()["data"]] == ["Spa Pedicure"]

        response = await client.get("/api/v1/services", params={"featured": "true"})
        assert [item["name"] for item in response.json()["data"]] == ["Spa Pedicure"]

        response = await client.get("/api/v1/services", params={"isActive": "false"})
        assert [item["name"] for item in response.json()["data"]] == ["Retired Art"]

    async def test_list_services_ordering(self, client: AsyncClient):
        """Test ascending sort index, then newest first."""
        await create_service(client, name="Older", sortIndex=1)
        await create_service(client, name="Newer", sortIndex=1)
        await create_service(client, name="First", sortIndex=0)

        response = await client.get("/api/v1/services")
        assert [item["name"] for item in response.json()["data"]] == ["First", "Newer", "Older"]

    async def test_list_services_pagination(self, client: AsyncClient):
        for index in range(5):
            await create_service(client, name=f"Service {index}", sortIndex=index)

        response = await client.get("/api/v1/services", params={"page": 2, "limit": 2})
        body = response.json()
        assert [item["name"] for item in body["data"]] == ["Service 2", "Service 3"]
        assert body["pagination"] == {"total": 5, "page": 2, "limit": 2, "totalPages": 3}

    async def test_list_services_page_past_end(self, client: AsyncClient):
        await create_service(client)

        response = await client.get("/api/v1/services", params={"page": 5})
        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 1

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}])
    async def test_list_services_invalid_pagination(self, public_client: AsyncClient, params):
        response = await public_client.get("/api/v1/services", params=params)
        assert response.status_code == 422


class TestUpdateService:
    """Test partial updates."""

    async def test_update_service_partial(self, client: AsyncClient):
        created = await create_service(client)

        response = await client.patch(f"/api/v1/services/{created['id']}", json={"price": 30.5})
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 30.5
        assert data["name"] == "Classic Manicure"
        assert data["duration"] == 30

    async def test_update_service_clear_image(self, client: AsyncClient):
        created = await create_service(client, imageUrl="https://cdn.pinknail.com/a.jpg")

        response = await client.patch(f"/api/v1/services/{created['id']}", json={"imageUrl": None})
        assert response.json()["imageUrl"] is None

    async def test_update_service_name_conflict(self, client: AsyncClient):
        await create_service(client)
        other = await create_service(client, name="Gel Manicure")

        response = await client.patch(f"/api/v1/services/{other['id']}", json={"name": "Classic Manicure"})
        assert response.status_code == 409

    async def test_update_service_keep_own_name(self, client: AsyncClient):
        created = await create_service(client)

        response = await client.patch(f"/api/v1/services/{created['id']}", json={"name": "Classic Manicure"})
        assert response.status_code == 200

    async def test_update_service_not_found(self, client: AsyncClient):
        response = await client.patch("/api/v1/services/999", json={"price": 10})
        assert response.status_code == 404

    async def test_update_service_requires_admin(self, client: AsyncClient, public_client: AsyncClient):
        created = await create_service(client)

        response = await public_client.patch(f"/api/v1/services/{created['id']}", json={"price": 1})
        assert response.status_code == 401


class TestDeleteService:
    """Test service deletion."""

    async def test_delete_service(self, client: AsyncClient):
        created = await create_service(client)

        response = await client.delete(f"/api/v1/services/{created['id']}")
        assert response.status_code == 204

        response = await client.get(f"/api/v1/services/{created['id']}")
        assert response.status_code == 404

    async def test_delete_service_not_found(self, client: AsyncClient):
        response = await client.delete("/api/v1/services/999")
        assert response.status_code == 404

    async def test_delete_service_with_bookings_conflicts(self, client: AsyncClient):
        """Test a service that bookings reference cannot be deleted."""
        created = await create_service(client)
        booking = {
            "serviceId": created["id"],
            "date": "2099-01-05",
            "timeSlot": "10:00",
            "customerInfo": {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane@example.com",
                "phone": "(555) 123-4567",
            },
        }
        assert (await client.post("/api/v1/bookings", json=booking)).status_code == 201

        response = await client.delete(f"/api/v1/services/{created['id']}")
        assert response.status_code == 409
        assert response.json()["detail"] == "Cannot delete service: 1 booking(s) reference this service"
