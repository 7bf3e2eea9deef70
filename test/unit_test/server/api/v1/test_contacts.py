"""
Unit tests for Contact Inquiry API endpoints.

Tests cover public submission and the admin triage workflow.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

CONTACT_PAYLOAD = {
    "firstName": "Linh",
    "lastName": "Tran",
    "email": "linh@example.com",
    "phone": "+1 (555) 987-6543",
    "subject": "Bridal party",
    "message": "Can you book five guests on a Saturday morning?",
}


async def create_contact(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/api/v1/contacts", json={**CONTACT_PAYLOAD, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateContact:
    async def test_submit_inquiry(self, public_client: AsyncClient):
        data = await create_contact(public_client)

        assert data["status"] == "new"
        assert data["subject"] == "Bridal party"
        assert data["adminNotes"] is None
        assert data["respondedAt"] is None

    async def test_phone_is_optional(self, public_client: AsyncClient):
        payload = {key: value for key, value in CONTACT_PAYLOAD.items() if key != "phone"}

        response = await public_client.post("/api/v1/contacts", json=payload)
        assert response.status_code == 201
        assert response.json()["phone"] is None

    @pytest.mark.parametrize(
        "field, value",
        [
            ("message", "Too short"),
            ("message", "x" * 5001),
            ("email", "linh"),
            ("subject", "  "),
            ("phone", "abc"),
        ],
    )
    async def test_validation(self, public_client: AsyncClient, field, value):
        response = await public_client.post("/api/v1/contacts", json={**CONTACT_PAYLOAD, field: value})
        assert response.status_code == 422

    async def test_message_length_boundaries(self, public_client: AsyncClient):
        await create_contact(public_client, message="x" * 10)
        await create_contact(public_client, message="x" * 5000)


class TestAdminContacts:
    async def test_admin_endpoints_require_auth(self, public_client: AsyncClient):
        created = await create_contact(public_client)

        assert (await public_client.get("/api/v1/contacts")).status_code == 401
        assert (await public_client.get(f"/api/v1/contacts/{created['id']}")).status_code == 401
        assert (await public_client.delete(f"/api/v1/contacts/{created['id']}")).status_code == 401

    async def test_list_and_filter_by_status(self, client: AsyncClient):
        first = await create_contact(client)
        await create_contact(client, firstName="Bao")
        await client.patch(f"/api/v1/contacts/{first['id']}/status", json={"status": "read"})

        response = await client.get("/api/v1/contacts", params={"status": "read"})
        assert [item["id"] for item in response.json()["data"]] == [first["id"]]

        response = await client.get("/api/v1/contacts")
        assert response.json()["pagination"]["total"] == 2

    async def test_default_sort_newest_first(self, client: AsyncClient):
        first = await create_contact(client)
        second = await create_contact(client)

        response = await client.get("/api/v1/contacts")
        assert [item["id"] for item in response.json()["data"]] == [second["id"], first["id"]]

    async def test_sort_by_first_name(self, client: AsyncClient):
        await create_contact(client, firstName="Mai")
        await create_contact(client, firstName="Anh")

        response = await client.get("/api/v1/contacts", params={"sortBy": "firstName", "sortOrder": "asc"})
        assert [item["firstName"] for item in response.json()["data"]] == ["Anh", "Mai"]

    async def test_search_message_and_subject(self, client: AsyncClient):
        await create_contact(client)
        await create_contact(client, subject="Gift cards", message="Do you sell gift cards online?")

        response = await client.get("/api/v1/contacts", params={"search": "gift"})
        assert [item["subject"] for item in response.json()["data"]] == ["Gift cards"]

        response = await client.get("/api/v1/contacts", params={"search": "SATURDAY"})
        assert [item["subject"] for item in response.json()["data"]] == ["Bridal party"]

    async def test_responded_sets_timestamp(self, client: AsyncClient):
        created = await create_contact(client)

        response = await client.patch(
            f"/api/v1/contacts/{created['id']}/status",
            json={"status": "responded", "adminNotes": "Called back"},
        )
        data = response.json()
        assert data["status"] == "responded"
        assert data["respondedAt"] is not None
        assert data["adminNotes"] == "Called back"

    async def test_responded_timestamp_is_kept(self, client: AsyncClient):
        """Test archiving a responded inquiry keeps its respondedAt."""
        created = await create_contact(client)
        responded = await client.patch(f"/api/v1/contacts/{created['id']}/status", json={"status": "responded"})

        archived = await client.patch(f"/api/v1/contacts/{created['id']}/status", json={"status": "archived"})
        assert archived.json()["respondedAt"] == responded.json()["respondedAt"]

    async def test_update_notes(self, client: AsyncClient):
        created = await create_contact(client)

        response = await client.patch(f"/api/v1/contacts/{created['id']}/notes", json={"adminNotes": "VIP"})
        assert response.status_code == 200
        assert response.json()["adminNotes"] == "VIP"
        assert response.json()["status"] == "new"

    @pytest.mark.parametrize("notes", ["", "x" * 1001])
    async def test_update_notes_validation(self, client: AsyncClient, notes: str):
        created = await create_contact(client)

        response = await client.patch(f"/api/v1/contacts/{created['id']}/notes", json={"adminNotes": notes})
        assert response.status_code == 422

    async def test_invalid_status(self, client: AsyncClient):
        created = await create_contact(client)

        response = await client.patch(f"/api/v1/contacts/{created['id']}/status", json={"status": "spam"})
        assert response.status_code == 422

    async def test_delete(self, client: AsyncClient):
        created = await create_contact(client)

        assert (await client.delete(f"/api/v1/contacts/{created['id']}")).status_code == 204
        assert (await client.get(f"/api/v1/contacts/{created['id']}")).status_code == 404
