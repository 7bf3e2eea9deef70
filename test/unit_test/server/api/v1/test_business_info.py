"""
Unit tests for Business Info API endpoints.
"""

import copy

import pytest
from httpx import AsyncClient

from pinknail.server.services.business_info import DEFAULT_BUSINESS_HOURS

pytestmark = pytest.mark.asyncio


class TestGetBusinessInfo:
    async def test_defaults_created_on_first_read(self, public_client: AsyncClient):
        response = await public_client.get("/api/v1/business-info")
        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "(555) 123-4567"
        assert data["email"] == "hello@pinknail.com"
        assert data["businessHours"] == DEFAULT_BUSINESS_HOURS

    async def test_single_row(self, public_client: AsyncClient):
        first = await public_client.get("/api/v1/business-info")
        second = await public_client.get("/api/v1/business-info")
        assert first.json()["id"] == second.json()["id"]


class TestUpdateBusinessInfo:
    async def test_update_before_creation(self, client: AsyncClient):
        response = await client.patch("/api/v1/business-info", json={"phone": "(555) 000-1111"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Business info not found"

    async def test_partial_update(self, client: AsyncClient):
        await client.get("/api/v1/business-info")

        response = await client.patch(
            "/api/v1/business-info",
            json={"phone": "(555) 000-1111", "latitude": 37.78, "longitude": -122.41},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "(555) 000-1111"
        assert data["latitude"] == 37.78
        assert data["longitude"] == -122.41
        assert data["email"] == "hello@pinknail.com"

    async def test_update_hours(self, client: AsyncClient):
        await client.get("/api/v1/business-info")
        hours = copy.deepcopy(DEFAULT_BUSINESS_HOURS)
        hours[6] = {"day": "sunday", "openTime": "11:00", "closeTime": "16:00", "closed": False}

        response = await client.patch("/api/v1/business-info", json={"businessHours": hours})
        assert response.status_code == 200
        assert response.json()["businessHours"][6] == hours[6]

    async def test_hours_must_cover_each_day_once(self, client: AsyncClient):
        await client.get("/api/v1/business-info")
        hours = copy.deepcopy(DEFAULT_BUSINESS_HOURS)
        hours[6] = dict(hours[0])

        response = await client.patch("/api/v1/business-info", json={"businessHours": hours})
        assert response.status_code == 400

    async def test_hours_must_have_seven_days(self, client: AsyncClient):
        await client.get("/api/v1/business-info")

        response = await client.patch("/api/v1/business-info", json={"businessHours": DEFAULT_BUSINESS_HOURS[:6]})
        assert response.status_code == 400

    async def test_open_must_precede_close(self, client: AsyncClient):
        await client.get("/api/v1/business-info")
        hours = copy.deepcopy(DEFAULT_BUSINESS_HOURS)
        hours[0]["closeTime"] = "09:00"

        response = await client.patch("/api/v1/business-info", json={"businessHours": hours})
        assert response.status_code == 400
        assert "monday" in response.json()["detail"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"phone": "call us"},
            {"email": "nope"},
            {"latitude": 91},
            {"longitude": -181},
            {"businessHours": [{"day": "monday", "openTime": "9:00", "closeTime": "17:00"}]},
            {"businessHours": [{"day": "funday", "openTime": "09:00", "closeTime": "17:00"}]},
        ],
    )
    async def test_format_validation(self, client: AsyncClient, payload):
        await client.get("/api/v1/business-info")

        response = await client.patch("/api/v1/business-info", json=payload)
        assert response.status_code == 422

    async def test_requires_admin(self, public_client: AsyncClient):
        response = await public_client.patch("/api/v1/business-info", json={"phone": "(555) 000-1111"})
        assert response.status_code == 401
