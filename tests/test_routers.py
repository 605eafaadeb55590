"""
Tests for the property API endpoints.
Exercises buyer, seller and admin routes through the ASGI app with an in-memory database.
"""

import pytest
import uuid
from httpx import AsyncClient

API = "/api/v1"


async def create_via_api(client: AsyncClient, factory, admin: bool = False, **overrides) -> dict:
    path = f"{API}/admin/properties" if admin else f"{API}/properties"
    response = await client.post(path, json=factory.create_property_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestSellerEndpoints:
    """Test draft creation, update and submission."""

    @pytest.mark.asyncio
    async def test_create_property(self, async_client: AsyncClient, property_factory):
        response = await async_client.post(
            f"{API}/properties",
            json=property_factory.create_property_payload()
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["approval_status"] == "draft"
        assert body["data"]["type"] == "Land"
        assert body["data"]["location"]["state"] == "Bagmati"
        assert "timestamp" in body

    @pytest.mark.asyncio
    async def test_create_rejects_invalid_body(self, async_client: AsyncClient, property_factory):
        response = await async_client.post(
            f"{API}/properties",
            json=property_factory.create_property_payload(title="")
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any("title" in detail["field"] for detail in error["details"])

    @pytest.mark.asyncio
    async def test_update_property(self, async_client: AsyncClient, property_factory):
        created = await create_via_api(async_client, property_factory)

        response = await async_client.put(
            f"{API}/properties/{created['id']}",
            json={"title": "3 Bigha Land", "location": {"city": "Lalitpur"}}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "3 Bigha Land"
        assert data["location"]["city"] == "Lalitpur"
        assert data["description"] == created["description"]

    @pytest.mark.asyncio
    async def test_update_owner_rejected(self, async_client: AsyncClient, property_factory):
        created = await create_via_api(async_client, property_factory)

        response = await async_client.put(
            f"{API}/properties/{created['id']}",
            json={"owner_id": str(uuid.uuid4())}
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert error["details"][0]["field"] == "owner_id"

    @pytest.mark.asyncio
    async def test_submit_property(self, async_client: AsyncClient, property_factory):
        created = await create_via_api(async_client, property_factory)

        response = await async_client.patch(f"{API}/properties/{created['id']}/submit")
        assert response.status_code == 200
        assert response.json()["data"] is None

        fetched = await async_client.get(f"{API}/properties/{created['id']}")
        assert fetched.json()["data"]["approval_status"] == "pending_approval"

    @pytest.mark.asyncio
    async def test_owner_listing(self, async_client: AsyncClient, property_factory):
        owner_id = str(uuid.uuid4())
        await create_via_api(async_client, property_factory, owner_id=owner_id)
        await create_via_api(async_client, property_factory)

        response = await async_client.get(f"{API}/properties/owner/{owner_id}")

        assert response.status_code == 200
        body = response.json()
        assert [item["owner_id"] for item in body["data"]] == [owner_id]
        assert body["meta"]["total_items"] == 1

    @pytest.mark.asyncio
    async def test_owner_listing_empty(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/properties/owner/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "OWNER_PROPERTY_NOT_FOUND"


class TestBuyerEndpoints:
    """Test approved listing browse and filtering."""

    @pytest.mark.asyncio
    async def test_approved_listing(self, async_client: AsyncClient, property_factory):
        approved = await create_via_api(async_client, property_factory, admin=True)
        await create_via_api(async_client, property_factory)

        response = await async_client.get(f"{API}/properties/approved", params={"page": 1, "size": 10})

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["data"]] == [approved["id"]]
        assert body["meta"] == {
            "total_items": 1,
            "total_pages": 1,
            "current_page": 1,
            "page_size": 10
        }

    @pytest.mark.asyncio
    async def test_pagination_clamped_not_rejected(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/properties/approved", params={"page": 0, "size": 500})

        assert response.status_code == 200
        meta = response.json()["meta"]
        assert meta["current_page"] == 1
        assert meta["page_size"] == 100
        assert meta["total_pages"] == 0

    @pytest.mark.asyncio
    async def test_filter(self, async_client: AsyncClient, property_factory):
        land = await create_via_api(async_client, property_factory, admin=True)
        await create_via_api(async_client, property_factory, admin=True, type="House", status="Sold")

        response = await async_client.get(
            f"{API}/properties/filter",
            params={"status": "available", "type": "LAND", "state": "bagmati"}
        )

        assert response.status_code == 200
        assert [item["id"] for item in response.json()["data"]] == [land["id"]]

    @pytest.mark.asyncio
    async def test_filter_invalid_value(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/properties/filter", params={"status": "pending"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert "status" in error["message"]

    @pytest.mark.asyncio
    async def test_get_missing_property(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/properties/{uuid.uuid4()}")

        assert response.status_code == 404
        body = response.json()
        assert body["error"]["code"] == "PROPERTY_NOT_FOUND"
        assert "request_id" in body["error"]

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/properties/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestAdminEndpoints:
    """Test review and management routes."""

    @pytest.mark.asyncio
    async def test_review_flow(self, async_client: AsyncClient, property_factory):
        created = await create_via_api(async_client, property_factory)
        await async_client.patch(f"{API}/properties/{created['id']}/submit")

        pending = await async_client.get(f"{API}/admin/properties/pending")
        assert [item["id"] for item in pending.json()["data"]] == [created["id"]]

        response = await async_client.patch(f"{API}/admin/properties/{created['id']}/approve")
        assert response.status_code == 200

        approved = await async_client.get(f"{API}/properties/approved")
        assert [item["id"] for item in approved.json()["data"]] == [created["id"]]

        response = await async_client.patch(f"{API}/admin/properties/{created['id']}/archive")
        assert response.status_code == 200

        fetched = await async_client.get(f"{API}/properties/{created['id']}")
        assert fetched.json()["data"]["approval_status"] == "archived"

    @pytest.mark.asyncio
    async def test_reject(self, async_client: AsyncClient, property_factory):
        created = await create_via_api(async_client, property_factory)

        response = await async_client.patch(f"{API}/admin/properties/{created['id']}/reject")

        assert response.status_code == 200
        fetched = await async_client.get(f"{API}/properties/{created['id']}")
        assert fetched.json()["data"]["approval_status"] == "rejected"

    @pytest.mark.asyncio
    async def test_transition_missing_property(self, async_client: AsyncClient):
        response = await async_client.patch(f"{API}/admin/properties/{uuid.uuid4()}/approve")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PROPERTY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_all(self, async_client: AsyncClient, property_factory):
        await create_via_api(async_client, property_factory)
        await create_via_api(async_client, property_factory, admin=True)

        response = await async_client.get(f"{API}/admin/properties", params={"size": 1})

        body = response.json()
        assert len(body["data"]) == 1
        assert body["meta"]["total_items"] == 2
        assert body["meta"]["total_pages"] == 2

    @pytest.mark.asyncio
    async def test_list_all_empty(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/admin/properties")

        assert response.status_code == 200
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_delete(self, async_client: AsyncClient, property_factory):
        created = await create_via_api(async_client, property_factory, admin=True)

        response = await async_client.delete(f"{API}/admin/properties/{created['id']}")
        assert response.status_code == 200

        fetched = await async_client.get(f"{API}/properties/{created['id']}")
        assert fetched.status_code == 404

        response = await async_client.delete(f"{API}/admin/properties/{created['id']}")
        assert response.status_code == 404


class TestRootEndpoint:
    """Test service information."""

    @pytest.mark.asyncio
    async def test_root(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert response.json()["api_prefix"] == API

    @pytest.mark.asyncio
    async def test_unknown_route(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/unknown")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HTTP_404"
