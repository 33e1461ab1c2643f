"""
Integration tests for the route lifecycle over HTTP
"""
import asyncio
import uuid

import httpx
import pytest

from track_api.index import create_app
from track_api.tracking.store import RouteStore
from track_api.utils.settings import Settings
from tests.constants import (
    CREATE_ROUTE_MUTATION,
    GET_ROUTE_QUERY,
    UNKNOWN_ROUTE_ID,
    USER_ID,
)


def test_create_then_read_then_miss(client):
    """Create a route, read it back, then ask for one that never existed"""
    created = client.post(
        "/graphql",
        json={"query": CREATE_ROUTE_MUTATION, "variables": {"userId": USER_ID}},
    )
    assert created.status_code == 200
    route = created.json()["data"]["createRoute"]
    assert route["userId"] == USER_ID
    assert route["status"] == "ACTIVE"
    assert uuid.UUID(route["id"])

    fetched = client.post(
        "/graphql",
        json={"query": GET_ROUTE_QUERY, "variables": {"id": route["id"]}},
    )
    assert fetched.status_code == 200
    assert fetched.json()["data"]["route"] == route

    missing = client.post(
        "/graphql",
        json={"query": GET_ROUTE_QUERY, "variables": {"id": UNKNOWN_ROUTE_ID}},
    )
    assert missing.status_code == 400
    assert "unable to find route" in missing.json()["errors"][0]["message"]


@pytest.mark.asyncio
async def test_concurrent_requests_share_one_store():
    """Concurrent creates and reads against one app stay consistent"""
    store = RouteStore()
    app = create_app(store=store, settings=Settings(request_logging=False))
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:

        async def create(n):
            user_id = str(uuid.UUID(int=n))
            response = await client.post(
                "/graphql",
                json={"query": CREATE_ROUTE_MUTATION, "variables": {"userId": user_id}},
            )
            assert response.status_code == 200
            return response.json()["data"]["createRoute"]

        routes = await asyncio.gather(*(create(n) for n in range(1, 51)))
        assert len({route["id"] for route in routes}) == 50

        async def read(route):
            response = await client.post(
                "/graphql",
                json={"query": GET_ROUTE_QUERY, "variables": {"id": route["id"]}},
            )
            assert response.status_code == 200
            return response.json()["data"]["route"]

        fetched = await asyncio.gather(*(read(route) for route in routes))
        assert fetched == routes

    assert await store.count() == 50
