"""Fixtures: an in-process fake of the IoT platform REST API."""
from __future__ import annotations

import uuid as uuid_lib
from typing import Any

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from iot_platform_e2e import ApiUtils, PlatformApiClient

API_KEY = "test-admin-key"

# endpoint -> (collection, wraps list in {"records": ...})
COLLECTIONS = {
    "/api/v1/devices": ("devices", True),
    "/api/v2/rules": ("rules", True),
    "/api/v1/twins": ("twins", False),
    "/api/v1/twintypes": ("twintypes", False),
    "/api/v2/users": ("users", False),
    "/api/v1/authorization/roles": ("roles", False),
}


def _not_found(item_uuid: str) -> web.Response:
    return web.json_response(
        {"title": "Not Found", "detail": f"No object with UUID {item_uuid}", "code": "NOT_FOUND"},
        status=404,
        content_type="application/problem+json",
    )


class FakePlatform:
    """In-memory platform: CRUD collections, iotdata ingestion and TSDB queries."""

    def __init__(self) -> None:
        self.store: dict[str, dict[str, dict[str, Any]]] = {name: {} for name, _ in COLLECTIONS.values()}
        self.requests: list[tuple[str, str]] = []
        self.iot_batches: list[Any] = []
        self.tsdb_queries: list[tuple[str, dict[str, Any]]] = []
        self.hidden: dict[str, int] = {}
        self.unindexed: dict[str, int] = {}

    def add(self, collection: str, **fields: Any) -> dict[str, Any]:
        item = {"UUID": str(uuid_lib.uuid4()), **fields}
        self.store[collection][item["UUID"]] = item
        return item

    def hide_device(self, item_uuid: str, misses: int) -> None:
        """Answer 404 for the next `misses` reads of a device."""
        self.hidden[item_uuid] = misses

    def unindex_device(self, item_uuid: str, reads: int) -> None:
        """Answer 200 with empty records for the next `reads` reads of a device."""
        self.unindexed[item_uuid] = reads

    # --- APP -----------------------------------------------------------------

    def build_app(self) -> web.Application:
        app = web.Application(middlewares=[self._auth_middleware])
        for endpoint, (collection, wrapped) in COLLECTIONS.items():
            app.router.add_get(endpoint, self._list_handler(collection, wrapped))
            app.router.add_post(endpoint, self._create_handler(collection))
            app.router.add_get(endpoint + "/{uuid}", self._get_handler(collection))
            app.router.add_put(endpoint + "/{uuid}", self._update_handler(collection))
            app.router.add_delete(endpoint + "/{uuid}", self._delete_handler(collection))
        app.router.add_put("/api/v1/iotdata", self._send_iot_data)
        app.router.add_post("/api/v2/timeseriesdata", self._query_tsdb)
        app.router.add_delete("/api/v2/timeseriesdata", self._delete_tsdb)
        return app

    @web.middleware
    async def _auth_middleware(self, request: web.Request, handler: Any) -> web.StreamResponse:
        self.requests.append((request.method, request.path))
        if request.headers.get("X-API-KEY") != API_KEY:
            return web.json_response({"title": "Unauthorized", "detail": "Bad API key"}, status=401)
        return await handler(request)

    # --- CRUD HANDLERS ---------------------------------------------------------

    def _list_handler(self, collection: str, wrapped: bool):
        async def handler(request: web.Request) -> web.Response:
            items = list(self.store[collection].values())
            response = web.json_response({"records": items} if wrapped else items)
            response.headers.add("Set-Cookie", "node=a")
            response.headers.add("Set-Cookie", "shard=7")
            return response
        return handler

    def _get_handler(self, collection: str):
        async def handler(request: web.Request) -> web.Response:
            item_uuid = request.match_info["uuid"]
            item = self.store[collection].get(item_uuid)
            if self.hidden.get(item_uuid, 0) > 0:
                self.hidden[item_uuid] -= 1
                item = None
            if item is not None and self.unindexed.get(item_uuid, 0) > 0:
                self.unindexed[item_uuid] -= 1
                return web.json_response({"records": []})
            if item is None:
                return _not_found(item_uuid)
            return web.json_response({"records": [item]} if collection == "devices" else item)
        return handler

    def _create_handler(self, collection: str):
        async def handler(request: web.Request) -> web.Response:
            item = self.add(collection, **await request.json())
            return web.json_response([item] if collection == "devices" else item, status=201)
        return handler

    def _update_handler(self, collection: str):
        async def handler(request: web.Request) -> web.Response:
            item_uuid = request.match_info["uuid"]
            if item_uuid not in self.store[collection]:
                return _not_found(item_uuid)
            self.store[collection][item_uuid].update(await request.json())
            return web.Response(status=204)
        return handler

    def _delete_handler(self, collection: str):
        async def handler(request: web.Request) -> web.Response:
            item_uuid = request.match_info["uuid"]
            if self.store[collection].pop(item_uuid, None) is None:
                return _not_found(item_uuid)
            return web.Response(status=204)
        return handler

    # --- IOT DATA HANDLERS -----------------------------------------------------

    async def _send_iot_data(self, request: web.Request) -> web.Response:
        payload = await request.json()
        records = payload if isinstance(payload, list) else [payload]
        if any(record.get("reject") for record in records):
            return web.Response(status=502, text="<html>Bad Gateway</html>", content_type="text/html")
        self.iot_batches.append(payload)
        return web.Response(status=204)

    async def _query_tsdb(self, request: web.Request) -> web.Response:
        query = await request.json()
        self.tsdb_queries.append(("POST", query))
        return web.json_response({"queries": [{"results": [{"name": m["name"], "values": []}]} for m in query["metrics"]]})

    async def _delete_tsdb(self, request: web.Request) -> web.Response:
        self.tsdb_queries.append(("DELETE", await request.json()))
        return web.Response(status=204)


# --- FIXTURES ------------------------------------------------------------------

@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
async def platform_url(platform: FakePlatform):
    server = TestServer(platform.build_app())
    await server.start_server()
    yield str(server.make_url("/")).rstrip("/")
    await server.close()


@pytest.fixture
async def session():
    async with aiohttp.ClientSession() as client_session:
        yield client_session


@pytest.fixture
def client(session: aiohttp.ClientSession, platform_url: str) -> PlatformApiClient:
    return PlatformApiClient(session, platform_url, API_KEY)


@pytest.fixture
def api_utils(client: PlatformApiClient) -> ApiUtils:
    return ApiUtils(client)
