"""Generic CRUD sub-client shared by the platform resources."""
from __future__ import annotations

from typing import Any

from .base_api import ApiResponse, PlatformBaseApi


# --- RESOURCE API ------------------------------------------------------------

class ResourceApi(PlatformBaseApi):
    """
    CRUD endpoints for one collection: list, get, create, update, delete.
    Subclasses set `endpoint` and override the `_unwrap_*` hooks where the
    platform wraps payloads.
    """

    endpoint: str = ""


    # --- LIST -----------------------------------------------------------------

    async def list(self, raw_response: bool = False) -> list[dict[str, Any]] | ApiResponse:
        """List all items in the collection."""
        data = await self._request("GET", self.endpoint, raw_response=raw_response)
        return data if raw_response else self._unwrap_list(data)


    # --- GET ------------------------------------------------------------------

    async def get(self, uuid: str, raw_response: bool = False) -> dict[str, Any] | ApiResponse:
        """Fetch one item by UUID."""
        data = await self._request("GET", f"{self.endpoint}/{uuid}", raw_response=raw_response)
        return data if raw_response else self._unwrap_item(data)


    # --- CREATE ---------------------------------------------------------------

    async def create(self, payload: Any, raw_response: bool = False) -> dict[str, Any] | ApiResponse:
        """Create a new item."""
        data = await self._request("POST", self.endpoint, data=payload, raw_response=raw_response)
        return data if raw_response else self._unwrap_created(data)


    # --- UPDATE ---------------------------------------------------------------

    async def update(self, uuid: str, payload: Any, raw_response: bool = False) -> Any:
        """Replace an item."""
        return await self._request(
            "PUT", f"{self.endpoint}/{uuid}", data=payload, raw_response=raw_response
        )


    # --- DELETE ---------------------------------------------------------------

    async def delete(self, uuid: str, raw_response: bool = False) -> Any:
        """Delete an item."""
        return await self._request("DELETE", f"{self.endpoint}/{uuid}", raw_response=raw_response)


    # --- UNWRAP HOOKS ---------------------------------------------------------

    def _unwrap_list(self, data: Any) -> list[dict[str, Any]]:
        return data

    def _unwrap_item(self, data: Any) -> dict[str, Any]:
        return data

    def _unwrap_created(self, data: Any) -> dict[str, Any]:
        return data


class RecordsResourceApi(ResourceApi):
    """Resource whose list responses are wrapped as {"records": [...]}."""

    def _unwrap_list(self, data: Any) -> list[dict[str, Any]]:
        return data["records"]
