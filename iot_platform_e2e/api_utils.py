"""Test-facing helpers built on top of the platform API client."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any, TypeVar, Union

from .api.base_api import PlatformApiError
from .api.client import PlatformApiClient
from .api.resource_api import ResourceApi
from .const import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DELETE_TIMEFRAME,
    DEFAULT_DELETE_UNIT,
    TIME_UNITS,
)
from .helpers import (
    ConfigurationError,
    Predicate,
    is_record_sequence,
    send_batches,
    wait_until,
)

_T = TypeVar("_T")

_LOGGER = logging.getLogger(__name__)


class NameLookupError(LookupError):
    """Raised when a name does not match exactly one platform object."""


# --- API UTILS -----------------------------------------------------------------

class ApiUtils:
    """Lookups by name, polling and bulk data helpers for E2E tests."""

    def __init__(self, client: PlatformApiClient) -> None:
        self.client = client


    # --- POLLING ---------------------------------------------------------------

    async def delay(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    async def wait_until(self, predicate: Predicate[_T], **wait_kwargs: Any) -> _T:
        """Run predicate on a loop until it returns a truthy value or times out."""
        return await wait_until(predicate, **wait_kwargs)

    async def wait_for_device(self, uuid: str, **wait_kwargs: Any) -> dict[str, Any]:
        """
        GET the device until the platform serves it, then return it.
        Error responses and empty record lists both count as not there yet.
        """
        return await wait_until(
            lambda: self.client.devices.get(uuid),
            ignore_errors=(PlatformApiError,),
            **wait_kwargs,
        )


    # --- LOOKUP BY NAME --------------------------------------------------------

    @staticmethod
    async def _get_object_by_name(api: ResourceApi, name: str) -> dict[str, Any]:
        matches = [item for item in await api.list() if item.get("name") == name]
        if len(matches) != 1:
            raise NameLookupError(f'Found {len(matches)} items matching name "{name}"')
        return matches[0]

    async def get_device_by_name(self, name: str) -> dict[str, Any]:
        return await self._get_object_by_name(self.client.devices, name)

    async def get_rule_by_name(self, name: str) -> dict[str, Any]:
        return await self._get_object_by_name(self.client.rules, name)

    async def get_twin_by_name(self, name: str) -> dict[str, Any]:
        return await self._get_object_by_name(self.client.twins, name)

    async def get_twin_type_by_name(self, name: str) -> dict[str, Any]:
        return await self._get_object_by_name(self.client.twin_types, name)

    async def get_user_by_name(self, name: str) -> dict[str, Any]:
        return await self._get_object_by_name(self.client.users, name)

    async def get_role_by_name(self, name: str) -> dict[str, Any]:
        return await self._get_object_by_name(self.client.roles, name)


    # --- DELETE BY NAME --------------------------------------------------------

    async def _delete_by_name(self, api: ResourceApi, name: str) -> Any:
        item = await self._get_object_by_name(api, name)
        _LOGGER.debug("Deleting %s '%s' (%s)", api.endpoint, name, item["UUID"])
        return await api.delete(item["UUID"])

    async def delete_device(self, name: str) -> Any:
        return await self._delete_by_name(self.client.devices, name)

    async def delete_rule(self, name: str) -> Any:
        return await self._delete_by_name(self.client.rules, name)

    async def delete_twin(self, name: str) -> Any:
        return await self._delete_by_name(self.client.twins, name)

    async def delete_twin_type(self, name: str) -> Any:
        return await self._delete_by_name(self.client.twin_types, name)

    async def delete_user(self, name: str) -> Any:
        return await self._delete_by_name(self.client.users, name)

    async def delete_role(self, name: str) -> Any:
        return await self._delete_by_name(self.client.roles, name)


    # --- IOT DATA --------------------------------------------------------------

    async def send_data(
        self,
        payload: Union[Iterable[dict[str, Any]], dict[str, Any]],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Any:
        """Upload datapoints in chunks (500 per request by default)."""
        return await send_batches(payload, self.client.iot_data.send, chunk_size=chunk_size)

    async def delete_data(
        self,
        metric: Union[Iterable[str], str],
        timeframe: Union[int, str] = DEFAULT_DELETE_TIMEFRAME,
        unit: str = DEFAULT_DELETE_UNIT,
    ) -> None:
        """
        Delete datapoints from now back to `timeframe` `unit`s ago.

        Example, wipe metric '43040_100' for the past 8 hours:
            await api_utils.delete_data("43040_100", timeframe=8, unit="hours")
        """
        if unit not in TIME_UNITS:
            raise ConfigurationError(f"Unsupported time unit '{unit}', expected one of {TIME_UNITS}")

        metrics = list(metric) if is_record_sequence(metric) else [metric]
        for name in metrics:
            await self.client.iot_data.delete({
                "metrics": [{"name": name}],
                "start_relative": {"value": str(timeframe), "unit": unit},
            })
