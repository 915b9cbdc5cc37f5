"""API Handler for IoT data and time-series operations."""
from typing import Any

from ..const import IOT_DATA_ENDPOINT, TIMESERIES_ENDPOINT
from .base_api import PlatformBaseApi


# --- IOT DATA API ------------------------------------------------------------

class IotDataApi(PlatformBaseApi):
    """Handles datapoint ingestion and time-series queries."""


    # --- SEND (PUT /iotdata) ---------------------------------------------------

    async def send(self, payload: Any, raw_response: bool = False) -> Any:
        """
        Push one datapoint or a list of datapoints.
        Large lists should go through ApiUtils.send_data, which chunks them.
        """
        return await self._request("PUT", IOT_DATA_ENDPOINT, data=payload, raw_response=raw_response)


    # --- QUERY (POST /timeseriesdata) ------------------------------------------

    async def query(self, query: dict[str, Any], raw_response: bool = False) -> Any:
        """
        Query the time-series DB.

        :param query: {"metrics": [{"name": ..., "limit": ...}]} plus either
            start_relative/end_relative ({"value": "8", "unit": "hours"}) or
            start_absolute/end_absolute (epoch millis).
        """
        return await self._request("POST", TIMESERIES_ENDPOINT, data=query, raw_response=raw_response)


    # --- DELETE (DELETE /timeseriesdata) ---------------------------------------

    async def delete(self, query: dict[str, Any], raw_response: bool = False) -> Any:
        """Delete the datapoints matched by a time-series query."""
        return await self._request("DELETE", TIMESERIES_ENDPOINT, data=query, raw_response=raw_response)
