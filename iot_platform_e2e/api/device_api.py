"""API Handler for Device operations."""
from typing import Any, Optional

from ..const import DEVICES_ENDPOINT
from .resource_api import RecordsResourceApi


# --- DEVICE API --------------------------------------------------------------

class DeviceApi(RecordsResourceApi):
    """
    Handles device endpoints.
    Single-device reads come back as {"records": [device]} and creates as
    [device].
    """

    endpoint = DEVICES_ENDPOINT

    def _unwrap_item(self, data: Any) -> Optional[dict[str, Any]]:
        # Empty while the platform is still indexing a new device
        records = data["records"]
        return records[0] if records else None

    def _unwrap_created(self, data: Any) -> dict[str, Any]:
        return data[0]
