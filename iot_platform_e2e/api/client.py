"""Main API Client for the IoT platform."""
from __future__ import annotations

import aiohttp

from ..config import PlatformConfig
from ..helpers import ConfigurationError
from .base_api import PlatformApiError
from .device_api import DeviceApi
from .iot_data_api import IotDataApi
from .role_api import RoleApi
from .rule_api import RuleApi
from .twin_api import TwinApi, TwinTypeApi
from .user_api import UserApi


class PlatformApiClient:
    """
    Main container for the platform API sub-clients.
    Uses Composition pattern to expose specialized APIs.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_url: str,
        api_key: str
    ) -> None:
        """Initialize the client and its sub-components."""
        self.devices = DeviceApi(session, api_url, api_key)
        self.rules = RuleApi(session, api_url, api_key)
        self.twins = TwinApi(session, api_url, api_key)
        self.twin_types = TwinTypeApi(session, api_url, api_key)
        self.users = UserApi(session, api_url, api_key)
        self.roles = RoleApi(session, api_url, api_key)
        self.iot_data = IotDataApi(session, api_url, api_key)


    # --- FROM CONFIG ---------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        session: aiohttp.ClientSession,
        config: PlatformConfig,
        as_app_user: bool = False,
    ) -> PlatformApiClient:
        """Build a client authenticated as the admin or the application user."""
        if as_app_user:
            if not config.app_api_key:
                raise ConfigurationError("No application API key configured")
            return cls(session, config.api_url, config.app_api_key)
        return cls(session, config.api_url, config.api_key)


    # --- VALIDATE AUTH -------------------------------------------------------

    async def async_validate_auth(self) -> bool:
        """Check the credentials by listing devices."""
        response = await self.devices.list(raw_response=True)
        if response.status in (401, 403):
            return False
        if not response.ok:
            raise PlatformApiError(
                status=response.status,
                title=f"HTTP Error {response.status}",
                detail="Unexpected response while validating credentials.",
                code="HTTP_ERROR",
            )
        return True
