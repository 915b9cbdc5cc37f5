"""Environment configuration for the IoT platform E2E client."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .const import DEFAULT_API_URL, ENV_API_KEY, ENV_API_URL, ENV_APP_API_KEY
from .helpers import ConfigurationError


@dataclass(frozen=True)
class PlatformConfig:
    """Connection settings for one platform under test."""

    api_url: str
    api_key: str
    # Key of the non-admin application user, for permission tests
    app_api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PlatformConfig:
        """Build the config from IOT_PLATFORM_* environment variables."""
        env = os.environ if environ is None else environ

        api_key = env.get(ENV_API_KEY)
        if not api_key:
            raise ConfigurationError(f"{ENV_API_KEY} must be set")

        return cls(
            api_url=env.get(ENV_API_URL) or DEFAULT_API_URL,
            api_key=api_key,
            app_api_key=env.get(ENV_APP_API_KEY) or None,
        )
