"""API client and helpers for end-to-end tests against the IoT platform."""
from .api.base_api import ApiResponse, PlatformApiError
from .api.client import PlatformApiClient
from .api_utils import ApiUtils, NameLookupError
from .config import PlatformConfig
from .helpers import ConfigurationError, send_batches, wait_until

__all__ = [
    "ApiResponse",
    "ApiUtils",
    "ConfigurationError",
    "NameLookupError",
    "PlatformApiClient",
    "PlatformApiError",
    "PlatformConfig",
    "send_batches",
    "wait_until",
]
