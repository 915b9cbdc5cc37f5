"""REST sub-clients for the IoT platform."""
from .base_api import ApiResponse, PlatformApiError, PlatformBaseApi
from .client import PlatformApiClient

__all__ = [
    "ApiResponse",
    "PlatformApiClient",
    "PlatformApiError",
    "PlatformBaseApi",
]
