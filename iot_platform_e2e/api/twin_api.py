"""API Handlers for Digital Twin operations."""
from ..const import TWIN_TYPES_ENDPOINT, TWINS_ENDPOINT
from .resource_api import ResourceApi


# --- TWIN API ----------------------------------------------------------------

class TwinApi(ResourceApi):
    """Handles digital twin endpoints."""

    endpoint = TWINS_ENDPOINT


# --- TWIN TYPE API -----------------------------------------------------------

class TwinTypeApi(ResourceApi):
    """Handles twin type endpoints."""

    endpoint = TWIN_TYPES_ENDPOINT
