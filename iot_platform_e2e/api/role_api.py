"""API Handler for Role operations."""
from ..const import ROLES_ENDPOINT
from .resource_api import ResourceApi


class RoleApi(ResourceApi):
    """Handles authorization role endpoints."""

    endpoint = ROLES_ENDPOINT
