"""API Handler for User operations."""
from ..const import USERS_ENDPOINT
from .resource_api import ResourceApi


class UserApi(ResourceApi):
    """Handles user management endpoints."""

    endpoint = USERS_ENDPOINT
