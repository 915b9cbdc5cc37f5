"""API Handler for Rules Engine operations."""
from ..const import RULES_ENDPOINT
from .resource_api import RecordsResourceApi


# --- RULE API ----------------------------------------------------------------

class RuleApi(RecordsResourceApi):
    """Handles rule endpoints (v2 rules engine)."""

    endpoint = RULES_ENDPOINT
