"""Constants for the IoT platform E2E client."""

# Environment Keys
ENV_API_URL = "IOT_PLATFORM_API_URL"
ENV_API_KEY = "IOT_PLATFORM_API_KEY"
ENV_APP_API_KEY = "IOT_PLATFORM_APP_API_KEY"

# Defaults
DEFAULT_API_URL = "http://localhost:8080"
API_KEY_HEADER = "X-API-KEY"
REQUEST_TIMEOUT = 10

# --- POLLING ---
DEFAULT_WAIT_TIMEOUT = 10.0
DEFAULT_RETRY_RATE = 0.25
DEFAULT_WAIT_ERROR_MESSAGE = "Timed out waiting for condition to be met"

# --- IOT DATA ---
DEFAULT_CHUNK_SIZE = 500
DEFAULT_DELETE_TIMEFRAME = 30
DEFAULT_DELETE_UNIT = "days"

TIME_UNITS = (
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
)

# --- ENDPOINTS ---
DEVICES_ENDPOINT = "/api/v1/devices"
RULES_ENDPOINT = "/api/v2/rules"
TWINS_ENDPOINT = "/api/v1/twins"
TWIN_TYPES_ENDPOINT = "/api/v1/twintypes"
USERS_ENDPOINT = "/api/v2/users"
ROLES_ENDPOINT = "/api/v1/authorization/roles"
IOT_DATA_ENDPOINT = "/api/v1/iotdata"
TIMESERIES_ENDPOINT = "/api/v2/timeseriesdata"
