"""Base class for IoT platform API sub-clients."""
import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import aiohttp

from ..const import API_KEY_HEADER, REQUEST_TIMEOUT

_LOGGER = logging.getLogger(__name__)


# --- PLATFORM API ERRORS -----------------------------------------------------

class PlatformApiError(Exception):
    """
    Exception raised for platform API errors (RFC 7807 compliant).
    Includes backend error codes and request IDs for debugging.
    """
    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        code: Optional[str] = None,
        request_id: Optional[str] = None
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.code = code
        self.request_id = request_id

        msg = f"[{status}] {title}: {detail}"
        if code:
            msg += f" (Code: {code})"
        if request_id:
            msg += f" [ReqID: {request_id}]"

        super().__init__(msg)


# --- RAW RESPONSE ------------------------------------------------------------

@dataclass(frozen=True)
class ApiResponse:
    """Unparsed outcome of a request made with raw_response=True."""

    status: int
    # Case-insensitive multidict; repeated headers (Set-Cookie) keep every value
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


# --- PLATFORM BASE API -------------------------------------------------------

class PlatformBaseApi:
    """Base class handling HTTP requests and authentication."""

    def __init__(self, session: aiohttp.ClientSession, api_url: str, api_key: str) -> None:
        """Initialize the base API."""
        self._session = session
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key


    # --- REQUEST ---------------------------------------------------------------

    async def _request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        raw_response: bool = False,
    ) -> Any:
        """
        Execute an HTTP request.

        With raw_response the status is never checked and an ApiResponse is
        returned; otherwise 4xx/5xx raise PlatformApiError and the JSON body
        (or True for empty bodies) is returned.
        """
        url = f"{self._api_url}{endpoint}"
        headers = {
            "Content-Type": "application/json",
            API_KEY_HEADER: self._api_key,
        }

        try:
            async with self._session.request(
                method,
                url,
                headers=headers,
                json=data,
                timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT),
            ) as response:

                if raw_response:
                    return await self._to_api_response(response)

                if response.status >= 400:
                    await self._raise_for_status(response)

                if response.status == 204:
                    return True

                try:
                    result = await response.json()
                except (aiohttp.ContentTypeError, ValueError):
                    # Non-JSON body on a 2xx
                    return True
                return True if result is None else result

        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            _LOGGER.error("Platform connection error on %s %s: %s", method, endpoint, err)
            raise PlatformApiError(
                status=0,
                title="Connection Error",
                detail=f"Cannot connect to server: {err!s}",
                code="CONNECTION_ERROR"
            ) from err


    # --- ERROR PARSING ---------------------------------------------------------

    @staticmethod
    async def _raise_for_status(response: aiohttp.ClientResponse) -> None:
        """Turn a 4xx/5xx response into a PlatformApiError."""
        content_type = response.headers.get("Content-Type", "")

        # application/json or application/problem+json
        if "json" in content_type:
            try:
                body = await response.json(content_type=None)
            except ValueError:
                body = None
            if isinstance(body, dict):
                raise PlatformApiError(
                    response.status,
                    body.get("title") or f"HTTP {response.status}",
                    body.get("detail") or "Unknown error occurred.",
                    body.get("code"),
                    body.get("request_id"),
                )

        # Plain text or HTML (proxy error pages and the like)
        try:
            text = await response.text()
            preview = text[:200] + "..." if len(text) > 200 else text
        except (aiohttp.ClientError, UnicodeDecodeError):
            preview = "Unreadable response body."

        raise PlatformApiError(
            status=response.status,
            title=f"HTTP Error {response.status}",
            detail=f"Server returned non-JSON response: {preview}",
            code="HTTP_ERROR"
        )


    # --- RAW RESPONSE ----------------------------------------------------------

    @staticmethod
    async def _to_api_response(response: aiohttp.ClientResponse) -> ApiResponse:
        """Read the whole response without checking its status."""
        body: Any
        if "json" in response.headers.get("Content-Type", ""):
            try:
                body = await response.json(content_type=None)
            except ValueError:
                body = await response.text()
        else:
            body = await response.text()

        return ApiResponse(
            status=response.status,
            headers=response.headers.copy(),
            body=body,
        )
