"""
HTTP Client for CLI.

Provides the async HTTP client for communicating with the LightWave server.
All requests include X-Client-ID: lightwave-cli so server logs can tell
CLI traffic apart from other frontends.

Every failure leaves this module as a LightWaveError subclass:
    RequestError          - server unreachable, timeout
    ApiResponseError      - non-2xx status, message from the body's "detail"
    DeserializationError  - 2xx status with a body that is not JSON
"""

import json
import math
from typing import Any
from urllib.parse import quote

import httpx

from lightwave.core.config_schema import DEFAULT_BASE_URL
from lightwave.core.exceptions import (
    ApiResponseError,
    DeserializationError,
    RequestError,
    ValidationError,
)
from lightwave.core.logging import get_logger
from lightwave.schemas import (
    BrightnessRequest,
    ColorRequest,
    EffectStartRequest,
    ErrorResponse,
)

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


def _effect_path(name: str, *suffix: str) -> str:
    """Build /effects/{name}[/suffix], encoding the name as one segment."""
    if not name.strip():
        raise ValidationError("Effect name must not be empty")
    return "/".join(["/effects", quote(name, safe=""), *suffix])


def _error_message(response: httpx.Response) -> str:
    """Extract the server's error detail, falling back to the status."""
    try:
        error = ErrorResponse.model_validate(response.json())
    except ValueError:
        return f"Error status: {response.status_code}"

    if error.detail is None:
        return f"Error status: {response.status_code}"
    if isinstance(error.detail, str):
        return error.detail
    return json.dumps(error.detail)


class LightWaveClient:
    """
    HTTP client for LightWave server communication.

    Features:
    - Base URL normalized by the caller (see lightwave.core.config)
    - X-Client-ID header for log routing
    - Structured logging of requests/responses
    - Errors mapped onto the LightWaveError taxonomy

    Usage:
        async with LightWaveClient("http://localhost:8000/api") as client:
            effects = await client.list_effects()
            await client.set_brightness(0.5)
    """

    transport: httpx.AsyncBaseTransport | None = None

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Server API base URL, e.g. http://localhost:8000/api.
            timeout: Request timeout in seconds.
            transport: Custom httpx transport. Falls back to the class-level
                default, which is None (real network) outside of tests.
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        if transport is not None:
            self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "LightWaveClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
                headers={
                    "X-Client-ID": "lightwave-cli",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
    ) -> Any:
        """
        Make an HTTP request to the server and decode the JSON reply.

        Args:
            method: HTTP method (GET, POST)
            path: API path relative to the base URL (e.g., /effects)
            json: Request body, sent as JSON when not None

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            RequestError: On connection failure or timeout
            ApiResponseError: On a non-2xx status
            DeserializationError: On a 2xx status with invalid JSON
        """
        client = await self._get_client()

        logger.debug("API request", method=method, path=path)

        try:
            response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.info("API request failed", method=method, path=path, error=str(e))
            raise RequestError(str(e) or type(e).__name__) from e

        logger.debug(
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise ApiResponseError(_error_message(response), response.status_code)

        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError(str(e)) from e

    async def get(self, path: str) -> Any:
        """Make a GET request."""
        return await self.request("GET", path)

    async def post(self, path: str, json: Any = None) -> Any:
        """Make a POST request."""
        return await self.request("POST", path, json=json)

    # ---- Effects ----

    async def list_effects(self) -> Any:
        return await self.get("/effects")

    async def get_effect_info(self, name: str) -> Any:
        return await self.get(_effect_path(name))

    async def start_effect(self, name: str, params: dict[str, Any] | None = None) -> Any:
        body = EffectStartRequest(params=params or {})
        return await self.post(_effect_path(name, "start"), json=body.model_dump())

    async def stop_effect(self) -> Any:
        return await self.post("/effects/stop")

    async def get_running_effect(self) -> Any:
        return await self.get("/effects/running")

    # ---- LEDs ----

    async def set_color(self, color: str) -> Any:
        """Set the LED color. The value is passed through for the server to parse."""
        return await self.post("/leds/color", json=ColorRequest(color=color).model_dump())

    async def set_brightness(self, brightness: float) -> Any:
        """
        Set the LED brightness.

        Raises:
            ValidationError: If brightness is outside 0.0 - 1.0. Nothing is sent.
        """
        if math.isnan(brightness) or not 0.0 <= brightness <= 1.0:
            raise ValidationError(
                "Brightness must be between 0.0 and 1.0",
                details={"brightness": brightness},
            )
        body = BrightnessRequest(brightness=brightness)
        return await self.post("/leds/brightness", json=body.model_dump())

    async def clear_leds(self) -> Any:
        return await self.post("/leds/clear")

    # ---- System ----

    async def get_status(self) -> Any:
        return await self.get("/status")
