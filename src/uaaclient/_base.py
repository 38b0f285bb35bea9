"""Base HTTP transport for UAA client operations.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, NamedTuple

import httpx

from .exceptions import (
    NetworkError,
    ResponseTooLargeError,
    TimeoutError as UaaTimeoutError,
)

logger = logging.getLogger(__name__)

# Upper bound on bytes read from any response body (1 MiB)
MAX_BODY_SIZE = 1 << 20

USER_AGENT = "uaaclient-python/1.0.0"


def basic_auth_header(username: str, password: str) -> str:
    """Return an HTTP Basic ``Authorization`` header value."""
    credentials = f"{username}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


class RequestConfig(NamedTuple):
    """Configuration for HTTP requests."""

    json_data: dict[str, Any] | None = None
    form_data: dict[str, str] | None = None
    params: dict[str, Any] | None = None
    headers: dict[str, str] | None = None


class RawResponse(NamedTuple):
    """Status code and body bytes of a completed request."""

    status_code: int
    body: bytes

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.

        """
        return json.loads(self.body)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class BaseClient:
    """Base HTTP client performing one bounded request per call."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = 30.0,
        max_body_size: int = MAX_BODY_SIZE,
    ) -> None:
        """Initialize base HTTP client.

        Args:
            base_url: Scheme and host of the identity service
            timeout: Deadline in seconds for every request, None to disable
            max_body_size: Maximum number of response body bytes to read

        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_body_size = max_body_size

        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
        )

    async def __aenter__(self) -> BaseClient:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self._client.aclose()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        config: RequestConfig | None = None,
    ) -> RawResponse:
        """Make a single HTTP request and read its body.

        Non-2xx statuses are returned, not raised; each caller maps them
        to its own errors.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL, or a path relative to ``base_url``
            config: Request configuration

        Returns:
            Status code and body of the response.

        Raises:
            NetworkError: For network failures and unreadable bodies
            ResponseTooLargeError: If the body exceeds ``max_body_size``
            UaaTimeoutError: If the request deadline passes

        """
        if config is None:
            config = RequestConfig()

        if not url.startswith(("http://", "https://")):
            url = f"{self.base_url}/{url.lstrip('/')}"

        headers = dict(config.headers or {})
        kwargs: dict[str, Any] = {"params": config.params, "headers": headers}
        if config.form_data is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            kwargs["data"] = config.form_data
        elif config.json_data is not None:
            kwargs["json"] = config.json_data

        try:
            async with self._client.stream(method, url, **kwargs) as response:
                body = await self._read_body(response)
        except httpx.TimeoutException as e:
            raise UaaTimeoutError("Request timeout") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e
        except httpx.StreamError as e:
            raise NetworkError(f"Cannot read body: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return RawResponse(response.status_code, body)

    async def _read_body(self, response: httpx.Response) -> bytes:
        """Read the response body, failing once it passes the size limit."""
        body = bytearray()
        async for chunk in response.aiter_bytes():
            body.extend(chunk)
            if len(body) > self.max_body_size:
                logger.warning(
                    "Response from %s exceeds %d bytes", response.url, self.max_body_size
                )
                raise ResponseTooLargeError(self.max_body_size)
        return bytes(body)
