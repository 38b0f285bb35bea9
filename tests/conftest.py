"""Test configuration and common utilities.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

import jwt
import pytest
import respx
from starlette.requests import Request

from uaaclient import Config, UaaClient

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


@pytest.fixture
def host() -> str:
    """Return host of the test identity service.

    Returns:
        str: The host for testing.

    """
    return "uaa.test"


@pytest.fixture
def base_url(host: str) -> str:
    """Return base URL of the test identity service.

    Returns:
        str: The base URL for testing.

    """
    return f"https://{host}"


@pytest.fixture
def config(host: str) -> Config:
    """Return a client configuration pointing at the test server.

    Returns:
        Config: Configuration for testing.

    """
    return Config(
        client_id="app",
        secret="appclientsecret",
        scheme="https",
        host=host,
        uaa_endpoint="/oauth",
        redirect_url="/callback",
        scopes=("openid", "uaa.user"),
        timeout=5.0,
    )


@pytest.fixture
async def client(config: Config) -> AsyncGenerator[UaaClient, None]:
    """Create test client.

    Yields:
        UaaClient: Configured test client.

    """
    async with UaaClient(config) as client:
        yield client


@pytest.fixture
def mock_responses() -> Generator[Any, None, None]:
    """Mock HTTP responses.

    Yields:
        The mock router for HTTP requests.

    """
    with respx.mock:
        yield respx


@pytest.fixture
def sample_claims() -> dict[str, Any]:
    """Sample UAA access token claims.

    Returns:
        dict[str, Any]: Claims as UAA issues them.

    """
    return {
        "jti": "9c1a4f6e2b8d4f0a",
        "iat": 1700000000,
        "exp": 1700043200,
        "iss": "https://uaa.test/oauth/token",
        "zid": "uaa",
        "origin": "uaa",
        "user_name": "marissa",
        "email": "marissa@test.org",
        "sub": "7f1c3b2a-0000-4000-8000-000000000001",
        "scope": ["openid", "uaa.user"],
        "authorities": ["uaa.resource"],
        "client_id": "app",
        "grant_type": "password",
        "aud": ["app", "openid"],
    }


@pytest.fixture
def make_jwt() -> Callable[[dict[str, Any]], str]:
    """Return a factory for signed JWTs.

    Returns:
        Callable: Encodes claims into an HS256 compact JWT.

    """
    def _make(claims: dict[str, Any]) -> str:
        return jwt.encode(claims, "not-the-uaa-signing-key-0123456789abcdef", algorithm="HS256")
    return _make


@pytest.fixture
def sample_token_response() -> dict[str, Any]:
    """Sample token endpoint response.

    Returns:
        dict[str, Any]: Token endpoint body.

    """
    return {
        "access_token": "access-token-value",
        "token_type": "bearer",
        "refresh_token": "refresh-token-value",
        "expires_in": 43199,
        "scope": "openid uaa.user",
        "jti": "9c1a4f6e2b8d4f0a",
    }


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Return a factory for inbound Starlette requests.

    Returns:
        Callable: Builds a request from headers and a query string.

    """
    def _make(
        headers: dict[str, str] | None = None, query_string: str = ""
    ) -> Request:
        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": raw_headers,
            "query_string": query_string.encode("latin-1"),
        }
        return Request(scope)
    return _make
