"""Token validation and extraction for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ._base import BaseClient, RequestConfig, basic_auth_header
from .config import Config
from .exceptions import (
    ClientAuthenticationError,
    InvalidAuthorizationHeaderError,
    InvalidTokenError,
    TokenParseError,
    TokenValidationError,
)
from .models import OAuthErrorResponse, Token

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401


class TokenService:
    """Service for validating tokens against the identity service."""

    def __init__(self, client: BaseClient, config: Config) -> None:
        """Initialize token service.

        Args:
            client: The base HTTP client
            config: Client configuration

        """
        self._client = client
        self._config = config

    async def valid_token(self, token: Token | str) -> None:
        """Check a token with the identity service's ``/check_token`` endpoint.

        Every call is a fresh round trip, results are never cached.

        Args:
            token: Token, or raw access token string, to check

        Raises:
            InvalidTokenError: If the identity service rejects the token
            ClientAuthenticationError: If this client's credentials are rejected
            TokenValidationError: For any other unexpected status
            NetworkError: For transport failures

        """
        access_token = token.access_token if isinstance(token, Token) else token
        headers = {
            "Authorization": basic_auth_header(
                self._config.client_id, self._config.secret
            )
        }
        response = await self._client.request(
            "POST",
            f"{self._config.uri}/check_token",
            config=RequestConfig(form_data={"token": access_token}, headers=headers),
        )

        if response.status_code == HTTP_OK:
            return

        if response.status_code == HTTP_BAD_REQUEST:
            raise self._invalid_token(response.body)

        if response.status_code == HTTP_UNAUTHORIZED:
            logger.warning(
                "Identity service rejected basic auth for client %s",
                self._config.client_id,
            )
            raise ClientAuthenticationError()

        raise TokenValidationError(
            f"Error with validation token. Status {response.status_code}. "
            f"Resp: {response.text}",
            response.text,
            response.status_code,
        )

    @staticmethod
    def _invalid_token(body: bytes) -> InvalidTokenError:
        try:
            error = OAuthErrorResponse.model_validate_json(body)
        except PydanticValidationError:
            return InvalidTokenError("Could not verify token")

        if not error.error_description:
            return InvalidTokenError("Could not verify token", error.model_dump())
        return InvalidTokenError(
            f"Invalid token: {error.error_description}", error.model_dump()
        )


def token_from_header(
    request: Any,
) -> tuple[Token | None, bool, Exception | None]:
    """Read a bearer token from an inbound request's ``Authorization`` header.

    Works with any request object exposing a ``headers`` mapping (Starlette,
    Flask). The token's claims are parsed WITHOUT signature verification, only
    to learn its expiry; validate it remotely before trusting it.

    Returns:
        ``(token, header_found, error)``:

        * no header: ``(None, False, None)``
        * header without the ``Bearer`` scheme: ``(None, True, error)``
        * unparseable JWT: ``(token, True, error)``, token holds the raw string
        * otherwise ``(token, True, None)`` with claims and expiry populated

    """
    header = request.headers.get("Authorization")
    if not header:
        return None, False, None

    if not header.startswith(BEARER_PREFIX):
        return None, True, InvalidAuthorizationHeaderError()

    token = Token(access_token=header[len(BEARER_PREFIX):], token_type="bearer")
    try:
        token.unsafe_parse_claims()
    except TokenParseError as e:
        return token, True, e

    token.expiry = token.claims.exp
    return token, True, None
