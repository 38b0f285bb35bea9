"""OAuth grant flows for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

from pydantic import ValidationError as PydanticValidationError
from starlette.responses import RedirectResponse

from ._base import BaseClient, RequestConfig
from .config import Config
from .exceptions import AuthenticationError, create_error_from_response
from .models import OAuthAuthorizeParams, OAuthErrorResponse, OAuthTokenResponse, Token

logger = logging.getLogger(__name__)

HTTP_FOUND = 302


class OAuthService:
    """Service for acquiring tokens through the OAuth2 grant flows."""

    def __init__(self, client: BaseClient, config: Config) -> None:
        """Initialize OAuth service.

        Args:
            client: The base HTTP client
            config: Client configuration

        """
        self._client = client
        self._config = config

    def auth_code_url(self, state: str, **params: str) -> str:
        """Build the authorization URL a browser is sent to.

        Args:
            state: Opaque anti-forgery value the caller checks on callback
            **params: Additional query parameters

        Returns:
            The ``/authorize`` URL for the authorization code flow.

        """
        authorize = OAuthAuthorizeParams(
            client_id=self._config.client_id,
            redirect_uri=self._config.redirect_url or None,
            scope=" ".join(self._config.scopes) or None,
            state=state or None,
        )
        query = authorize.model_dump(exclude_none=True)
        query.update(params)
        return f"{self._config.authorize_url}?{urlencode(query)}"

    def auth_redirect(self, state: str, **params: str) -> RedirectResponse:
        """Redirect a browser into the authorization code flow.

        Returns:
            A 302 response pointing at the authorization URL.

        """
        return RedirectResponse(
            self.auth_code_url(state, **params), status_code=HTTP_FOUND
        )

    async def password_credentials_token(self, username: str, password: str) -> Token:
        """Exchange resource owner credentials for a token.

        Args:
            username: Resource owner's username
            password: Resource owner's password

        Returns:
            The issued token.

        Raises:
            AuthenticationError: If the identity service rejects the grant
            NetworkError: For transport failures

        """
        data = {
            "grant_type": "password",
            "username": username,
            "password": password,
        }
        return await self._retrieve_token(data)

    async def code_token(self, code: str, **params: str) -> Token:
        """Exchange an authorization code for a token.

        Args:
            code: One-time code from the authorization callback
            **params: Additional form parameters, e.g. ``code_verifier``

        Returns:
            The issued token.

        """
        data = {"grant_type": "authorization_code", "code": code}
        if self._config.redirect_url:
            data["redirect_uri"] = self._config.redirect_url
        data.update(params)
        return await self._retrieve_token(data, include_scope=False)

    async def client_credentials_token(self) -> Token:
        """Obtain a token for the client itself.

        Returns:
            The issued token.

        """
        return await self._retrieve_token({"grant_type": "client_credentials"})

    async def refresh_token(self, refresh_token: str) -> Token:
        """Exchange a refresh token for a new access token.

        Returns:
            The new token. UAA may omit a new refresh token, in which case the
            one that was passed in is kept.

        """
        data = {"grant_type": "refresh_token", "refresh_token": refresh_token}
        token = await self._retrieve_token(data, include_scope=False)
        if token.refresh_token is None:
            token.refresh_token = refresh_token
        return token

    @staticmethod
    def get_code(request: Any) -> str | None:
        """Return the ``code`` query parameter of an authorization callback.

        Accepts Starlette requests (``query_params``) and Flask requests (``args``).
        """
        query = getattr(request, "query_params", None)
        if query is None:
            query = request.args
        return query.get("code") or None

    async def _retrieve_token(
        self, data: dict[str, str], *, include_scope: bool = True
    ) -> Token:
        # Client credentials travel in the form body
        data = {
            **data,
            "client_id": self._config.client_id,
            "client_secret": self._config.secret,
        }
        if include_scope and self._config.scopes:
            data["scope"] = " ".join(self._config.scopes)

        response = await self._client.request(
            "POST",
            self._config.token_url,
            config=RequestConfig(
                form_data=data, headers={"Accept": "application/json"}
            ),
        )

        if not 200 <= response.status_code < 300:
            logger.info(
                "%s grant rejected with status %d",
                data["grant_type"],
                response.status_code,
            )
            raise create_error_from_response(
                response.status_code,
                self._parse_error(response.body),
                f"Cannot fetch token: status {response.status_code}",
            )

        try:
            payload = OAuthTokenResponse.model_validate_json(response.body)
        except PydanticValidationError as e:
            raise AuthenticationError(
                "Cannot fetch token: invalid token response",
                response.text,
                response.status_code,
            ) from e

        return Token.from_response(payload)

    @staticmethod
    def _parse_error(body: bytes) -> dict[str, Any] | None:
        try:
            return OAuthErrorResponse.model_validate_json(body).model_dump(
                exclude_none=True
            )
        except PydanticValidationError:
            return {"message": body.decode("utf-8", errors="replace")} if body else None
