"""UAA client using service composition.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Self

from starlette.responses import RedirectResponse

from ._base import BaseClient, basic_auth_header
from ._clients import ClientService
from ._oauth import OAuthService
from ._session import SessionService
from ._tokens import TokenService, token_from_header
from .config import Config
from .models import Token


class UaaClient:
    """Client for a UAA-style OAuth2/OpenID identity service."""

    def __init__(self, config: Config, *, client: BaseClient | None = None) -> None:
        """Initialize UAA client.

        Args:
            config: Client configuration, read-only from here on
            client: Transport to use instead of a new one

        """
        self.config = config
        self._client = client or BaseClient(
            base_url=config.uri,
            timeout=config.timeout,
        )

        # Initialize service clients
        self.oauth = OAuthService(self._client, config)
        self.tokens = TokenService(self._client, config)
        self.sessions = SessionService(config)
        self.clients = ClientService(self._client, config)

    async def __aenter__(self) -> Self:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self) -> None:
        """Close the client and clean up resources."""
        await self._client.close()

    def auth_code_url(self, state: str, **params: str) -> str:
        return self.oauth.auth_code_url(state, **params)

    def auth_redirect(self, state: str, **params: str) -> RedirectResponse:
        """Send a browser to the authorization endpoint."""
        return self.oauth.auth_redirect(state, **params)

    async def password_credentials_token(self, username: str, password: str) -> Token:
        return await self.oauth.password_credentials_token(username, password)

    async def code_token(self, code: str, **params: str) -> Token:
        return await self.oauth.code_token(code, **params)

    async def valid_token(self, token: Token | str) -> None:
        """Validate a token remotely, raising if it is not valid."""
        await self.tokens.valid_token(token)

    def set_basic_auth(self, headers: dict[str, str]) -> None:
        """Authenticate an outgoing request as this client."""
        headers["Authorization"] = basic_auth_header(
            self.config.client_id, self.config.secret
        )

    def create_session(self, request: Any, response: Any) -> str:
        return self.sessions.create_session(request, response)

    @staticmethod
    def read_session(request: Any) -> str:
        return SessionService.read_session(request)

    @staticmethod
    def token_from_header(request: Any) -> tuple[Token | None, bool, Exception | None]:
        return token_from_header(request)

    @staticmethod
    def get_code(request: Any) -> str | None:
        return OAuthService.get_code(request)
