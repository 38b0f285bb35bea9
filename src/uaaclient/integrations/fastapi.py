"""FastAPI integration for the UAA client."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, HTTPException, Request, status

from ..client import UaaClient
from ..exceptions import TokenParseError, UaaClientError
from ..models import Token

logger = logging.getLogger(__name__)

__all__ = ["UaaFastAPI", "require_token", "require_scope"]


class UaaFastAPI:
    """FastAPI integration for UAA bearer token authentication."""

    def __init__(self, client: UaaClient):
        self.client = client

    async def _validate_request(self, request: Request) -> Token:
        """Extract the bearer token and validate it with the identity service."""
        token, found, error = self.client.token_from_header(request)
        if not found:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authorization header missing",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if token is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(error),
                headers={"WWW-Authenticate": "Bearer"},
            )
        if isinstance(error, TokenParseError):
            # Opaque tokens are still checked remotely, they just carry no claims
            logger.debug("Bearer token claims not readable: %s", error)

        try:
            await self.client.valid_token(token)
        except UaaClientError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Authentication failed: {e}",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

        return token

    def get_current_token(self) -> Callable:
        """Get the validated bearer token as a FastAPI dependency."""
        async def _get_current_token(request: Request) -> Token:
            return await self._validate_request(request)
        return _get_current_token

    def require_token(self) -> Callable:
        """Require a valid bearer token dependency."""
        return self.get_current_token()

    def require_scope(self, required_scope: str) -> Callable:
        """Require a scope in the token's (unverified) claims dependency.

        The token is validated remotely first, so the claims belong to a
        token the identity service accepted.
        """
        async def _require_scope(
            token: Token = Depends(self.get_current_token())
        ) -> Token:
            if required_scope not in token.claims.scope:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Scope '{required_scope}' required",
                )
            return token
        return _require_scope


def require_token(uaa: UaaFastAPI) -> Callable:
    """Convenience function for requiring a valid token."""
    return uaa.require_token()


def require_scope(uaa: UaaFastAPI, scope: str) -> Callable:
    """Convenience function for requiring a specific scope."""
    return uaa.require_scope(scope)
