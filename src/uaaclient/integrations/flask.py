"""Flask integration for the UAA client."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional

try:
    from flask import g, jsonify, request
    FLASK_AVAILABLE = True
except ImportError:
    FLASK_AVAILABLE = False

from ..client import UaaClient
from ..exceptions import TokenParseError, UaaClientError
from ..models import Token

logger = logging.getLogger(__name__)

__all__ = ["UaaFlask", "token_required", "scope_required", "get_current_token"]


class UaaFlask:
    """Flask integration for UAA bearer token authentication."""

    def __init__(self, client: UaaClient):
        if not FLASK_AVAILABLE:
            raise ImportError("Flask is not installed. Install it with: pip install flask")

        self.client = client

    async def _validate_request(self) -> Token:
        """Extract the bearer token and validate it with the identity service."""
        token, found, error = self.client.token_from_header(request)
        if not found:
            raise UaaClientError("Authorization header missing", "MISSING_TOKEN")
        if token is None:
            raise error
        if isinstance(error, TokenParseError):
            logger.debug("Bearer token claims not readable: %s", error)

        await self.client.valid_token(token)
        return token

    def _handle_auth_error(self, message: str, status_code: int = 401):
        """Handle authentication errors."""
        return jsonify({"error": message}), status_code


def get_current_token() -> Optional[Token]:
    """Get the validated token from Flask's g object."""
    return getattr(g, "uaa_token", None)


def token_required(uaa: UaaFlask):
    """Decorator to require a valid bearer token."""
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        async def decorated_function(*args: Any, **kwargs: Any) -> Any:
            try:
                g.uaa_token = await uaa._validate_request()
            except UaaClientError as e:
                return uaa._handle_auth_error(f"Authentication failed: {e}")
            return await f(*args, **kwargs)

        return decorated_function
    return decorator


def scope_required(uaa: UaaFlask, required_scope: str):
    """Decorator to require a scope in the token's (unverified) claims."""
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        @token_required(uaa)
        async def decorated_function(*args: Any, **kwargs: Any) -> Any:
            token = get_current_token()
            if token is None or required_scope not in token.claims.scope:
                return uaa._handle_auth_error(
                    f"Scope '{required_scope}' required", 403
                )
            return await f(*args, **kwargs)

        return decorated_function
    return decorator
