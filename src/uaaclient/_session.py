"""Session cookie correlation for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

from typing import Any

from .config import Config, simple_uuid
from .exceptions import SessionNotFoundError
from .models import SESSION_COOKIE_NAME, Session, SessionCookie


def _request_host(request: Any) -> str | None:
    host = request.headers.get("host")
    if not host:
        return None
    # Cookie domains carry no port
    if host.startswith("["):
        return host[: host.index("]") + 1]
    return host.rsplit(":", 1)[0]


class SessionService:
    """Service for correlating browser sessions through a cookie.

    There is no server-side state, the identifier only ties requests together.
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    def write_session(self, request: Any, response: Any) -> Session:
        """Create a session identifier and write it to a response cookie.

        Args:
            request: Inbound request, its host becomes the cookie domain
            response: Outgoing response with ``set_cookie`` (Starlette, Flask)

        Returns:
            The new session.

        """
        cookie = SessionCookie(
            name=SESSION_COOKIE_NAME,
            value=f"{simple_uuid()}.{self._config.client_id}",
            path=self._config.redirect_url,
            domain=_request_host(request),
            httponly=True,
        )
        response.set_cookie(
            cookie.name,
            cookie.value,
            path=cookie.path,
            domain=cookie.domain,
            httponly=cookie.httponly,
        )
        return Session(id=cookie.value, cookie=cookie)

    def create_session(self, request: Any, response: Any) -> str:
        """Start a session on a response and return its identifier.

        The caller keeps the identifier for its own bookkeeping.
        """
        return self.write_session(request, response).id

    @staticmethod
    def read_session(request: Any) -> str:
        """Return the session identifier carried by a request.

        Raises:
            SessionNotFoundError: If the request has no session cookie.

        """
        session_id = request.cookies.get(SESSION_COOKIE_NAME)
        if session_id is None:
            raise SessionNotFoundError(SESSION_COOKIE_NAME)
        return session_id
