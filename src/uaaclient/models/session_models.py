"""Session correlation models for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from pydantic import BaseModel

SESSION_COOKIE_NAME = "JSESSIONID"


class SessionCookie(BaseModel):
    """Attributes of the session cookie written to a response."""

    name: str = SESSION_COOKIE_NAME
    value: str
    path: str = "/"
    domain: str | None = None
    httponly: bool = True


class Session(BaseModel):
    """An opaque session identifier and the cookie that carries it."""

    id: str
    cookie: SessionCookie
