"""Tests for session cookie correlation.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import re
from http.cookies import SimpleCookie

import pytest
from starlette.responses import Response

from uaaclient import SESSION_COOKIE_NAME, SessionNotFoundError, UaaClient

UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


def _set_cookie(response: Response) -> SimpleCookie:
    cookie: SimpleCookie = SimpleCookie()
    cookie.load(response.headers["set-cookie"])
    return cookie


async def test_create_session_sets_cookie(client, make_request) -> None:
    response = Response()

    session_id = client.create_session(
        make_request({"Host": "app.test:8080"}), response
    )

    assert re.fullmatch(rf"{UUID_PATTERN}\.app", session_id)
    morsel = _set_cookie(response)[SESSION_COOKIE_NAME]
    assert morsel.value == session_id
    assert morsel["path"] == "/callback"
    assert morsel["domain"] == "app.test"
    assert morsel["httponly"] is True


async def test_sessions_are_unique(client, make_request) -> None:
    request = make_request({"Host": "app.test"})

    first = client.create_session(request, Response())
    second = client.create_session(request, Response())

    assert first != second


async def test_read_session_round_trip(client, make_request) -> None:
    response = Response()
    session_id = client.create_session(make_request({"Host": "app.test"}), response)

    request = make_request({"Cookie": f"{SESSION_COOKIE_NAME}={session_id}"})

    assert UaaClient.read_session(request) == session_id


def test_read_session_missing(make_request) -> None:
    with pytest.raises(SessionNotFoundError):
        UaaClient.read_session(make_request({"Cookie": "other=value"}))


async def test_write_session_model(client, make_request) -> None:
    session = client.sessions.write_session(make_request({"Host": "app.test"}), Response())

    assert session.cookie.name == SESSION_COOKIE_NAME
    assert session.cookie.value == session.id
    assert session.cookie.httponly is True
