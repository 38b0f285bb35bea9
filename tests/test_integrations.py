"""Tests for the FastAPI and Flask integrations.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import httpx
import pytest
import respx
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from flask import Flask

from uaaclient import Config, Token, UaaClient
from uaaclient.integrations import (
    UaaFastAPI,
    UaaFlask,
    get_current_token,
    require_scope,
    scope_required,
    token_required,
)

CHECK_TOKEN_URL = "https://uaa.test/check_token"


@pytest.fixture
def uaa_client(config: Config) -> UaaClient:
    return UaaClient(config)


@pytest.fixture
def bearer(make_jwt, sample_claims) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_jwt(sample_claims)}"}


class TestFastAPI:
    @pytest.fixture
    def app(self, uaa_client: UaaClient) -> FastAPI:
        uaa = UaaFastAPI(uaa_client)
        app = FastAPI()

        @app.get("/me")
        async def me(token: Token = Depends(uaa.require_token())) -> dict:
            return {"user_name": token.claims.user_name}

        @app.get("/admin")
        async def admin(token: Token = Depends(require_scope(uaa, "uaa.admin"))) -> dict:
            return {"ok": True}

        return app

    def test_valid_token(self, app, bearer) -> None:
        with respx.mock:
            route = respx.post(CHECK_TOKEN_URL).mock(return_value=httpx.Response(200))
            response = TestClient(app).get("/me", headers=bearer)

        assert response.status_code == 200
        assert response.json() == {"user_name": "marissa"}
        assert route.called

    def test_missing_header(self, app) -> None:
        response = TestClient(app).get("/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_wrong_scheme(self, app) -> None:
        response = TestClient(app).get("/me", headers={"Authorization": "Basic abc"})

        assert response.status_code == 401

    def test_rejected_token(self, app, bearer) -> None:
        with respx.mock:
            respx.post(CHECK_TOKEN_URL).mock(
                return_value=httpx.Response(400, json={"error_description": "token expired"})
            )
            response = TestClient(app).get("/me", headers=bearer)

        assert response.status_code == 401
        assert "token expired" in response.json()["detail"]

    def test_missing_scope(self, app, bearer) -> None:
        with respx.mock:
            respx.post(CHECK_TOKEN_URL).mock(return_value=httpx.Response(200))
            response = TestClient(app).get("/admin", headers=bearer)

        assert response.status_code == 403


class TestFlask:
    @pytest.fixture
    def app(self, uaa_client: UaaClient) -> Flask:
        uaa = UaaFlask(uaa_client)
        app = Flask(__name__)

        @app.get("/me")
        @token_required(uaa)
        async def me():
            return {"user_name": get_current_token().claims.user_name}

        @app.get("/profile")
        @scope_required(uaa, "openid")
        async def profile():
            return {"ok": True}

        @app.get("/admin")
        @scope_required(uaa, "uaa.admin")
        async def admin():
            return {"ok": True}

        return app

    def test_valid_token(self, app, bearer) -> None:
        with respx.mock:
            respx.post(CHECK_TOKEN_URL).mock(return_value=httpx.Response(200))
            response = app.test_client().get("/me", headers=bearer)

        assert response.status_code == 200
        assert response.get_json() == {"user_name": "marissa"}

    def test_missing_header(self, app) -> None:
        response = app.test_client().get("/me")

        assert response.status_code == 401
        assert "Authorization header missing" in response.get_json()["error"]

    def test_scopes(self, app, bearer) -> None:
        with respx.mock:
            respx.post(CHECK_TOKEN_URL).mock(return_value=httpx.Response(200))
            allowed = app.test_client().get("/profile", headers=bearer)
            denied = app.test_client().get("/admin", headers=bearer)

        assert allowed.status_code == 200
        assert denied.status_code == 403

    def test_rejected_token(self, app, bearer) -> None:
        with respx.mock:
            respx.post(CHECK_TOKEN_URL).mock(return_value=httpx.Response(401))
            response = app.test_client().get("/me", headers=bearer)

        assert response.status_code == 401
