"""Conftest for integration tests against a running UAA."""

import os

import pytest

from uaaclient import Config, UaaClient


@pytest.fixture
async def integration_client():
    """Create a client for integration tests.

    Uses the stock ``admin`` client of a local UAA unless ``UAA_TEST_HOST``
    points elsewhere.
    """
    config = Config(
        client_id=os.environ.get("UAA_TEST_CLIENT_ID", "admin"),
        secret=os.environ.get("UAA_TEST_SECRET", "adminsecret"),
        scheme=os.environ.get("UAA_TEST_SCHEME", "http"),
        host=os.environ.get("UAA_TEST_HOST", "localhost:8080"),
        uaa_endpoint=os.environ.get("UAA_TEST_ENDPOINT", "/oauth"),
        timeout=10.0,
    )
    async with UaaClient(config) as client:
        yield client
