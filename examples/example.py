"""Example usage of the uaaclient library."""
# Copyright (c) 2025 UAAClient Team. All rights reserved.

import asyncio
import logging

from uaaclient import (
    ClientRegistration,
    Config,
    InvalidTokenError,
    UaaClient,
    UaaClientError,
)


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main() -> None:
    """Execute main example function."""
    config = Config(
        client_id="admin",
        secret="adminsecret",
        host="localhost:8080",
        scopes=("clients.read", "clients.write"),
    )

    async with UaaClient(config) as client:
        try:
            # Example 1: Obtain a token for the client itself
            logger.info("=== Client Credentials Example ===")

            token = await client.oauth.client_credentials_token()
            claims = token.unsafe_parse_claims()
            logger.info("Token for %s expires at %s", claims.client_id, claims.exp)

            # Example 2: Validate it with the identity service
            logger.info("=== Check Token Example ===")

            await client.valid_token(token)
            logger.info("Token is valid")

            # Example 3: Register a client, with a field this library does not know
            logger.info("=== Client Registration Example ===")

            registration = ClientRegistration(
                client_id="example-app",
                authorized_grant_types=["authorization_code", "refresh_token"],
                redirect_uri=["http://localhost:5000/callback"],
                scope=["openid"],
                client_secret="example-secret",
            )
            registration.set_extra("lastModified", 0)

            created, error = await client.clients.create(token, registration)
            if error is not None:
                logger.warning("Create returned created=%s: %s", created, error)

            fetched = await client.clients.get(token, "example-app")
            logger.info("Fetched client %s (%s)", fetched.client_id, fetched.extra)

            status = await client.clients.delete(token, "example-app")
            logger.info("Deleted client, status %d", status)

            # Example 4: Authorization URL for a browser login
            logger.info("Send the browser to %s", client.auth_code_url("random-state"))

        except InvalidTokenError as e:
            logger.error("Token rejected: %s", e.message)
        except UaaClientError as e:
            logger.error("UAA error [%s]: %s", e.code, e.message)


if __name__ == "__main__":
    asyncio.run(main())
