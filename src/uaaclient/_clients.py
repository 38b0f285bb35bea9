"""OAuth client registration service for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from ._base import BaseClient, RequestConfig
from .config import Config
from .exceptions import (
    ClientAlreadyExistsError,
    ClientNotFoundError,
    UaaClientError,
    ValidationError,
)
from .models import ClientRegistration, Token

logger = logging.getLogger(__name__)

CLIENT_ENDPOINT = "/clients/"


class ClientService:
    """Service for managing OAuth client registrations.

    Every call needs a token carrying the ``clients.*`` authorities.
    """

    def __init__(self, client: BaseClient, config: Config) -> None:
        """Initialize client registration service.

        Args:
            client: The base HTTP client
            config: Client configuration

        """
        self._client = client
        self._config = config

    @property
    def _endpoint(self) -> str:
        return self._config.uaa_uri + CLIENT_ENDPOINT

    async def create(
        self, token: Token, client: ClientRegistration
    ) -> tuple[bool, UaaClientError | None]:
        """Register a new OAuth client.

        A 409 returns ``(True, ClientAlreadyExistsError)``: a client with the
        id exists, but it may not match ``client``. Callers decide whether
        that counts as success.

        Args:
            token: Bearer token of the caller
            client: Registration to create

        Returns:
            ``(exists, error)``, see above.

        Raises:
            NetworkError: For transport failures

        """
        headers: dict[str, str] = {}
        token.set_auth_header(headers)
        response = await self._client.request(
            "POST",
            self._endpoint,
            config=RequestConfig(json_data=client.to_wire(), headers=headers),
        )

        if response.status_code == 201:
            logger.info("Created client %s", client.client_id)
            return True, None
        if response.status_code == 409:
            return True, ClientAlreadyExistsError(client.client_id)
        if response.status_code == 400:
            return False, ValidationError(
                f"Invalid request: {response.text}", response.text
            )
        return False, UaaClientError(
            f"Cannot create client {client.client_id}. "
            f"Status {response.status_code}. {response.text}",
            details=response.text,
            status_code=response.status_code,
        )

    async def delete(self, token: Token, client_id: str) -> int:
        """Delete a client registration.

        Returns:
            The raw HTTP status code of the deletion.

        Raises:
            NetworkError: For transport failures

        """
        headers: dict[str, str] = {}
        token.set_auth_header(headers)
        response = await self._client.request(
            "DELETE",
            self._endpoint + quote(client_id, safe=""),
            config=RequestConfig(headers=headers),
        )
        return response.status_code

    async def get(self, token: Token, client_id: str) -> ClientRegistration:
        """Fetch a client registration, including unrecognized fields.

        Raises:
            ClientNotFoundError: If no client has this id
            UaaClientError: For any other unexpected status or a bad body
            NetworkError: For transport failures

        """
        headers: dict[str, str] = {}
        token.set_auth_header(headers)
        response = await self._client.request(
            "GET",
            self._endpoint + quote(client_id, safe=""),
            config=RequestConfig(headers=headers),
        )

        if response.status_code == 404:
            raise ClientNotFoundError(client_id)
        if response.status_code != 200:
            raise UaaClientError(
                f"Cannot fetch client {client_id}. Status {response.status_code}",
                details=response.text,
                status_code=response.status_code,
            )

        try:
            return ClientRegistration.from_json(response.body)
        except PydanticValidationError as e:
            raise UaaClientError(
                f"Cannot decode client {client_id}", "DECODE_ERROR", e.errors()
            ) from e
