"""Client configuration for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

import secrets
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

SUPPORTED_SCHEMES = ("http", "https")


def simple_uuid() -> str:
    """Return 16 random bytes formatted as hex groups (8-4-4-4-12)."""
    return str(uuid.UUID(bytes=secrets.token_bytes(16)))


class Config(BaseModel):
    """Immutable configuration of a UAA client.

    Raises:
        ConfigurationError: If ``client_id`` is empty or ``scheme`` is not
            ``http`` or ``https``.

    """

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., description="The application's client ID")
    secret: str = Field(
        default="",
        validate_default=True,
        description="The application's secret; generated when empty",
    )
    scheme: str = Field(default="http", validate_default=True)
    host: str = Field(default="localhost", description="UAA host, optionally with port")
    uaa_endpoint: str = Field(
        default="/oauth", description="Base path of the OAuth endpoints on the host"
    )
    redirect_url: str = Field(
        default="/", description="URL users are sent back to after authorization"
    )
    scopes: tuple[str, ...] = ()
    timeout: float | None = Field(
        default=30.0, description="Deadline in seconds for each network call"
    )

    @model_validator(mode="wrap")
    @classmethod
    def as_configuration_error(cls, data: Any, handler: Any) -> Any:
        """Report every construction path as a ConfigurationError."""
        try:
            return handler(data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.errors()[0]['msg']}", e.errors()
            ) from e

    @field_validator("client_id")
    @classmethod
    def validate_client_id(cls, v: str) -> str:
        if not v:
            raise ValueError("ClientID = nil")
        return v

    @field_validator("secret")
    @classmethod
    def generate_secret(cls, v: str) -> str:
        return v or simple_uuid()

    @field_validator("scheme")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        if not v:
            return "http"
        if v not in SUPPORTED_SCHEMES:
            raise ValueError(f"Unknown protocol scheme: [{v}]")
        return v

    @property
    def uri(self) -> str:
        """Root URI of the identity service host."""
        return f"{self.scheme}://{self.host}"

    @property
    def uaa_uri(self) -> str:
        """Root URI of the OAuth endpoints."""
        return self.uri + self.uaa_endpoint

    @property
    def authorize_url(self) -> str:
        return f"{self.uaa_uri}/authorize"

    @property
    def token_url(self) -> str:
        return f"{self.uaa_uri}/token"


def default_config() -> Config:
    """Return a configuration suitable for a local UAA.

    Returns:
        Config with the development defaults filled in.

    """
    return Config(
        client_id="oauthClient",
        scheme="http",
        host="localhost",
        secret="secret",
        uaa_endpoint="/oauth",
        redirect_url="/",
    )


class UaaSettings(BaseSettings):
    """UAA client settings loaded from ``UAA_*`` environment variables."""

    client_id: str = Field(..., description="OAuth client ID")
    secret: str = Field(default="", description="OAuth client secret")
    scheme: str = Field(default="http", description="http or https")
    host: str = Field(default="localhost", description="UAA host")
    uaa_endpoint: str = Field(default="/oauth", description="OAuth base path")
    redirect_url: str = Field(default="/", description="OAuth callback redirect URL")
    scopes: list[str] = Field(default_factory=list, description="Requested scopes")
    timeout: float | None = Field(default=30.0, description="Request deadline")

    model_config = SettingsConfigDict(env_prefix="UAA_", case_sensitive=False)

    def to_config(self) -> Config:
        """Build an immutable client configuration from these settings."""
        data = self.model_dump()
        data["scopes"] = tuple(data["scopes"])
        return Config(**data)
