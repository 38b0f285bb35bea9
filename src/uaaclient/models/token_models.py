"""Token and claims models for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import TokenParseError, UnsupportedTokenFormatError
from .oauth_models import OAuthTokenResponse

# Compact JWE serialization has five segments, JWS has three
_JWE_SEGMENTS = 5


class Claims(BaseModel):
    """Decoded body of a UAA access token.

    None of these values are verified. They come straight out of the JWT
    payload, so treat them as metadata for display or expiry decisions and
    never as the basis for an authorization decision.
    """

    model_config = ConfigDict(extra="allow")

    # JWT ID, unique identifier for this token
    jti: str = ""
    # Time the token was issued
    iat: datetime | None = None
    # Time the token expires
    exp: datetime | None = None
    # Issuer (who created and signed this token)
    iss: str = ""
    # Identity zone, the tenant in multi-tenant UAA deployments
    zid: str = ""
    # Identity provider that authenticated the end-user
    origin: str = ""
    user_name: str = ""
    email: str = ""
    sub: str = ""
    # Group memberships granted to this access token
    scope: list[str] = Field(default_factory=list)
    authorities: list[str] = Field(default_factory=list)
    # Client that requested the token
    client_id: str = ""
    grant_type: str = ""

    @field_validator(
        "jti", "iss", "zid", "origin", "user_name", "email", "sub", "client_id", "grant_type",
        mode="before",
    )
    @classmethod
    def null_as_empty_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("scope", "authorities", mode="before")
    @classmethod
    def null_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("iat", "exp", mode="before")
    @classmethod
    def from_epoch(cls, v: Any) -> Any:
        """Convert epoch seconds to UTC datetimes."""
        if isinstance(v, bool):
            raise ValueError("epoch timestamp must be an integer")
        if isinstance(v, (int, float)):
            try:
                return datetime.fromtimestamp(v, tz=timezone.utc)
            except (OverflowError, OSError) as e:
                raise ValueError(f"epoch timestamp out of range: {v}") from e
        return v

    @property
    def iat_raw(self) -> int:
        return int(self.iat.timestamp()) if self.iat else 0

    @property
    def exp_raw(self) -> int:
        return int(self.exp.timestamp()) if self.exp else 0


class Token(BaseModel):
    """An OAuth2 access token with its optional refresh token.

    ``claims`` stays empty until :meth:`unsafe_parse_claims` is called.
    """

    access_token: str
    token_type: str = "bearer"
    refresh_token: str | None = None
    expiry: datetime | None = None
    claims: Claims = Field(default_factory=Claims)
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_response(
        cls, response: OAuthTokenResponse, now: datetime | None = None
    ) -> Token:
        """Build a token from a token endpoint response.

        Args:
            response: Parsed token endpoint body
            now: Reference time for ``expires_in``, defaults to the current time

        Returns:
            The token, with ``expiry`` set when the server sent ``expires_in``.

        """
        expiry = None
        if response.expires_in:
            now = now or datetime.now(timezone.utc)
            expiry = now + timedelta(seconds=response.expires_in)

        return cls(
            access_token=response.access_token,
            token_type=response.token_type or "bearer",
            refresh_token=response.refresh_token,
            expiry=expiry,
            extra=dict(response.model_extra or {}),
        )

    def type(self) -> str:
        """Return the token type with canonical capitalization."""
        lowered = self.token_type.lower()
        if lowered in ("", "bearer"):
            return "Bearer"
        if lowered == "mac":
            return "MAC"
        if lowered == "basic":
            return "Basic"
        return self.token_type

    @property
    def authorization_header(self) -> str:
        return f"{self.type()} {self.access_token}"

    def set_auth_header(self, headers: dict[str, str]) -> None:
        """Attach this token to an outgoing request's headers."""
        headers["Authorization"] = self.authorization_header

    def expired(self, now: datetime | None = None) -> bool:
        """Return True once ``expiry`` has passed. Tokens without one never expire."""
        if self.expiry is None:
            return False
        return (now or datetime.now(timezone.utc)) >= self.expiry

    def unsafe_parse_claims(self) -> Claims:
        """Decode the JWT payload into ``claims`` WITHOUT verifying the signature.

        Only use the result for tokens that are already trusted, e.g. to read
        the expiry of a token that was just validated by the identity
        service. The signature is never checked, so anyone can forge these
        claims. Encrypted (JWE) tokens are not supported.

        Returns:
            The parsed claims, also stored on ``self.claims``.

        Raises:
            UnsupportedTokenFormatError: If the token is an encrypted JWT
            TokenParseError: If the token is not a signed JWT or its payload
                does not have the expected shape

        """
        if self.access_token.count(".") == _JWE_SEGMENTS - 1:
            raise UnsupportedTokenFormatError()

        try:
            payload = jwt.decode(
                self.access_token,
                options={"verify_signature": False},
            )
        except jwt.InvalidTokenError as e:
            raise TokenParseError(f"Cannot parse token: {e}") from e

        try:
            claims = Claims.model_validate(payload)
        except PydanticValidationError as e:
            raise TokenParseError(f"Cannot parse token payload: {e}", e.errors()) from e

        self.claims = claims
        return claims
