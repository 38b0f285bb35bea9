"""OAuth wire models for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from pydantic import BaseModel, ConfigDict


class OAuthTokenResponse(BaseModel):
    """Token endpoint response model.

    UAA adds fields such as ``jti`` and ``id_token``; they are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None


class OAuthErrorResponse(BaseModel):
    """OAuth2 error body, as returned by ``/oauth/token`` and ``/check_token``."""

    model_config = ConfigDict(extra="allow")

    error: str | None = None
    error_description: str | None = None


class OAuthAuthorizeParams(BaseModel):
    """OAuth authorization parameters model."""

    response_type: str = "code"
    client_id: str
    redirect_uri: str | None = None
    scope: str | None = None
    state: str | None = None
