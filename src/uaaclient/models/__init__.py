"""UAA client models package.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from .client_models import ClientRegistration
from .oauth_models import (
    OAuthAuthorizeParams,
    OAuthErrorResponse,
    OAuthTokenResponse,
)
from .session_models import SESSION_COOKIE_NAME, Session, SessionCookie
from .token_models import Claims, Token

__all__ = [
    # Token models
    "Claims",
    "Token",
    # OAuth models
    "OAuthAuthorizeParams",
    "OAuthErrorResponse",
    "OAuthTokenResponse",
    # Client models
    "ClientRegistration",
    # Session models
    "SESSION_COOKIE_NAME",
    "Session",
    "SessionCookie",
]
