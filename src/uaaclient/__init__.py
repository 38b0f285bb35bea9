"""
uaaclient

Async Python client library for UAA-style OAuth2/OpenID identity services.
Acquires and validates tokens, reads unverified JWT claims, correlates
sessions through a cookie and manages OAuth client registrations.
"""

from .client import UaaClient
from .config import Config, UaaSettings, default_config
from .exceptions import *
from .models import *
from ._tokens import token_from_header

__version__ = "1.0.0"
__author__ = "UAAClient Team"

__all__ = [
    "UaaClient",
    "Config",
    "UaaSettings",
    "default_config",
    "token_from_header",
    # Exceptions
    "UaaClientError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "ClientAuthenticationError",
    "AuthorizationError",
    "InvalidTokenError",
    "TokenValidationError",
    "TokenParseError",
    "UnsupportedTokenFormatError",
    "InvalidAuthorizationHeaderError",
    "NotFoundError",
    "ClientNotFoundError",
    "SessionNotFoundError",
    "ConflictError",
    "ClientAlreadyExistsError",
    "ServerError",
    "NetworkError",
    "ResponseTooLargeError",
    "TimeoutError",
    # Models
    "Claims",
    "Token",
    "ClientRegistration",
    "Session",
    "SessionCookie",
    "SESSION_COOKIE_NAME",
]
