"""
Exception classes for the UAA client.
"""

from __future__ import annotations

from typing import Any


class UaaClientError(Exception):
    """Base exception for UAA client errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code


class ConfigurationError(UaaClientError):
    """Raised when the client configuration is invalid."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationError(UaaClientError):
    """Raised when the identity service rejects a request as invalid."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", details, 400)


class AuthenticationError(UaaClientError):
    """Raised when a grant exchange at the token endpoint fails."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Any | None = None,
        status_code: int | None = 401,
    ) -> None:
        super().__init__(message, "AUTHENTICATION_ERROR", details, status_code)


class ClientAuthenticationError(UaaClientError):
    """Raised when the client's basic auth credentials are rejected."""

    def __init__(
        self,
        message: str = "Failed to decode basic authentication token",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, "CLIENT_AUTHENTICATION_ERROR", details, 401)


class AuthorizationError(UaaClientError):
    """Raised when the bearer token lacks the required authorities."""

    def __init__(
        self, message: str = "Insufficient permissions", details: Any | None = None
    ) -> None:
        super().__init__(message, "AUTHORIZATION_ERROR", details, 403)


class InvalidTokenError(UaaClientError):
    """Raised when the identity service reports a token as invalid."""

    def __init__(
        self, message: str = "Could not verify token", details: Any | None = None
    ) -> None:
        super().__init__(message, "INVALID_TOKEN", details, 400)


class TokenValidationError(UaaClientError):
    """Raised when token validation returns an unexpected status."""

    def __init__(
        self, message: str, details: Any | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message, "TOKEN_VALIDATION_ERROR", details, status_code)


class TokenParseError(UaaClientError):
    """Raised when an access token is not a well-formed signed JWT."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, "TOKEN_PARSE_ERROR", details)


class UnsupportedTokenFormatError(TokenParseError):
    """Raised for encrypted (JWE) tokens, which cannot be read without a key."""

    def __init__(
        self,
        message: str = "Cannot parse token: encrypted tokens are not supported",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, details)
        self.code = "UNSUPPORTED_TOKEN_FORMAT"


class InvalidAuthorizationHeaderError(UaaClientError):
    """Raised when the Authorization header does not carry a Bearer token."""

    def __init__(
        self, message: str = "Token type is not a Bearer", details: Any | None = None
    ) -> None:
        super().__init__(message, "INVALID_AUTHORIZATION_HEADER", details)


class NotFoundError(UaaClientError):
    """Raised when a resource is not found."""

    def __init__(
        self, message: str = "Resource not found", details: Any | None = None
    ) -> None:
        super().__init__(message, "NOT_FOUND_ERROR", details, 404)


class ClientNotFoundError(NotFoundError):
    """Raised when a client registration does not exist."""

    def __init__(self, client_id: str) -> None:
        super().__init__(f"Client {client_id} not found", {"client_id": client_id})
        self.client_id = client_id


class SessionNotFoundError(NotFoundError):
    """Raised when the request carries no session cookie."""

    def __init__(self, cookie_name: str = "JSESSIONID") -> None:
        super().__init__(f"Session cookie {cookie_name} not present")
        self.status_code = None
        self.cookie_name = cookie_name


class ConflictError(UaaClientError):
    """Raised when a resource conflict occurs."""

    def __init__(
        self, message: str = "Resource conflict", details: Any | None = None
    ) -> None:
        super().__init__(message, "CONFLICT_ERROR", details, 409)


class ClientAlreadyExistsError(ConflictError):
    """Returned when a client registration with the same id already exists."""

    def __init__(self, client_id: str) -> None:
        super().__init__(
            f"Client already exists: {client_id}", {"client_id": client_id}
        )
        self.client_id = client_id


class ServerError(UaaClientError):
    """Raised when a server error occurs."""

    def __init__(
        self,
        message: str = "Internal server error",
        details: Any | None = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, "SERVER_ERROR", details, status_code)


class NetworkError(UaaClientError):
    """Raised when a network error occurs."""

    def __init__(
        self, message: str = "Network error", details: Any | None = None
    ) -> None:
        super().__init__(message, "NETWORK_ERROR", details)


class ResponseTooLargeError(NetworkError):
    """Raised when a response body exceeds the read limit."""

    def __init__(self, limit: int, details: Any | None = None) -> None:
        super().__init__(f"Cannot read body: response exceeds {limit} bytes", details)
        self.code = "RESPONSE_TOO_LARGE"
        self.limit = limit


class TimeoutError(UaaClientError):  # noqa: A001
    """Raised when a request times out."""

    def __init__(
        self, message: str = "Request timeout", details: Any | None = None
    ) -> None:
        super().__init__(message, "TIMEOUT_ERROR", details)


def create_error_from_response(
    status_code: int,
    error_response: dict[str, Any | None] | None = None,
    default_message: str | None = None,
) -> UaaClientError:
    """Create an appropriate error instance based on an OAuth2 error response.

    UAA reports failures as ``{"error": ..., "error_description": ...}``.
    """
    info = error_response or {}
    message = info.get("error_description") or info.get("message")
    code = info.get("error", "UNKNOWN_ERROR")

    message_str = str(message) if message else (default_message or "An error occurred")
    code_str = str(code) if code is not None else "UNKNOWN_ERROR"

    if status_code == 400:
        if code_str in ("invalid_grant", "invalid_client", "unauthorized_client"):
            return AuthenticationError(message_str, info, 400)
        return ValidationError(message_str, info)
    elif status_code == 401:
        return AuthenticationError(message_str, info)
    elif status_code == 403:
        return AuthorizationError(message_str, info)
    elif status_code == 404:
        return NotFoundError(message_str, info)
    elif status_code == 409:
        return ConflictError(message_str, info)
    elif status_code >= 500:
        return ServerError(message_str, info, status_code)
    else:
        return UaaClientError(message_str, code_str, info, status_code)
