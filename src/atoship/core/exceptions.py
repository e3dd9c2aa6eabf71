"""Exception hierarchy raised by the SDK.

Every error raised by the client derives from AtoshipError, so callers can
catch one type. HTTP failures carry the status code, the server error code
and request id when present.
"""

from typing import Any, Dict, List, Optional


class AtoshipError(Exception):
    """Base error for all SDK failures."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.request_id = request_id
        self.response_body = response_body

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ConfigurationError(AtoshipError):
    """Invalid SDK configuration."""


class ValidationError(AtoshipError):
    """Request data failed client-side or server-side validation.

    ``details`` maps a dotted field path to the list of messages for it.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, List[str]]] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.details = details or {}

    def has_details(self) -> bool:
        return bool(self.details)


class AuthenticationError(AtoshipError):
    """API key missing, invalid or revoked (HTTP 401)."""


class AuthorizationError(AtoshipError):
    """API key lacks permission for the resource (HTTP 403)."""


class NotFoundError(AtoshipError):
    """Resource does not exist (HTTP 404)."""


class ConflictError(AtoshipError):
    """Request conflicts with the resource state (HTTP 409)."""


class RateLimitError(AtoshipError):
    """Too many requests (HTTP 429)."""

    def __init__(self, message: str, retry_after: Optional[float] = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(AtoshipError):
    """Server side failure (HTTP 5xx)."""


class NetworkError(AtoshipError):
    """The request never produced an HTTP response."""


class TimeoutError(NetworkError):
    """The request timed out."""
