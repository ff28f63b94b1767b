"""ABOUTME: Error taxonomy for the A-Parser API client.

Every failure the client raises derives from AparserError so callers can catch
one type, or the specific subclass when they need to tell a bad configuration
apart from a network problem or a rejection by the service.
"""

from typing import Optional


UNKNOWN_SERVICE_ERROR: str = "unknown error"


# =============================================================================
# Base Error
# =============================================================================

class AparserError(Exception):
    """Base class for all A-Parser client errors."""


# =============================================================================
# Caller-side Errors
# =============================================================================

class ConfigurationError(AparserError):
    """Client handle is missing its URL or password.

    Raised before any network work is attempted.
    """


class InvalidArgumentError(AparserError, ValueError):
    """An argument or option name was rejected by the client."""


# =============================================================================
# Remote-side Errors
# =============================================================================

class TransportError(AparserError):
    """The request could not be delivered or the reply could not be read.

    Covers connection and TLS failures, timeouts, non-2xx HTTP statuses and
    bodies that are not a valid response envelope.

    Attributes:
        status_code: HTTP status when the server answered with one
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ServiceError(AparserError):
    """The service answered with ``success: false``.

    Attributes:
        message: Server-provided ``msg`` or "unknown error"
    """

    def __init__(self, message: Optional[str] = None):
        self.message = UNKNOWN_SERVICE_ERROR if message is None else message
        super().__init__(self.message)


class HTTPStatusCodes:
    """Helper methods for HTTP status code checks."""

    @staticmethod
    def is_success(status_code: int) -> bool:
        """Check if status code is in the 2xx range.

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is in range 200-299
        """
        return 200 <= status_code < 300

    @staticmethod
    def is_auth_error(status_code: int) -> bool:
        """Check if status code indicates authentication/authorization error."""
        return status_code in (401, 403)


__all__ = [
    "UNKNOWN_SERVICE_ERROR",
    "AparserError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "ServiceError",
    "HTTPStatusCodes",
]
