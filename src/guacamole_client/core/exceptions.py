"""Exception types raised by the Guacamole client.

Every public client operation raises :class:`OperationError`, chained to the
underlying cause. Structured API errors stay reachable through the chain, so
callers can use :func:`is_not_found` and :func:`is_permission_denied` on
whatever exception they caught.
"""

from http import HTTPStatus
from typing import Any, Optional


ERROR_TYPE_NOT_FOUND = "NOT_FOUND"
ERROR_TYPE_PERMISSION_DENIED = "PERMISSION_DENIED"


class GuacamoleError(Exception):
    """Base exception class for the Guacamole client."""


class APIError(GuacamoleError):
    """Error response returned by the Guacamole REST API.

    Attributes:
        message: Human-readable error description
        type: Machine-readable error category (e.g. "NOT_FOUND")
        status_code: HTTP status code of the response
        details: Full decoded error body, if it was JSON
    """

    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        type: str = "",
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize the API error.

        Args:
            message: Error message
            status_code: HTTP status code
            type: Guacamole error type
            details: Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.type = type
        self.details = details or {}
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Guacamole API error (HTTP {int(self.status_code)}, type {self.type or 'UNKNOWN'}): {self.message}"

    def is_not_found(self) -> bool:
        """Whether the requested resource does not exist."""
        return self.type == ERROR_TYPE_NOT_FOUND

    def is_permission_denied(self) -> bool:
        """Whether the caller lacks permission for the requested operation."""
        return self.type == ERROR_TYPE_PERMISSION_DENIED

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary format."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "type": self.type,
            "status_code": int(self.status_code),
        }


class RequestEncodingError(GuacamoleError):
    """Raised when a request body cannot be serialized. Nothing was sent."""


class OperationError(GuacamoleError):
    """Raised when a client operation fails.

    The original exception (an :class:`APIError`, a ``requests`` transport
    error, a decoding error, ...) is available as ``__cause__``.
    """

    def __init__(self, operation: str, identifier: Optional[str] = None, cause: Optional[BaseException] = None):
        self.operation = operation
        self.identifier = identifier
        target = f" {identifier}" if identifier is not None else ""
        message = f"Failed to {operation}{target}"
        if cause is not None:
            message = f"{message}: {cause!s}"
        super().__init__(message)

    @property
    def api_error(self) -> Optional[APIError]:
        """The structured API error behind this failure, if there is one."""
        return find_api_error(self)


def find_api_error(error: Optional[BaseException]) -> Optional[APIError]:
    """Find the first APIError in an exception chain.

    Follows explicit ``__cause__`` links only (``raise ... from``), starting
    with the exception itself. Exceptions merely raised while handling an
    APIError are not part of its chain.

    Args:
        error: Exception to inspect, may be None

    Returns:
        Optional[APIError]: The structured error, or None if the chain has none
    """
    seen = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, APIError):
            return error
        seen.add(id(error))
        error = error.__cause__
    return None


def is_not_found(error: Optional[BaseException]) -> bool:
    """Return True when the error chain holds an APIError of type NOT_FOUND."""
    api_error = find_api_error(error)
    return api_error is not None and api_error.is_not_found()


def is_permission_denied(error: Optional[BaseException]) -> bool:
    """Return True when the error chain holds an APIError of type PERMISSION_DENIED."""
    api_error = find_api_error(error)
    return api_error is not None and api_error.is_permission_denied()
