"""Exception classes for the Freshdesk SDK."""

from enum import Enum
from typing import Any, Dict, Optional, Type


DEFAULT_ERROR_MESSAGE = "Error in Freshdesk's client API"
NOT_JSON_MESSAGE = "Not a JSON response from API"


class ErrorKind(str, Enum):
    """Where a failed call went wrong."""

    TRANSPORT = "transport"
    DECODE = "decode"
    APPLICATION = "application"


class FreshdeskError(Exception):
    """Base exception for all Freshdesk SDK errors."""
    
    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
    ) -> None:
        message = message or DEFAULT_ERROR_MESSAGE
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data
    
    def __str__(self) -> str:
        if self.status_code:
            return f"HTTP {self.status_code}: {self.message}"
        return self.message
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class FreshdeskAPIError(FreshdeskError):
    """Raised when the API answers with something other than success.

    ``kind`` is ``ErrorKind.DECODE`` when the body was not JSON and
    ``ErrorKind.APPLICATION`` when the API returned a JSON error payload.
    ``response_data`` holds that payload, or ``None`` for decode errors.
    """
    
    def __init__(
        self,
        message: Optional[str] = None,
        response_data: Optional[Any] = None,
        kind: ErrorKind = ErrorKind.APPLICATION,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, response_data=response_data, **kwargs)
        self.kind = kind
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"kind={self.kind.value!r})"
        )


class UnauthorizedError(FreshdeskAPIError):
    """Raised when the API key is missing or invalid (HTTP 401)."""


class ForbiddenError(FreshdeskAPIError):
    """Raised when the agent lacks the required permission (HTTP 403)."""


class NotFoundError(FreshdeskAPIError):
    """Raised when a resource is not found (HTTP 404)."""


class ConflictError(FreshdeskAPIError):
    """Raised when a unique field is already taken (HTTP 409)."""


class ConfigurationError(FreshdeskError):
    """Raised when there's a configuration error."""
    
    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field


_STATUS_ERRORS: Dict[int, Type[FreshdeskAPIError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def error_class_for_status(status_code: int) -> Type[FreshdeskAPIError]:
    """Return the application error class used for an HTTP status."""
    return _STATUS_ERRORS.get(status_code, FreshdeskAPIError)
