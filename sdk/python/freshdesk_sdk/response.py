"""Turning HTTP outcomes into call results."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .exceptions import (
    DEFAULT_ERROR_MESSAGE,
    NOT_JSON_MESSAGE,
    ErrorKind,
    FreshdeskAPIError,
    error_class_for_status,
)

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = (200, 201)
NO_CONTENT_STATUS = 204

Callback = Callable[[Optional[BaseException], Any], None]


@dataclass(frozen=True)
class APIResult:
    """Outcome of a single API call: either data or an error, never both."""
    
    data: Any = None
    error: Optional[BaseException] = None
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    def unwrap(self) -> Any:
        """Return the data, or raise the error exactly as it was classified."""
        if self.error is not None:
            raise self.error
        return self.data
    
    def deliver(self, callback: Callback) -> None:
        """Hand the outcome to an ``(error, data)`` style callback."""
        if self.error is not None:
            callback(self.error, None)
        else:
            callback(None, self.data)
    
    @classmethod
    def success(cls, data: Any, status_code: Optional[int] = None) -> "APIResult":
        return cls(data=data, status_code=status_code)
    
    @classmethod
    def failure(
        cls,
        error: BaseException,
        kind: ErrorKind,
        status_code: Optional[int] = None,
    ) -> "APIResult":
        return cls(error=error, kind=kind, status_code=status_code)


def _error_message(payload: Any) -> str:
    if isinstance(payload, dict):
        description = payload.get("description")
        if isinstance(description, str) and description:
            return description
    return DEFAULT_ERROR_MESSAGE


def _decode_failure(status_code: int) -> APIResult:
    error = FreshdeskAPIError(
        NOT_JSON_MESSAGE,
        response_data=None,
        kind=ErrorKind.DECODE,
        status_code=status_code,
    )
    return APIResult.failure(error, ErrorKind.DECODE, status_code)


def classify_response(
    transport_error: Optional[BaseException],
    status_code: Optional[int],
    raw_body: Optional[str],
    path: str = "",
    log_level: int = logging.DEBUG,
) -> APIResult:
    """Decide what a caller sees for one HTTP exchange.

    200/201 with a JSON body is success, 204 is success with ``None``
    whatever the body holds. Any other status is an application error whose
    message comes from the payload's ``description`` field. A body that does
    not parse as JSON is a decode error on both branches.

    Each branch writes one trace line at ``log_level``.
    """
    if transport_error is not None:
        logger.log(
            log_level,
            "Unexpected transport error [%r], req path [%s]", transport_error, path
        )
        return APIResult.failure(transport_error, ErrorKind.TRANSPORT)
    
    if status_code == NO_CONTENT_STATUS:
        logger.log(
            log_level,
            "No content status [%s], req path [%s] raw body: %s",
            status_code, path, raw_body,
        )
        return APIResult.success(None, status_code)
    
    try:
        payload = json.loads(raw_body if raw_body is not None else "")
    except ValueError:
        logger.log(
            log_level,
            "Not a JSON resp for status [%s], req path [%s] raw body: %s",
            status_code, path, raw_body,
        )
        return _decode_failure(status_code)
    
    if status_code in SUCCESS_STATUSES:
        logger.log(
            log_level,
            "Success status [%s], req path [%s] raw body: %s",
            status_code, path, raw_body,
        )
        return APIResult.success(payload, status_code)
    
    logger.log(
        log_level,
        "Unexpected/Error status [%s], req path [%s] raw body: %s",
        status_code, path, raw_body,
    )
    error_class = error_class_for_status(status_code)
    error = error_class(
        _error_message(payload),
        response_data=payload,
        kind=ErrorKind.APPLICATION,
        status_code=status_code,
    )
    return APIResult.failure(error, ErrorKind.APPLICATION, status_code)
