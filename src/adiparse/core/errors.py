"""
Error types and failure kinds for adiparse.

Exceptions are raised inside the HTTP and decoding helpers and are caught at
the data-client boundary, where they are turned into a ``FailureKind`` on a
``FetchResult``. Nothing in this module is meant to reach a display caller.

Failure kinds:
- malformed_locator: identity string does not have the acc://<name>.acme shape
- transport: request could not be sent or no response was received
- http_status: the API answered with a non-success status
- malformed_json: body (or double-encoded body) is not valid JSON
- missing_main_section: no section named "main" in the response
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    """Documented reasons a lookup produced no value."""

    MALFORMED_LOCATOR = "malformed_locator"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_JSON = "malformed_json"
    MISSING_MAIN_SECTION = "missing_main_section"


class AdiParseError(Exception):
    """Base exception for adiparse errors."""

    failure_kind: FailureKind | None = None

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(AdiParseError):
    """Raised when the HTTP request fails before a response is received."""

    failure_kind = FailureKind.TRANSPORT


class MalformedResponseError(AdiParseError):
    """Raised when a response body cannot be decoded as JSON."""

    failure_kind = FailureKind.MALFORMED_JSON


def format_error_message(error: AdiParseError) -> str:
    """Format an error message with its details for logs."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
