"""Core error types shared across adiparse."""

from adiparse.core.errors import (
    AdiParseError,
    FailureKind,
    MalformedResponseError,
    TransportError,
    format_error_message,
)

__all__ = [
    "AdiParseError",
    "FailureKind",
    "MalformedResponseError",
    "TransportError",
    "format_error_message",
]
