"""
Record model for bunyan-view.
"""

from bunyan_view.models.log_record import LogRecord, Severity, RESERVED_KEYS
from bunyan_view.models.errors import (
    DecodeError,
    DecodeErrorKind,
    MalformedJsonError,
    MissingOrInvalidLevelError,
    InvalidTimestampError,
    MissingOrInvalidMessageError,
)

__all__ = [
    "LogRecord",
    "Severity",
    "RESERVED_KEYS",
    "DecodeError",
    "DecodeErrorKind",
    "MalformedJsonError",
    "MissingOrInvalidLevelError",
    "InvalidTimestampError",
    "MissingOrInvalidMessageError",
]
