"""
Decode errors raised when a line is not a usable log record.
"""

from enum import Enum


class DecodeErrorKind(str, Enum):
    """Closed set of reasons a line can fail to decode."""
    MALFORMED_JSON = "malformed_json"
    MISSING_OR_INVALID_LEVEL = "missing_or_invalid_level"
    INVALID_TIMESTAMP = "invalid_timestamp"
    MISSING_OR_INVALID_MESSAGE = "missing_or_invalid_message"


class DecodeError(ValueError):
    """
    Base class for all decode failures.
    
    Attributes:
        kind: Which of the known failure kinds this is
        detail: Underlying diagnostic (parser or validator message)
    """
    
    kind: DecodeErrorKind
    
    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"{self.kind.value}: {detail}" if detail else self.kind.value)


class MalformedJsonError(DecodeError):
    """Line is not a well-formed JSON object matching the record schema."""
    kind = DecodeErrorKind.MALFORMED_JSON


class MissingOrInvalidLevelError(DecodeError):
    kind = DecodeErrorKind.MISSING_OR_INVALID_LEVEL


class InvalidTimestampError(DecodeError):
    kind = DecodeErrorKind.INVALID_TIMESTAMP


class MissingOrInvalidMessageError(DecodeError):
    kind = DecodeErrorKind.MISSING_OR_INVALID_MESSAGE
