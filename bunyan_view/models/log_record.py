"""
Decoded bunyan/pino log record.
Fixed fields are typed; every other key is kept verbatim in ``extras``.
"""

import re
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# JSON key -> LogRecord field
RESERVED_KEYS = {
    "v": "schema_version",
    "level": "level",
    "name": "name",
    "hostname": "hostname",
    "pid": "pid",
    "time": "timestamp",
    "msg": "message",
}

# RFC 3339 date-time, e.g. 2012-02-08T22:56:52.856Z or 2012-02-08T23:56:52+01:00
RFC3339_PATTERN = re.compile(
    r'^(\d{4}-\d{2}-\d{2})[Tt ]'     # date
    r'(\d{2}:\d{2}:\d{2})'           # time
    r'(?:\.(\d+))?'                  # optional fraction
    r'([Zz]|[+-]\d{2}:\d{2})$'       # offset, mandatory
)


class Severity(IntEnum):
    """Named bunyan log levels."""
    FATAL = 60
    ERROR = 50
    WARN = 40
    INFO = 30
    DEBUG = 20
    TRACE = 10
    
    @classmethod
    def from_code(cls, code: int) -> Optional["Severity"]:
        """Return the severity for a numeric level, None if it is not a known one."""
        try:
            return cls(code)
        except ValueError:
            return None
    
    @property
    def label(self) -> str:
        """Level name right-aligned to 5 characters (" INFO", "ERROR")."""
        return self.name.rjust(5)


def from_epoch_millis(millis: int) -> datetime:
    """Convert milliseconds since the Unix epoch to a UTC datetime."""
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        raise ValueError(f"timestamp {millis} is out of range")


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC 3339 date-time string into a UTC datetime.
    
    A timezone offset is required. Fractions finer than a microsecond
    are truncated.
    """
    match = RFC3339_PATTERN.match(value)
    if not match:
        raise ValueError(f"not an RFC 3339 date-time: {value!r}")
    
    date_part, time_part, fraction, offset = match.groups()
    fraction = (fraction or "")[:6].ljust(6, "0")
    if offset in ("Z", "z"):
        offset = "+00:00"
    
    try:
        parsed = datetime.fromisoformat(f"{date_part}T{time_part}.{fraction}{offset}")
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"invalid date-time {value!r}: {e}")


def parse_timestamp(value: Any) -> datetime:
    """
    Normalize a ``time`` value to a UTC datetime.
    
    Accepts an RFC 3339 string or integer epoch milliseconds.
    Raises ValueError for anything else.
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError("timestamp must be a string or an integer, got bool")
    if isinstance(value, int):
        return from_epoch_millis(value)
    if isinstance(value, str):
        return parse_rfc3339(value)
    raise ValueError(f"timestamp must be a string or an integer, got {type(value).__name__}")


class LogRecord(BaseModel):
    """
    One structured log line.
    
    Built by the decoder in ``bunyan_view.parsers``; only lives for the
    time it takes to format it.
    """
    
    schema_version: Optional[int] = Field(
        default=None,
        ge=0,
        le=255,
        strict=True,
        description="Bunyan log format version (``v``), informational only"
    )
    level: int = Field(
        ge=0,
        le=255,
        strict=True,
        description="Raw numeric level, see Severity"
    )
    name: Optional[str] = Field(
        default=None,
        strict=True,
        description="Name of the logger that produced the record"
    )
    hostname: Optional[str] = Field(
        default=None,
        strict=True,
        description="Host the record was produced on"
    )
    pid: Optional[int] = Field(
        default=None,
        ge=0,
        le=2 ** 32 - 1,
        strict=True,
        description="Process id of the producer"
    )
    timestamp: datetime = Field(
        description="When the event occurred, normalized to UTC"
    )
    message: str = Field(
        strict=True,
        description="Log message (``msg``)"
    )
    extras: Dict[str, Any] = Field(
        default_factory=dict,
        description="Every key outside the fixed schema, values untouched"
    )
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "schema_version": 0,
                "level": 30,
                "name": "myservice",
                "hostname": "example.com",
                "pid": 123,
                "timestamp": "2012-02-08T22:56:52.856Z",
                "message": "My message",
                "extras": {"req_id": "abc123"},
            }
        }
    )
    
    @field_validator("timestamp", mode="before")
    @classmethod
    def _normalize_timestamp(cls, value: Any) -> datetime:
        return parse_timestamp(value)
    
    @property
    def severity(self) -> Optional[Severity]:
        return Severity.from_code(self.level)
