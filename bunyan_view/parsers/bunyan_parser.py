"""
Decoder for bunyan/pino JSON log lines.
"""

import json
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from bunyan_view.models.log_record import LogRecord, RESERVED_KEYS
from bunyan_view.models.errors import (
    DecodeError,
    MalformedJsonError,
    MissingOrInvalidLevelError,
    InvalidTimestampError,
    MissingOrInvalidMessageError,
)


RawRecord = Union[str, bytes, Dict[str, Any]]

# Checked in this order when a record fails validation on several fields
FIELD_ERRORS = [
    ("level", MissingOrInvalidLevelError),
    ("timestamp", InvalidTimestampError),
    ("message", MissingOrInvalidMessageError),
]


class BunyanParser:
    """
    Parser for bunyan-style JSON log lines.
    
    Each line must hold one JSON object with at least ``level``, ``time``
    and ``msg``. ``time`` may be an RFC 3339 string (bunyan) or integer
    epoch milliseconds (pino). Unknown keys are kept as extras.
    """
    
    def can_parse(self, line: str) -> bool:
        """Check if line decodes into a log record."""
        try:
            self.decode(line)
            return True
        except DecodeError:
            return False
    
    def decode(self, raw: RawRecord) -> LogRecord:
        """
        Decode a single line (or an already parsed JSON object).
        
        Args:
            raw: JSON text of one record, or the dict it decodes to
            
        Returns:
            The decoded LogRecord
            
        Raises:
            DecodeError: One of its subclasses, depending on what is wrong
        """
        data = raw if isinstance(raw, dict) else self._load_json(raw)
        
        fields: Dict[str, Any] = {}
        extras: Dict[str, Any] = {}
        for key, value in data.items():
            if key in RESERVED_KEYS:
                fields[RESERVED_KEYS[key]] = value
            else:
                extras[key] = value
        fields["extras"] = extras
        
        try:
            return LogRecord.model_validate(fields)
        except ValidationError as e:
            raise self._to_decode_error(e)
    
    def parse_content(self, content: str) -> List[LogRecord]:
        """
        Decode every line of a multi-line string.
        
        Args:
            content: Newline separated JSON records
            
        Returns:
            Records for the lines that decode, in input order
        """
        records = []
        for line in content.split("\n"):
            line = line.rstrip("\r")
            if not line.strip():
                continue
            try:
                records.append(self.decode(line))
            except DecodeError:
                continue
        return records
    
    def _load_json(self, raw: Union[str, bytes]) -> Dict[str, Any]:
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedJsonError(str(e))
        
        if not isinstance(data, dict):
            raise MalformedJsonError(f"expected a JSON object, got {type(data).__name__}")
        return data
    
    def _to_decode_error(self, error: ValidationError) -> DecodeError:
        """Pick the decode error kind that best describes a validation failure."""
        failed = {}
        for item in error.errors():
            field = item["loc"][0] if item["loc"] else None
            failed.setdefault(field, item["msg"])
        
        for field, error_class in FIELD_ERRORS:
            if field in failed:
                return error_class(failed[field])
        
        field, message = next(iter(failed.items()))
        return MalformedJsonError(f"{field}: {message}")


_parser = BunyanParser()


def decode(raw: RawRecord) -> LogRecord:
    """Decode one raw log line into a LogRecord. See BunyanParser.decode."""
    return _parser.decode(raw)
