"""
Line assembly for decoded log records.
"""

from datetime import datetime, tzinfo
from typing import Optional

from bunyan_view.formatting.extras import format_extras
from bunyan_view.formatting.levels import format_level
from bunyan_view.formatting.styles import Style, paint
from bunyan_view.models.log_record import LogRecord


class RecordFormatter:
    """
    Renders LogRecords as human-readable text.
    
    Layout:
        [timestamp] LEVEL: name/pid on hostname: message (k=v,...)
            detail: value
    
    Formatting never fails for a decoded record.
    """
    
    def __init__(self, use_color: bool = False, tz: Optional[tzinfo] = None):
        """
        Args:
            use_color: Apply ANSI styling to level, message and extra keys
            tz: Display timezone; None means the local system timezone
        """
        self.use_color = use_color
        self.tz = tz
    
    def format(self, record: LogRecord) -> str:
        """Render one record. The result ends with the extras block's newline(s)."""
        return "[{}] {}: {}: {}{}".format(
            self.format_timestamp(record.timestamp),
            format_level(record.level, self.use_color),
            self.format_source(record),
            paint(record.message, Style.CYAN, self.use_color),
            format_extras(record.extras, self.use_color),
        )
    
    def format_timestamp(self, timestamp: datetime) -> str:
        """ISO 8601 in the display timezone, millisecond precision, ``Z`` for UTC."""
        # astimezone(None) converts to local time
        try:
            local = timestamp.astimezone(self.tz)
        except OverflowError:
            # instants at the edge of the datetime range stay in UTC
            local = timestamp
        formatted = local.isoformat(timespec="milliseconds")
        if formatted.endswith("+00:00"):
            formatted = formatted[:-6] + "Z"
        return formatted
    
    @staticmethod
    def format_source(record: LogRecord) -> str:
        """
        Render the ``name/pid on hostname`` segment.
        
        A missing name drops ``name/``, a missing hostname drops
        `` on hostname``. pid shows as 0 when absent.
        """
        source = str(record.pid or 0)
        if record.name is not None:
            source = f"{record.name}/{source}"
        if record.hostname is not None:
            source = f"{source} on {record.hostname}"
        return source


def format_record(record: LogRecord, use_color: bool = False, tz: Optional[tzinfo] = None) -> str:
    """Render a record. See RecordFormatter."""
    return RecordFormatter(use_color=use_color, tz=tz).format(record)
