"""
Text rendering of log records.
"""

from bunyan_view.formatting.formatter import RecordFormatter, format_record
from bunyan_view.formatting.levels import format_level
from bunyan_view.formatting.extras import format_extras, stringify
from bunyan_view.formatting.styles import Style, paint

__all__ = [
    "RecordFormatter",
    "format_record",
    "format_level",
    "format_extras",
    "stringify",
    "Style",
    "paint",
]
