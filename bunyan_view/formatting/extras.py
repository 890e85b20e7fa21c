"""
Rendering of extra (non-schema) record fields.

Short values are shown inline after the message as ``(key=value,...)``.
Long or multi-line values are shown below it as indented detail blocks.
"""

import json
from typing import Any, Dict, List, Tuple

from bunyan_view.formatting.styles import Style, paint


MAX_INLINE_LENGTH = 50
INDENT = "    "
DETAIL_SEPARATOR = f"\n{INDENT}--\n"


def stringify(value: Any) -> str:
    """
    Render an extra value as text.
    
    Strings are kept raw unless empty or containing a space, in which
    case they are quoted. Anything else is pretty-printed JSON with a
    two space indent.
    """
    if isinstance(value, str):
        if not value or " " in value:
            return f'"{value}"'
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def is_detail(stringified: str) -> bool:
    """True when a stringified value is too long or too tall to go inline."""
    # length in UTF-8 bytes
    return "\n" in stringified or len(stringified.encode("utf-8")) > MAX_INLINE_LENGTH


def indent(text: str) -> str:
    """Prefix every line of text with four spaces."""
    lines = [line.rstrip("\r") for line in text.split("\n")]
    # a trailing newline does not start a new line
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return INDENT + f"\n{INDENT}".join(lines)


def classify_extras(extras: Dict[str, Any]) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str]]]:
    """
    Split extras into inline and detail pairs.
    
    Args:
        extras: Extra fields of a record
        
    Returns:
        (inline, details) lists of (key, rendered value) pairs. Detail
        string values are unquoted.
    """
    inline = []
    details = []
    for key, value in extras.items():
        stringified = stringify(value)
        if is_detail(stringified):
            details.append((key, value if isinstance(value, str) else stringified))
        else:
            inline.append((key, stringified))
    return inline, details


def format_extras(extras: Dict[str, Any], use_color: bool = False) -> str:
    """
    Render the extras block that follows a record's message.
    
    The result is always ``"{inline}\\n{details}"``: the inline group
    (`` (k=v,...)`` or empty), a newline, then the detail blocks
    followed by a newline (or nothing).
    """
    inline, details = classify_extras(extras)
    
    formatted_inline = ""
    if inline:
        pairs = ",".join(f"{paint(key, Style.BOLD, use_color)}={value}" for key, value in inline)
        formatted_inline = f" ({pairs})"
    
    formatted_details = ""
    if details:
        blocks = [indent(f"{paint(key, Style.BOLD, use_color)}: {value}") for key, value in details]
        formatted_details = DETAIL_SEPARATOR.join(blocks) + "\n"
    
    return f"{formatted_inline}\n{formatted_details}"
