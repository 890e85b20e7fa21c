"""
ANSI styling applied at the leaves of rendering.
"""

from enum import Enum


ESC = "\033["
RESET = "\033[0m"


class Style(str, Enum):
    """SGR parameter strings for the styles the formatter uses."""
    BOLD = "1"
    REVERSED = "7"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    CYAN = "36"
    GRAY = "38;2;128;128;128"


def paint(text: str, style: Style, enabled: bool) -> str:
    """Wrap text in the style's escape sequence, or return it unchanged when disabled."""
    if not enabled:
        return text
    return f"{ESC}{style.value}m{text}{RESET}"
