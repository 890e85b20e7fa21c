"""
Level label rendering.
"""

from bunyan_view.formatting.styles import Style, paint
from bunyan_view.models.log_record import Severity


LEVEL_STYLES = {
    Severity.FATAL: Style.REVERSED,
    Severity.ERROR: Style.RED,
    Severity.WARN: Style.YELLOW,
    Severity.INFO: Style.GREEN,
    Severity.DEBUG: Style.BLUE,
    Severity.TRACE: Style.GRAY,
}


def format_level(level: int, use_color: bool = False) -> str:
    """
    Render a numeric level as a 5 character label.
    
    Known severities get their padded name (" INFO", "FATAL"), styled
    when use_color is set. Unknown levels render as ``LVL{n}``, never styled.
    """
    severity = Severity.from_code(level)
    if severity is None:
        return f"LVL{level}"
    return paint(severity.label, LEVEL_STYLES[severity], use_color)
