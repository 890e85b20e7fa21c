"""
bunyan-view command line: pretty-print bunyan JSON logs from files or stdin.
"""

import logging
import sys
from datetime import timezone
from pathlib import Path
from typing import List, Optional

import typer

from bunyan_view.config import configure_logging, get_settings
from bunyan_view.processing import LineProcessor

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Pretty-print bunyan/pino JSON log lines.")


@app.command(help="Format JSON log lines read from FILES (or stdin) as readable text.")
def main(
    files: Optional[List[Path]] = typer.Argument(
        None, exists=True, readable=True, dir_okay=False, help="Log files to read (default: stdin)"
    ),
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color", help="Force colorized output on or off (default: auto)"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Suppress lines that are not log records (default: from settings)"
    ),
    utc: bool = typer.Option(False, "--utc", help="Show timestamps in UTC instead of local time"),
):
    settings = get_settings()
    configure_logging()
    
    use_color = color if color is not None else settings.resolve_color(sys.stdout)
    processor = LineProcessor(
        use_color=use_color,
        strict=strict if strict is not None else settings.strict,
        tz=timezone.utc if (utc or settings.utc) else None,
    )
    
    # styling is already decided by the formatter; echoed lines keep their own escapes
    if files:
        for path in files:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                for output in processor.process(f):
                    typer.echo(output, nl=False, color=True)
    else:
        stdin = typer.get_text_stream("stdin", encoding="utf-8", errors="replace")
        for output in processor.process(stdin):
            typer.echo(output, nl=False, color=True)
    
    stats = processor.stats
    logger.info("lines read: %d, formatted: %d, not records: %d", stats.total, stats.formatted, stats.failed)


if __name__ == "__main__":
    app()
