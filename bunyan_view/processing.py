"""
Applies decode + format to a stream of raw log lines.

Lines that are not log records are echoed unchanged (or dropped in
strict mode); one bad line never stops the stream.
"""

import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Iterable, Iterator, List, Optional

from bunyan_view.formatting.formatter import RecordFormatter
from bunyan_view.models.errors import DecodeError
from bunyan_view.models.log_record import LogRecord
from bunyan_view.parsers.bunyan_parser import BunyanParser

logger = logging.getLogger(__name__)


@dataclass
class ProcessedLine:
    """Outcome for a single input line."""
    line_number: int
    output: str
    record: Optional[LogRecord] = None
    error: Optional[DecodeError] = None


@dataclass
class ProcessingStats:
    total: int = 0
    formatted: int = 0
    failed: int = 0
    errors: List[ProcessedLine] = field(default_factory=list)


class LineProcessor:
    """
    Formats raw lines one at a time.
    
    Between lines the processor keeps counters (and failed lines when
    collect_errors is set); every line is decoded and rendered
    independently.
    """
    
    def __init__(
        self,
        use_color: bool = False,
        strict: bool = False,
        tz: Optional[tzinfo] = None,
        collect_errors: bool = False,
    ):
        """
        Args:
            use_color: Colorize formatted records
            strict: Drop lines that fail to decode instead of echoing them
            tz: Display timezone, None for local time
            collect_errors: Keep every failed line in stats.errors; leave off
                for unbounded streams
        """
        self.parser = BunyanParser()
        self.formatter = RecordFormatter(use_color=use_color, tz=tz)
        self.strict = strict
        self.collect_errors = collect_errors
        self.stats = ProcessingStats()
    
    def process_line(self, line: str, line_number: int = 0) -> Optional[ProcessedLine]:
        """
        Decode and format one line.
        
        Args:
            line: Raw input line, with or without its trailing newline
            line_number: 1-based position used in error reports
            
        Returns:
            ProcessedLine, or None for blank lines
        """
        raw = line.rstrip("\r\n")
        if not raw.strip():
            return None
        
        self.stats.total += 1
        try:
            record = self.parser.decode(raw)
        except DecodeError as e:
            logger.debug("Line %d is not a log record (%s): %s", line_number, e.kind.value, e.detail)
            self.stats.failed += 1
            output = "" if self.strict else raw + "\n"
            result = ProcessedLine(line_number=line_number, output=output, error=e)
            if self.collect_errors:
                self.stats.errors.append(result)
            return result
        
        self.stats.formatted += 1
        return ProcessedLine(line_number=line_number, output=self.formatter.format(record), record=record)
    
    def process(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Format a stream of lines.
        
        Args:
            lines: Raw input lines, e.g. an open file
            
        Yields:
            Text to write for each line that produces output
        """
        for line_number, line in enumerate(lines, start=1):
            result = self.process_line(line, line_number)
            if result is not None and result.output:
                yield result.output
