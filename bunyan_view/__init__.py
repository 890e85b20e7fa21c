"""
bunyan-view - pretty-printer for bunyan/pino structured JSON logs.

Decodes one JSON log record per line and renders it as human-readable,
optionally colorized text.
"""

__version__ = "0.1.9"
