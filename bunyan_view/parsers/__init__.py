"""
Log line decoders.
"""

from bunyan_view.parsers.bunyan_parser import BunyanParser, decode

__all__ = [
    "BunyanParser",
    "decode",
]
