"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from bunyan_view.parsers.bunyan_parser import BunyanParser


@lru_cache()
def get_parser() -> BunyanParser:
    """Get cached parser instance."""
    return BunyanParser()
