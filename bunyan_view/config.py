"""
Application configuration using Pydantic Settings.
Loads from BUNYAN_VIEW_* environment variables and .env file.
"""

import logging
import os
import sys
from enum import Enum
from functools import lru_cache
from typing import Optional, TextIO

from pydantic_settings import BaseSettings, SettingsConfigDict


class ColorMode(str, Enum):
    """When to colorize output."""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="BUNYAN_VIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # Application Settings
    app_name: str = "bunyan-view"
    debug: bool = False
    log_level: str = "WARNING"
    
    # Rendering defaults, overridable per CLI call / API request
    color: ColorMode = ColorMode.AUTO
    strict: bool = False
    utc: bool = False
    
    # HTTP API
    host: str = "127.0.0.1"
    port: int = 8000
    
    def resolve_color(self, stream: Optional[TextIO] = None) -> bool:
        """
        Decide whether output written to stream should be colorized.
        
        ``auto`` colors only a terminal, and honours NO_COLOR.
        """
        if self.color == ColorMode.ALWAYS:
            return True
        if self.color == ColorMode.NEVER:
            return False
        if os.environ.get("NO_COLOR"):
            return False
        stream = stream if stream is not None else sys.stdout
        return hasattr(stream, "isatty") and stream.isatty()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Send the tool's own diagnostics to stderr, away from formatted output."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )
