"""Logging configuration.

The library only emits structlog events; it never configures logging on
import. Host programs call configure_logging() once at startup, or set up
structlog themselves.

Configuration via environment variables:
- CHECKED_DECIMAL_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
- CHECKED_DECIMAL_LOG_FORMAT: console or json (default: console)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class LoggingConfig:
    """Settings for configure_logging().

    Attributes:
        level: Minimum level emitted (default: WARNING)
        renderer: "console" for human-readable output, "json" for log shipping
    """

    level: str = "WARNING"
    renderer: str = "console"

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.level} (expected one of {LOG_LEVELS})")
        if self.renderer not in LOG_FORMATS:
            raise ValueError(f"Unknown log format: {self.renderer} (expected one of {LOG_FORMATS})")

    @classmethod
    def from_env(cls) -> LoggingConfig:
        """Read settings from CHECKED_DECIMAL_LOG_LEVEL and CHECKED_DECIMAL_LOG_FORMAT."""
        return cls(
            level=os.environ.get("CHECKED_DECIMAL_LOG_LEVEL", "WARNING").upper(),
            renderer=os.environ.get("CHECKED_DECIMAL_LOG_FORMAT", "console").lower(),
        )


# Default configuration instance
DEFAULT_LOGGING_CONFIG = LoggingConfig()


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog for the host process."""
    config = config or DEFAULT_LOGGING_CONFIG
    renderer = (
        structlog.processors.JSONRenderer()
        if config.renderer == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, config.level)),
    )
