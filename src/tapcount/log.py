"""Logging setup for the TapCount service."""

import logging
from typing import Optional

from .config import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure root logging from a LoggingConfig."""
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level!r}")

    logging.basicConfig(level=level, format=config.format, force=True)
