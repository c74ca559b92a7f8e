from __future__ import annotations

import sys

from loguru import logger

from . import config

_SINK_ID = None

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

def configure_logging(level: str | None = None) -> None:
    """Swap loguru's default sink for a single stderr sink at `level`."""
    global _SINK_ID
    level = (level or config.LOG_LEVEL).upper()
    if level not in LEVELS:
        raise ValueError(f"unknown log level {level!r}; expected one of {', '.join(LEVELS)}")
    if _SINK_ID is None:
        logger.remove()
    else:
        logger.remove(_SINK_ID)
    _SINK_ID = logger.add(
        sys.stderr,
        level=level,
        format="{time:HH:mm:ss.SSS} | {level: <7} | {name}:{function} - {message}",
    )
