"""
Logging setup for the cart service.

Modules ask for a logger with ``get_logger(__name__)``. The root handler
is installed once, on first import, unless the host process (uvicorn,
pytest) already installed one.

Environment:
    LOG_LEVEL    DEBUG / INFO / WARNING / ... (default INFO)
    ENVIRONMENT  "production" switches to the compact line format

Cart identities, item ids and product ids arrive from callers, so they
go through ``sanitize_id_for_logging`` / ``sanitize_string_for_logging``
before being interpolated into a message.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Libraries whose INFO output is one line per catalog request
QUIET_LOGGERS = ("httpx", "httpcore")

_CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def configure_logging(level: str | None = None, production: bool | None = None) -> None:
    """
    Install a stdout handler on the root logger.

    Does nothing when the root logger already has handlers.

    Args:
        level: Level name; defaults to LOG_LEVEL
        production: Compact format; defaults to ENVIRONMENT == "production"
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if production is None:
        production = os.environ.get("ENVIRONMENT", "").lower() == "production"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if production else LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)


def _clean(value) -> str:
    # CWE-117: a caller-supplied newline would forge a log entry
    return str(value).translate(_CONTROL_CHARS)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Escaped id cut to its first 8 chars, or "N/A"."""
    if not id_value:
        return "N/A"
    return _clean(id_value)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped string, truncated with "..." past max_length, or "N/A"."""
    if not value:
        return "N/A"
    safe_value = _clean(value)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
