"""Logging helpers shared by every module in the package.

Usage:
    from mirror.utils.logging import get_logger

    logger = get_logger(__name__)
"""

import json
import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "mirror"

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger namespaced under the package root.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Configure the package root logger with a single stream handler.

    Calling this again replaces the previous handler rather than stacking
    another one.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...).
        json_format: Emit JSON lines instead of plain text.

    Returns:
        The configured root logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
