"""
Logging helpers for prioflow

All modules obtain their logger through ``get_logger(__name__)`` so that the
whole package hangs off the ``prioflow`` logger. As a library, prioflow only
attaches a ``NullHandler``; applications decide where records go. The CLI
calls ``configure_logging()``, which adds a stderr handler and reads the level
from ``PRIOFLOW_LOG_LEVEL`` (default ``WARNING``).
"""

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "prioflow"
LOG_LEVEL_ENV_VAR = "PRIOFLOW_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_level(level: Optional[str]) -> int:
    level_name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(level_name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send prioflow log records to stderr.

    Safe to call more than once: the stream handler is only added the first
    time, later calls just update the level.

    Args:
        level: Level name; falls back to ``PRIOFLOW_LOG_LEVEL``, then ``WARNING``

    Returns:
        The ``prioflow`` root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_resolve_level(level))

    has_stream = any(
        isinstance(handler, logging.StreamHandler) for handler in root.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the prioflow namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger", "configure_logging", "ROOT_LOGGER_NAME", "LOG_LEVEL_ENV_VAR"]
