"""aocgrid.logging_utils
=========================

Small logging helpers. The library itself only attaches a ``NullHandler``;
applications decide where records go by calling :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .constants import LOG_FORMAT, LOGGER_NAME

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``."""

    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int = logging.INFO, fmt: str = LOG_FORMAT) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Calling this more than once replaces the previously installed stream
    handler instead of stacking duplicates.
    """

    logger = get_logger()
    for handler in list(logger.handlers):
        if getattr(handler, "_aocgrid_stream", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._aocgrid_stream = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def log_map(logger: logging.Logger, label: str, grid: Any, level: int = logging.DEBUG) -> None:
    """Log the rendered form of ``grid`` under ``label``.

    Rendering is skipped entirely when ``level`` is disabled, since large maps
    are expensive to stringify.
    """

    if not logger.isEnabledFor(level):
        return
    logger.log(level, "%s (%dx%d):\n%s", label, grid.width, grid.height, str(grid).rstrip("\n"))


__all__ = ["get_logger", "configure_logging", "log_map"]
