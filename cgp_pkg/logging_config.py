"""Logging helpers for the CGP expression package.

All loggers live under the ``cgp_pkg`` namespace. The package only installs a
``NullHandler``; applications call :func:`setup_logging` (or configure the
``logging`` module themselves) to see output.
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

ROOT_LOGGER_NAME = "cgp_pkg"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``cgp_pkg``.

    Args:
        name: Dotted sub-name, e.g. "cartesian.expression"

    Returns:
        The configured logger
    """
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        level: Log level name or number (default: CGP_LOG_LEVEL)

    Returns:
        The package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger
