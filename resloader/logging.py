"""Logging utilities for resloader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .config import LoggingConfig

_LOGGER_NAME = "resloader"
_CONSOLE_FORMAT = "[resloader] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the resloader hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    config: "LoggingConfig | None" = None,
    *,
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Install console and file handlers on the resloader logger.

    Settings from ``config`` (the ``logging`` section of .resloader.yml) are
    merged with the keyword overrides; ``verbose`` wins when either asks for it
    and an explicit ``log_file`` replaces the configured one.
    """
    if config is not None:
        verbose = verbose or config.verbose
        log_file = log_file if log_file is not None else config.log_file

    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
