"""Tests for resloader.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from resloader.config import LoggingConfig
from resloader.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "resloader"
    assert get_logger("loader").name == "resloader.loader"


def test_configure_logging_uses_config_section(tmp_path: Path) -> None:
    log_file = tmp_path / "loader.log"

    logger = configure_logging(LoggingConfig(verbose=True, log_file=log_file))
    get_logger("loader").debug("scanning native search paths")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "scanning native search paths" in log_file.read_text(encoding="utf-8")


def test_configure_logging_keyword_overrides_config(tmp_path: Path) -> None:
    configured = tmp_path / "configured.log"
    override = tmp_path / "override.log"

    logger = configure_logging(LoggingConfig(log_file=configured), log_file=override)

    assert logger.level == logging.INFO
    assert override.exists()
    assert not configured.exists()


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
