from __future__ import annotations

import logging
from pathlib import Path

import pytest

from resloader import privileged
from tests._fixtures.tree_builder import TreeBuilder


@pytest.fixture
def tree_builder(tmp_path: Path) -> TreeBuilder:
    """Provide a reusable root builder under the pytest tmp_path."""
    return TreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _isolate_process_state():
    """Keep the access policy and CLI logging setup from leaking between tests."""
    privileged.uninstall_policy()
    yield
    privileged.uninstall_policy()
    logger = logging.getLogger("resloader")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
