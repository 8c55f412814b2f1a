# This file is part of ubuntunet. See LICENSE file for license information.

import logging

import pytest


@pytest.fixture
def root(tmp_path):
    """Root directory all generated configuration is written below."""
    return str(tmp_path / "root")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any handler changes tests make to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
