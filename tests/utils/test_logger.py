# -*- coding: utf-8 -*-
"""
Tests for the logging setup.
"""

import logging

from utils import logger as logger_module
from utils.logger import LOGGER_NAME, get_logger, setup_logger


def test_setup_writes_to_given_file(tmp_path):
    log_path = tmp_path / "logs" / "test.log"

    root = setup_logger(log_path=log_path, console_level="warning")
    get_logger("tests.logger").debug("hello from the test")
    for handler in root.handlers:
        handler.flush()

    assert log_path.exists()
    assert "hello from the test" in log_path.read_text(encoding="utf-8")
    console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
    assert console[0].level == logging.WARNING


def test_setup_replaces_handlers(tmp_path):
    setup_logger(log_path=tmp_path / "a.log")
    root = setup_logger(log_path=tmp_path / "b.log")
    assert len(root.handlers) == 2


def test_child_loggers():
    child = get_logger("services.example")
    assert child.name == f"{LOGGER_NAME}.services.example"
    assert logger_module._logger is not None
