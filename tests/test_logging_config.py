"""
Tests for the logging setup.
"""

import logging

import pytest

from KitchenOPS.logging_config import get_logger, setup_logging


@pytest.fixture
def app_logger():
    yield "kitchen_ops_test"
    logger = logging.getLogger("kitchen_ops_test")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_get_logger_namespace():
    assert get_logger("KitchenOPS.core.manager").name == "kitchen_ops.KitchenOPS.core.manager"
    assert get_logger("kitchen_ops.custom").name == "kitchen_ops.custom"


def test_console_only(app_logger):
    logger = setup_logging(app_name=app_logger, log_level=logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert not logger.propagate
    assert len(logger.handlers) == 1


def test_file_logging(app_logger, tmp_path):
    logger = setup_logging(app_name=app_logger, log_dir=tmp_path, enable_file_logging=True)
    logger.info("hello kitchen")
    for handler in logger.handlers:
        handler.flush()
    assert "hello kitchen" in (tmp_path / f"{app_logger}.log").read_text(encoding="utf-8")


def test_reconfiguration_replaces_handlers(app_logger):
    setup_logging(app_name=app_logger)
    logger = setup_logging(app_name=app_logger)
    assert len(logger.handlers) == 1
