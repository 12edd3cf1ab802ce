import logging

import pytest

from walletbank.log import configure_logger, get_logger


@pytest.mark.parametrize(
    "environ",
    [{}, {"Environment": ""}, {"Environment": "Local"}, {"Environment": "Debug"}],
)
def test_debug_level_for_local_environments(environ):
    assert configure_logger(environ).level == logging.DEBUG


@pytest.mark.parametrize("environ", [{"Environment": "Test"}, {"Environment": "Production"}])
def test_info_level_for_test_and_production(environ, caplog):
    logger = configure_logger(environ)
    assert logger.level == logging.INFO
    assert "log level = info" in caplog.messages


def test_unknown_environment_uses_default(caplog):
    logger = configure_logger({"Environment": "Staging"})
    assert logger.level == logging.INFO
    assert "log level = default" in caplog.messages


def test_handler_added_once():
    first = configure_logger({})
    count = len(first.handlers)
    second = configure_logger({"Environment": "Production"})
    assert second is first
    assert len(second.handlers) == count


def test_get_logger_returns_configured_logger():
    logger = configure_logger({"Environment": "Test"})
    assert get_logger() is logger
    assert get_logger().level == logging.INFO