"""Service-wide logger whose level follows the configured environment."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from walletbank.consts import ENVIRONMENT_VARIABLE, Environment, current_environment

LOGGER_NAME = "walletbank"
_HANDLER_NAME = "walletbank-stdout"
_FORMAT = 'time="%(asctime)s" level=%(levelname)s msg="%(message)s"'

_configured = False


def _attach_stdout_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME and isinstance(handler, logging.StreamHandler):
            handler.setStream(sys.stdout)
            return
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)


def configure_logger(environ: Mapping[str, str] | None = None) -> logging.Logger:
    """Set up the service logger on stdout with a level chosen by environment."""
    global _configured
    env = os.environ if environ is None else environ
    logger = logging.getLogger(LOGGER_NAME)
    _attach_stdout_handler(logger)

    raw = env.get(ENVIRONMENT_VARIABLE, "")
    environment = current_environment(env)
    if not raw or environment in (Environment.LOCAL, Environment.DEBUG):
        logger.setLevel(logging.DEBUG)
        logger.info("log level = debug")
    elif environment in (Environment.TEST, Environment.PRODUCTION):
        logger.setLevel(logging.INFO)
        logger.info("log level = info")
    else:
        logger.setLevel(logging.INFO)
        logger.info("log level = default")

    _configured = True
    return logger


def get_logger() -> logging.Logger:
    """Return the service logger, configuring it from the environment on first use."""
    if not _configured:
        return configure_logger()
    return logging.getLogger(LOGGER_NAME)