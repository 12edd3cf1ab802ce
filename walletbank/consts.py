"""Names shared across the service: environment settings and wallet operations."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum

CONNECTION_STRING_VARIABLE = "POSTGRE_CONNECTION_STRING"
ENVIRONMENT_VARIABLE = "Environment"


class Operation(str, Enum):
    """Operations that change a wallet's balance."""

    DEPOSIT = "Deposit"
    WITHDRAW = "Withdraw"


class Environment(str, Enum):
    """Environments the service knows how to run in."""

    LOCAL = "Local"
    DEBUG = "Debug"
    TEST = "Test"
    PRODUCTION = "Production"


def current_environment(environ: Mapping[str, str] | None = None) -> Environment | None:
    """Return the configured environment, or None when it is unset or unknown."""
    env = os.environ if environ is None else environ
    value = env.get(ENVIRONMENT_VARIABLE, "")
    try:
        return Environment(value)
    except ValueError:
        return None