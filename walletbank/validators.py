"""Checks applied to wallet requests before they reach the database."""

from __future__ import annotations

from walletbank.consts import Operation
from walletbank.models import WalletCreateRequest


class ValidationError(ValueError):
    """A request failed validation."""


def validate_create(request: WalletCreateRequest) -> None:
    """Raise ValidationError unless the request names a wallet, an amount and an operation."""
    if request.id is None:
        raise ValidationError("Id not set")
    if request.amount is None or request.amount <= 0:
        raise ValidationError("Amount incorrect, amount need > 0")
    if request.operation not in (Operation.DEPOSIT.value, Operation.WITHDRAW.value):
        raise ValidationError("Operation incorrect, need Deposit or Withdraw")


def validate_get(wallet_id: str | None) -> None:
    """Raise ValidationError unless a wallet id is given."""
    if wallet_id is None:
        raise ValidationError("Id not set")