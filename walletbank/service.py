"""Wallet operations: validation followed by a transactional database update."""

from __future__ import annotations

import threading

from walletbank.models import Wallet, WalletCreateRequest, WalletItem, WalletResponse
from walletbank.storage import Database, balance_update
from walletbank.validators import validate_create, validate_get

_balance_lock = threading.Lock()


class WalletService:
    """Creates, tops up, withdraws from and reads wallets."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def create(self, request: WalletCreateRequest) -> None:
        """Apply a deposit or withdrawal; raises on invalid requests or refused updates."""
        validate_create(request)
        with _balance_lock, self._database.transaction() as session:
            balance_update(session, request.id, request.amount, request.operation)

    def get(self, wallet_id: str | None) -> WalletResponse:
        """Return the wallet; an unknown id yields an item with empty fields."""
        validate_get(wallet_id)
        with self._database.transaction() as session:
            wallet = session.get(Wallet, wallet_id)
            if wallet is None:
                return WalletResponse(WalletItem(id=None, balance=None))
            return WalletResponse(WalletItem(id=wallet.id, balance=wallet.balance))