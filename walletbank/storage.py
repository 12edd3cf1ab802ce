"""Database access: connection, transactions, schema and balance updates."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from walletbank.consts import CONNECTION_STRING_VARIABLE, Operation
from walletbank.models import Base, Wallet


class StorageError(RuntimeError):
    """The database could not be reached or used."""


class BalanceError(StorageError):
    """A balance update was refused."""


def connection_string(environ: Mapping[str, str] | None = None) -> str:
    """Return the database connection string from the environment."""
    env = os.environ if environ is None else environ
    value = env.get(CONNECTION_STRING_VARIABLE, "")
    if not value:
        raise StorageError("connection string invalid")
    return value


def _normalise_url(url: str) -> str:
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def _make_engine(url: str) -> Engine:
    parsed = make_url(_normalise_url(url))
    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        return create_engine(
            parsed,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_engine(parsed)


class Database:
    """A database reachable through SQLAlchemy."""

    def __init__(self, url: str) -> None:
        if not url:
            raise StorageError("connection string invalid")
        self.engine = _make_engine(url)
        self._sessions = sessionmaker(bind=self.engine)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Database:
        """Connect using the connection string found in the environment."""
        return cls(connection_string(environ))

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session; commit on success, roll back if an exception escapes."""
        with self._sessions() as session:
            with session.begin():
                yield session


class Migrator:
    """Brings the database schema up to date."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def migrate(self) -> None:
        """Create the wallet table if it does not exist."""
        with self._database.engine.begin() as connection:
            Base.metadata.create_all(connection)


def balance_update(session: Session, wallet_id: str, amount: int, operation: str) -> None:
    """Deposit into or withdraw from a wallet, creating it on first deposit."""
    wallet = session.get(Wallet, wallet_id, with_for_update=True)
    if wallet is not None:
        if operation == Operation.DEPOSIT:
            wallet.balance += amount
        elif operation == Operation.WITHDRAW:
            if wallet.balance < amount:
                raise BalanceError("Insufficient funds for withdrawal")
            wallet.balance -= amount
        else:
            raise BalanceError(f"Unknown operation: {operation}")
    elif operation == Operation.DEPOSIT:
        session.add(Wallet(id=wallet_id, balance=amount))
    elif operation == Operation.WITHDRAW:
        raise BalanceError("Cannot withdraw from a non-existent wallet")
    else:
        raise BalanceError(f"Unknown operation: {operation}")
    session.flush()