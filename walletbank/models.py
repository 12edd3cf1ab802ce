"""Database model and the request and response shapes of the wallet API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Base(DeclarativeBase):
    """Declarative base for the service's tables."""


class Wallet(Base):
    """A stored wallet and its balance."""

    __tablename__ = "wallets"

    id: Mapped[str] = mapped_column("id", Text, primary_key=True)
    balance: Mapped[int] = mapped_column("ballance", BigInteger, nullable=False)


def _text_field(data: Mapping[str, Any], name: str) -> str | None:
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string")
    return value


def _int_field(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {name!r} must be an integer")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"field {name!r} is out of range")
    return value


@dataclass(frozen=True)
class WalletCreateRequest:
    """Body of a request that deposits into or withdraws from a wallet."""

    id: str | None = None
    operation: str | None = None
    amount: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> WalletCreateRequest:
        """Build a request from JSON text or an already decoded JSON value."""
        if isinstance(data, (str, bytes, bytearray)):
            if not data.strip():
                raise ValueError("request body is empty")
            data = json.loads(data)
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("request body must be a JSON object")
        return cls(
            id=_text_field(data, "id"),
            operation=_text_field(data, "operation"),
            amount=_int_field(data, "amount"),
        )


@dataclass(frozen=True)
class WalletItem:
    """A wallet as returned to clients."""

    id: str | None
    balance: int | None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "ballance": self.balance}


@dataclass(frozen=True)
class WalletResponse:
    """Response carrying a single wallet."""

    result: WalletItem

    def to_dict(self) -> dict[str, Any]:
        return {"result": self.result.to_dict()}


@dataclass(frozen=True)
class ErrorResponse:
    """Response carrying an error message."""

    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}