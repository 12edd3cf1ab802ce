import pytest

from walletbank.models import WalletCreateRequest
from walletbank.service import WalletService
from walletbank.storage import BalanceError, Database, Migrator
from walletbank.validators import ValidationError


@pytest.fixture
def service():
    db = Database("sqlite://")
    Migrator(db).migrate()
    return WalletService(db)


def test_deposit_then_get(service):
    amount = 250
    service.create(WalletCreateRequest(id="w1", operation="Deposit", amount=amount))
    response = service.get("w1")
    assert response.result.id == "w1"
    assert response.result.balance == amount


def test_deposit_and_withdraw(service):
    deposit, withdrawal = 90, 35
    service.create(WalletCreateRequest(id="w1", operation="Deposit", amount=deposit))
    service.create(WalletCreateRequest(id="w1", operation="Withdraw", amount=withdrawal))
    assert service.get("w1").result.balance == deposit - withdrawal


def test_get_unknown_wallet_has_empty_fields(service):
    response = service.get("missing")
    assert response.to_dict() == {"result": {"id": None, "ballance": None}}


def test_get_requires_id(service):
    with pytest.raises(ValidationError, match="Id not set"):
        service.get(None)


def test_create_validates_request(service):
    with pytest.raises(ValidationError, match="Amount incorrect, amount need > 0"):
        service.create(WalletCreateRequest(id="w1", operation="Deposit", amount=0))
    assert service.get("w1").result.id is None


def test_failed_withdraw_keeps_balance(service):
    amount = 20
    service.create(WalletCreateRequest(id="w1", operation="Deposit", amount=amount))
    with pytest.raises(BalanceError, match="Insufficient funds for withdrawal"):
        service.create(WalletCreateRequest(id="w1", operation="Withdraw", amount=amount + 1))
    assert service.get("w1").result.balance == amount


def test_withdraw_from_unknown_wallet(service):
    with pytest.raises(BalanceError, match="Cannot withdraw from a non-existent wallet"):
        service.create(WalletCreateRequest(id="w9", operation="Withdraw", amount=1))
    assert service.get("w9").result.balance is None