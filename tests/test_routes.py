import pytest
from flask import Flask

from walletbank.routes import register_routes
from walletbank.storage import Database, Migrator


@pytest.fixture
def client():
    app = Flask("routes-test")
    database = Database("sqlite://")
    Migrator(database).migrate()
    register_routes(app, database)
    return app.test_client()


def _post(client, **body):
    return client.post("/api/v1/wallet", json=body)


def test_deposit_creates_wallet(client):
    response = _post(client, id="w1", operation="Deposit", amount=100)
    assert response.status_code == 201
    assert response.data == b"null"

    fetched = client.get("/api/v1/wallets/w1")
    assert fetched.status_code == 200
    assert fetched.get_json() == {"result": {"id": "w1", "ballance": 100}}


def test_withdraw_everything_leaves_zero(client):
    assert _post(client, id="w2", operation="Deposit", amount=40).status_code == 201
    assert _post(client, id="w2", operation="Withdraw", amount=40).status_code == 201
    assert client.get("/api/v1/wallets/w2").get_json()["result"]["ballance"] == 0


def test_insufficient_funds_is_rejected_and_balance_kept(client):
    _post(client, id="w3", operation="Deposit", amount=10)
    response = _post(client, id="w3", operation="Withdraw", amount=11)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Insufficient funds for withdrawal"}
    assert client.get("/api/v1/wallets/w3").get_json()["result"]["ballance"] == 10


def test_withdraw_from_missing_wallet(client):
    response = _post(client, id="nobody", operation="Withdraw", amount=5)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Cannot withdraw from a non-existent wallet"}


@pytest.mark.parametrize(
    "body, message",
    [
        ({"operation": "Deposit", "amount": 5}, "Id not set"),
        ({"id": "w4", "operation": "Deposit", "amount": 0}, "Amount incorrect, amount need > 0"),
        ({"id": "w4", "operation": "Deposit"}, "Amount incorrect, amount need > 0"),
        ({"id": "w4", "operation": "Transfer", "amount": 5}, "Operation incorrect, need Deposit or Withdraw"),
    ],
)
def test_invalid_requests(client, body, message):
    response = client.post("/api/v1/wallet", json=body)
    assert response.status_code == 400
    assert response.get_json() == {"error": message}


def test_malformed_body_is_bad_request(client):
    response = client.post("/api/v1/wallet", data="not json", content_type="application/json")
    assert response.status_code == 400
    assert set(response.get_json()) == {"error"}


def test_unknown_wallet_has_empty_fields(client):
    response = client.get("/api/v1/wallets/ghost")
    assert response.status_code == 200
    assert response.get_json() == {"result": {"id": None, "ballance": None}}