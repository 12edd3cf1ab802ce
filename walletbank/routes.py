"""HTTP handlers for the wallet API and their routes."""

from __future__ import annotations

from flask import Flask, Response, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from walletbank.middleware import install_logging_middleware
from walletbank.models import ErrorResponse, WalletCreateRequest
from walletbank.service import WalletService
from walletbank.storage import Database, StorageError
from walletbank.validators import ValidationError

API_PREFIX = "/api/v1"

_REQUEST_ERRORS = (ValidationError, StorageError, SQLAlchemyError)


def _bad_request(error: Exception) -> tuple[Response, int]:
    return jsonify(ErrorResponse(str(error)).to_dict()), 400


class WalletHandler:
    """Flask views for creating and reading wallets."""

    def __init__(self, database: Database) -> None:
        self._service = WalletService(database)

    def create(self) -> Response | tuple[Response, int]:
        """Apply the deposit or withdrawal described by the JSON body."""
        try:
            wallet_request = WalletCreateRequest.from_json(request.get_data())
        except ValueError as exc:
            return _bad_request(exc)
        try:
            self._service.create(wallet_request)
        except _REQUEST_ERRORS as exc:
            return _bad_request(exc)
        return Response("null", status=201, mimetype="application/json")

    def get(self, wallet_id: str) -> tuple[Response, int]:
        """Return the wallet with the given id."""
        try:
            result = self._service.get(wallet_id)
        except _REQUEST_ERRORS as exc:
            return _bad_request(exc)
        return jsonify(result.to_dict()), 200


def register_routes(app: Flask, database: Database) -> WalletHandler:
    """Install request logging and the wallet routes on the application."""
    install_logging_middleware(app)
    handler = WalletHandler(database)
    app.add_url_rule(
        f"{API_PREFIX}/wallet", "wallet_create", handler.create, methods=["POST"]
    )
    app.add_url_rule(
        f"{API_PREFIX}/wallets/<wallet_id>", "wallet_get", handler.get, methods=["GET"]
    )
    return handler