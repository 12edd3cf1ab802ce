"""OpenAPI (Swagger 2.0) description of the wallet API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_MEDIA_TYPE = "application/json"
_TAG = "Wallet"


def _ref(definition: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{definition}"}


def _scalar_object(**property_types: str) -> dict[str, Any]:
    """An object schema whose properties are all plain scalar types."""
    return {
        "type": "object",
        "properties": {name: {"type": kind} for name, kind in property_types.items()},
    }


def _response(description: str, definition: str | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {"description": description}
    if definition is not None:
        response["schema"] = _ref(definition)
    return response


def _operation(
    summary: str,
    parameters: list[dict[str, Any]],
    responses: dict[str, dict[str, Any]],
) -> dict[str, Any]:
    return {
        "consumes": [_MEDIA_TYPE],
        "produces": [_MEDIA_TYPE],
        "tags": [_TAG],
        "summary": summary,
        "parameters": parameters,
        "responses": {
            **responses,
            "400": _response("Bad Request", "ErrorResponse"),
        },
    }


def _paths() -> dict[str, Any]:
    create_body = {
        "description": "WalletCreateRequest",
        "name": "WalletCreateRequest",
        "in": "body",
        "schema": _ref("WalletCreateRequest"),
    }
    id_param = {
        "type": "string",
        "description": "Id",
        "name": "id",
        "in": "path",
        "required": True,
    }
    return {
        "/wallet": {
            "post": _operation("create", [create_body], {"201": _response("Created")}),
        },
        "/wallets/{id}": {
            "get": _operation(
                "get", [id_param], {"200": _response("OK", "WalletResponse")}
            ),
        },
    }


def _definitions() -> dict[str, Any]:
    return {
        "WalletCreateRequest": _scalar_object(
            amount="integer", id="string", operation="string"
        ),
        "ErrorResponse": _scalar_object(error="string"),
        "WalletResponse": {
            "type": "object",
            "properties": {"result": {"type": "array", "items": _ref("Wallet")}},
        },
        "Wallet": _scalar_object(ballance="integer", id="string"),
    }


@dataclass
class SwaggerInfo:
    """Settings that are filled into the API description."""

    version: str = "1.0"
    host: str = "localhost:8080"
    base_path: str = "/api/v1"
    schemes: list[str] = field(default_factory=list)
    title: str = "Api Bank Service"
    description: str = "bank rest application"
    instance_name: str = "swagger"

    def render(self) -> str:
        """Return the API description as JSON text."""
        return json.dumps(swagger_spec(self), indent=4)


def swagger_spec(info: SwaggerInfo) -> dict[str, Any]:
    """Return the API description as a JSON-ready dictionary."""
    return {
        "schemes": list(info.schemes),
        "swagger": "2.0",
        "info": {
            "description": info.description,
            "title": info.title,
            "contact": {},
            "version": info.version,
        },
        "host": info.host,
        "basePath": info.base_path,
        "paths": _paths(),
        "definitions": _definitions(),
    }