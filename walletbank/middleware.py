"""Request logging for the HTTP application."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any

from flask import Flask, Response, g, request

from walletbank.log import get_logger

_EXTENSION_KEY = "walletbank.logging"


def new_request_id() -> str:
    """Return a request id made of the current time in nanoseconds, in hex."""
    return f"{time.time_ns():x}"


def _request_fields() -> dict[str, Any]:
    url = request.full_path if request.query_string else request.path
    return {
        "method": request.method,
        "url": url,
        "user_agent": request.user_agent.string,
        "remote_ip": request.remote_addr,
        "request_size": request.content_length or 0,
        "headers": dict(request.headers),
    }


def _log(message: str, fields: dict[str, Any]) -> None:
    details = " ".join(f"{key}={value!r}" for key, value in fields.items())
    get_logger().debug("%s %s", message, details, extra=fields)


def _before_request() -> None:
    g.walletbank_started = time.perf_counter()
    g.walletbank_request_id = new_request_id()
    fields = {"request_id": g.walletbank_request_id, **_request_fields()}
    fields["time"] = datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")
    fields["response_size"] = 0
    _log("Request started", fields)


def _after_request(response: Response) -> Response:
    started = getattr(g, "walletbank_started", None)
    request_id = getattr(g, "walletbank_request_id", None) or new_request_id()
    latency = 0.0 if started is None else time.perf_counter() - started
    fields = {"request_id": request_id, **_request_fields()}
    fields["status_code"] = response.status_code
    fields["latency"] = f"{latency:.6f}s"
    fields["response_size"] = response.calculate_content_length() or 0
    _log("Request completed", fields)
    return response


def install_logging_middleware(app: Flask) -> None:
    """Log the start and the completion of every request at debug level."""
    if app.extensions.get(_EXTENSION_KEY):
        return
    app.before_request(_before_request)
    app.after_request(_after_request)
    app.extensions[_EXTENSION_KEY] = True