"""Application factory and command-line entry point of the wallet service."""

from __future__ import annotations

import argparse
import os
import signal
import sys
import threading
from collections.abc import Mapping, Sequence

from flask import Flask, Response, abort

from walletbank.consts import Environment, current_environment
from walletbank.docs import SwaggerInfo
from walletbank.log import configure_logger, get_logger
from walletbank.routes import API_PREFIX, register_routes
from walletbank.storage import Database, Migrator

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _add_swagger_route(app: Flask, info: SwaggerInfo) -> None:
    def swagger(resource: str) -> Response:
        if resource != "doc.json":
            abort(404)
        return Response(info.render(), mimetype="application/json")

    app.add_url_rule("/swagger/<path:resource>", "swagger", swagger, methods=["GET"])


def create_app(environ: Mapping[str, str] | None = None) -> Flask:
    """Migrate the database and build the application for the given environment."""
    env = os.environ if environ is None else environ
    configure_logger(env)
    database = Database.from_env(env)
    Migrator(database).migrate()

    app = Flask(__name__)
    environment = current_environment(env)
    if environment is Environment.PRODUCTION:
        app.debug = False
    elif environment is Environment.TEST:
        app.testing = True
    elif environment is Environment.DEBUG:
        app.debug = True

    register_routes(app, database)
    _add_swagger_route(app, SwaggerInfo(base_path=API_PREFIX))
    app.extensions["walletbank.database"] = database
    return app


def _interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def main(argv: Sequence[str] | None = None) -> int:
    """Run the wallet service until interrupted."""
    parser = argparse.ArgumentParser(prog="walletbank", description="Wallet REST service.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logger = get_logger()
    logger.info("Start application")
    app = create_app()

    in_main_thread = threading.current_thread() is threading.main_thread()
    previous = signal.signal(signal.SIGTERM, _interrupt) if in_main_thread else None
    try:
        app.run(host=args.host, port=args.port, use_reloader=False)
    except KeyboardInterrupt:
        pass
    finally:
        if in_main_thread:
            signal.signal(signal.SIGTERM, previous)

    logger.info("End application")
    return 0


if __name__ == "__main__":
    sys.exit(main())