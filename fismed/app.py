"""The HTTP application: CORS handling, routes and the server entry point."""

from __future__ import annotations

import argparse
import logging
import sqlite3

from flask import Flask, Response, request

from .database import Database
from .routes import register_routes

log = logging.getLogger(__name__)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Methods": "POST, GET",
    "Access-Control-Allow-Headers": (
        "Origin, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, "
        "Authorization, x-requested-with"
    ),
}


def create_app(db: Database) -> Flask:
    """Build the application with CORS headers on every response and all routes."""
    app = Flask("fismed")

    @app.before_request
    def _preflight():
        if request.method == "OPTIONS":
            log.info("CORS preflight request")
            return Response(status=204)
        return None

    @app.after_request
    def _cors(response: Response) -> Response:
        response.headers.update(_CORS_HEADERS)
        return response

    register_routes(app, db)
    return app


def main(argv=None) -> int:
    """Serve the API until interrupted."""
    parser = argparse.ArgumentParser(prog="fismed", description="Serve the fismed API.")
    parser.add_argument("--database", default="fismed.db", help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    db = Database(lambda: sqlite3.connect(args.database))
    app = create_app(db)
    log.info("[--->] Running On Port :%d", args.port)
    try:
        app.run(host=args.host, port=args.port)
    except KeyboardInterrupt:
        log.info("Shutting down server...")
    log.info("Server exiting")
    return 0