"""REST API over the personalities database."""

from __future__ import annotations

import argparse
import json
import os
import sqlite3
from dataclasses import replace
from pathlib import Path

from flask import Flask, Response, jsonify, request

from cursoapps.personalidades.store import (
    DEFAULT_DATABASE,
    Personalidade,
    PersonalidadeRepository,
)

_SIMPLE_METHODS = {"GET", "HEAD", "POST"}
_DEFAULT_CORS_HEADERS = {"Accept", "Accept-Language", "Content-Language", "Origin"}


def _to_id(text: str) -> int | None:
    return int(text) if text.isascii() and text.isdigit() else None


def _decode(base: Personalidade) -> Personalidade:
    """Apply the JSON body's fields of the right type onto ``base``."""
    try:
        raw = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError:
        return base
    if not isinstance(raw, dict):
        return base
    changes = {}
    for key, value in raw.items():
        name = key.lower()
        if name == "id" and isinstance(value, int) and not isinstance(value, bool):
            changes["id"] = value
        elif name in ("nome", "historia") and isinstance(value, str):
            changes[name] = value
    return replace(base, **changes)


def create_app(repository: PersonalidadeRepository) -> Flask:
    """Build the Flask application serving ``repository``."""
    app = Flask(__name__)

    @app.before_request
    def cors_preflight():
        if request.method != "OPTIONS" or "Origin" not in request.headers:
            return None
        method = request.headers.get("Access-Control-Request-Method")
        if method is None:
            return Response(status=400)
        if method.upper() not in _SIMPLE_METHODS:
            return Response(status=405)
        wanted = [
            "-".join(part.capitalize() for part in name.strip().split("-"))
            for name in request.headers.get("Access-Control-Request-Headers", "").split(",")
            if name.strip()
        ]
        if not set(wanted) <= _DEFAULT_CORS_HEADERS:
            return Response(status=403)
        response = Response(status=200)
        if wanted:
            response.headers["Access-Control-Allow-Headers"] = ",".join(wanted)
        return response

    @app.after_request
    def headers(response: Response) -> Response:
        if request.url_rule is not None and request.method != "OPTIONS":
            response.headers["Content-Type"] = "application/json"
        if "Origin" in request.headers:
            response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.route("/", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
    def home():
        return Response("Home Page")

    @app.get("/api/personalidades")
    def todas_personalidades():
        return jsonify([p.to_dict() for p in repository.find_all()])

    @app.get("/api/personalidades/<id_param>")
    def retorna_uma_personalidade(id_param: str):
        pessoa_id = _to_id(id_param)
        found = repository.first(pessoa_id) if pessoa_id is not None else None
        return jsonify((found or Personalidade()).to_dict())

    @app.post("/api/personalidades")
    def cria_uma_nova_personalidade():
        nova = _decode(Personalidade())
        try:
            nova = repository.create(nova)
        except sqlite3.Error as err:
            app.logger.error("%s", err)
        return jsonify(nova.to_dict())

    # PUT is routed to deletion as well, as the service has always done.
    @app.route("/api/personalidades/<id_param>", methods=["DELETE", "PUT"])
    def deleta_uma_personalidade(id_param: str):
        pessoa_id = _to_id(id_param)
        if pessoa_id is not None:
            repository.delete(pessoa_id)
        return Response("")

    return app


def main(argv: list[str] | None = None) -> int:
    """Open the database and serve the REST API."""
    parser = argparse.ArgumentParser(description="API REST de personalidades")
    parser.add_argument("--database", type=Path, default=DEFAULT_DATABASE)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8080")))
    args = parser.parse_args(argv)

    try:
        repository = PersonalidadeRepository(args.database)
    except sqlite3.Error as err:
        print("Erro ao conectar com o banco de dados:", err)
        return 1

    print("Iniciando o servidor REST")
    with repository:
        create_app(repository).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())