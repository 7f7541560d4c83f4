"""REST API over the stock items."""

from __future__ import annotations

import argparse
import logging
import os
import re
import sqlite3

from flask import Flask, Response, jsonify, request

from cursoapps.itens.models import ItemError, decode_and_validate_item
from cursoapps.itens.repository import ItemNotFound, ItemRepository, connect_database

_log = logging.getLogger(__name__)
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def respond_with_error(message: str, status_code: int) -> Response:
    """Build a plain-text error response and log it."""
    response = Response(message + "\n", status=status_code, content_type="text/plain; charset=utf-8")
    response.headers["X-Content-Type-Options"] = "nosniff"
    _log.info("HTTP: %d: %s", status_code, message)
    return response


def _parse_id(text: str) -> int | Response:
    if not text:
        return respond_with_error("ID não fornecido", 400)
    if not _INT_PATTERN.fullmatch(text):
        return respond_with_error("ID inválido", 400)
    return int(text)


def create_app(repository: ItemRepository) -> Flask:
    """Build the Flask application serving ``repository``."""
    app = Flask(__name__)

    @app.after_request
    def json_content_type(response: Response) -> Response:
        if request.url_rule is not None and response.status_code < 400:
            response.headers["Content-Type"] = "application/json"
        return response

    @app.get("/api/itens")
    def list_items():
        try:
            items = repository.list_all()
        except sqlite3.Error:
            return respond_with_error("Erro ao listar os itens", 404)
        return jsonify([item.to_dict() for item in items])

    @app.get("/api/itens/<id_param>")
    def get_item(id_param: str):
        item_id = _parse_id(id_param)
        if isinstance(item_id, Response):
            return item_id
        try:
            item = repository.get_by_id(item_id)
        except ItemNotFound:
            return respond_with_error("Item não encontrado", 404)
        return jsonify(item.to_dict())

    @app.get("/api/itens/codigo/<code>")
    def get_item_by_code(code: str):
        if not code:
            return respond_with_error("Código não fornecido", 400)
        try:
            item = repository.get_by_code(code)
        except ItemNotFound:
            return respond_with_error("Item não encontrado", 404)
        return jsonify(item.to_dict())

    @app.post("/api/itens")
    def create_item():
        try:
            item = decode_and_validate_item(request.get_data())
        except ItemError as err:
            return respond_with_error(str(err), 400)
        try:
            created = repository.create(item)
        except sqlite3.Error:
            return respond_with_error("Erro ao criar o item", 500)
        return jsonify(created.to_dict())

    @app.put("/api/itens")
    def update_item():
        try:
            item = decode_and_validate_item(request.get_data())
        except ItemError as err:
            return respond_with_error(str(err), 400)
        try:
            item = repository.update(item)
        except sqlite3.Error:
            return respond_with_error("Erro ao atualizar o item", 500)
        return jsonify(item.to_dict())

    @app.delete("/api/itens/<id_param>")
    def delete_item(id_param: str):
        item_id = _parse_id(id_param)
        if isinstance(item_id, Response):
            return item_id
        try:
            repository.delete(item_id)
        except sqlite3.Error:
            return respond_with_error("Erro ao deletar o item", 500)
        return Response("Item deletado com sucesso")

    return app


def main(argv: list[str] | None = None) -> int:
    """Connect to the database named by DB_DSN and serve the API."""
    parser = argparse.ArgumentParser(description="API de itens")
    parser.add_argument("--dsn", default=None, help="database file (default: $DB_DSN)")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    try:
        repository = connect_database(args.dsn)
    except (ValueError, sqlite3.Error) as err:
        print(f"Erro ao conectar com o BD: {err}")
        return 1
    print("Servidor rodando na porta", args.port)
    with repository:
        create_app(repository).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())