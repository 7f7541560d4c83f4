"""HTTP API for managing pizzas and their reviews."""

from __future__ import annotations

import argparse
import json
import os
import re
from dataclasses import replace
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, request

from cursoapps.pizzaria.models import Pizza, Review
from cursoapps.pizzaria.store import (
    DEFAULT_DATA_PATH,
    PizzaStore,
    ValidationError,
    validate_pizza_price,
    validate_review_rating,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class _BadRequest(Exception):
    pass


def _parse_id(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise _BadRequest(f'strconv.Atoi: parsing "{text}": invalid syntax')
    return int(text)


def _body() -> Any:
    try:
        return json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as err:
        raise _BadRequest(str(err)) from err


def _bind_pizza() -> Pizza:
    try:
        return Pizza.from_dict(_body())
    except ValueError as err:
        if isinstance(err, _BadRequest):
            raise
        raise _BadRequest(str(err)) from err


def _bind_review() -> Review:
    try:
        return Review.from_dict(_body())
    except ValueError as err:
        raise _BadRequest(str(err)) from err


def _not_found():
    return jsonify({"message": "pizza not found"}), 404


def create_app(store: PizzaStore) -> Flask:
    """Build the Flask application serving ``store``."""
    app = Flask(__name__)

    def persist() -> None:
        try:
            store.save()
        except OSError as err:
            app.logger.error("error file: %s", err)

    @app.errorhandler(_BadRequest)
    def bad_request(err: _BadRequest):
        return jsonify({"erro": str(err)}), 400

    @app.errorhandler(ValidationError)
    def invalid(err: ValidationError):
        return jsonify({"erro": str(err)}), 401

    @app.get("/pizzas")
    def get_pizzas():
        return jsonify({"pizzas": [pizza.to_dict() for pizza in store.pizzas]}), 200

    @app.post("/pizzas")
    def post_pizzas():
        pizza = _bind_pizza()
        validate_pizza_price(pizza)
        pizza.id = len(store.pizzas) + 1
        store.pizzas.append(pizza)
        persist()
        return jsonify(pizza.to_dict()), 201

    @app.get("/pizzas/<id_param>")
    def get_pizza_by_id(id_param: str):
        pizza_id = _parse_id(id_param)
        for pizza in store.pizzas:
            if pizza.id == pizza_id:
                return jsonify(pizza.to_dict()), 200
        return _not_found()

    @app.delete("/pizzas/<id_param>")
    def delete_pizza_by_id(id_param: str):
        pizza_id = _parse_id(id_param)
        for index, pizza in enumerate(store.pizzas):
            if pizza.id == pizza_id:
                del store.pizzas[index]
                persist()
                return jsonify({"message": "pizza deletada"}), 200
        return _not_found()

    @app.put("/pizzas/<id_param>")
    def update_pizza_by_id(id_param: str):
        pizza_id = _parse_id(id_param)
        updated = _bind_pizza()
        validate_pizza_price(updated)
        for index, pizza in enumerate(store.pizzas):
            if pizza.id == pizza_id:
                store.pizzas[index] = replace(updated, id=pizza_id)
                persist()
                return jsonify(store.pizzas[index].to_dict()), 200
        return _not_found()

    @app.post("/pizzas/<id_param>/reviews")
    def post_review(id_param: str):
        pizza_id = _parse_id(id_param)
        review = _bind_review()
        validate_review_rating(review)
        for pizza in store.pizzas:
            if pizza.id == pizza_id:
                pizza.reviews.append(review)
                persist()
                return jsonify(pizza.to_dict()), 201
        return _not_found()

    return app


def main(argv: list[str] | None = None) -> int:
    """Load the pizzas and serve the API."""
    parser = argparse.ArgumentParser(description="API da pizzaria")
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA_PATH, help="JSON file holding the pizzas")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8080")))
    args = parser.parse_args(argv)

    store = PizzaStore(args.data)
    try:
        store.load()
    except OSError as err:
        print("error file:", err)
    except ValueError as err:
        print("error decoding JSON:", err)

    create_app(store).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())