import json

import pytest

from cursoapps.pizzaria.models import Pizza, Review
from cursoapps.pizzaria.store import (
    PizzaStore,
    ValidationError,
    validate_pizza_price,
    validate_review_rating,
)


def test_negative_price_rejected():
    with pytest.raises(ValidationError, match="o preço da pizza não pode ser negativo"):
        validate_pizza_price(Pizza(preco=-0.01))


@pytest.mark.parametrize("preco", [0.0, 35.9])
def test_non_negative_price_accepted(preco):
    pizza = Pizza(preco=preco)
    validate_pizza_price(pizza)
    assert pizza.preco == preco


@pytest.mark.parametrize("rating", [-1, 6])
def test_rating_out_of_range_rejected(rating):
    with pytest.raises(ValidationError, match="rating must be between 1 and 5"):
        validate_review_rating(Review(rating=rating))


@pytest.mark.parametrize("rating", [0, 1, 5])
def test_rating_in_range_accepted(rating):
    review = Review(rating=rating)
    validate_review_rating(review)
    assert review.rating == rating


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_review_rating(Review(rating=10))


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "pizzas.json"
    pizzas = [Pizza(1, "Calabresa", 40.0, [Review(5, "ótima")]), Pizza(2, "Atum", 45.5)]
    PizzaStore(path, list(pizzas)).save()
    loaded = PizzaStore(path)
    loaded.load()
    assert loaded.pizzas == pizzas


def test_save_writes_json_list_with_trailing_newline(tmp_path):
    path = tmp_path / "pizzas.json"
    PizzaStore(path, [Pizza(1, "Mussarela", 30.0)]).save()
    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == [{"id": 1, "nome": "Mussarela", "preco": 30.0, "reviews": []}]


def test_load_missing_file_raises(tmp_path):
    store = PizzaStore(tmp_path / "missing.json", [Pizza(1)])
    with pytest.raises(FileNotFoundError):
        store.load()
    assert store.pizzas == [Pizza(1)]


def test_load_invalid_content_raises(tmp_path):
    path = tmp_path / "pizzas.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        PizzaStore(path).load()


def test_load_null_gives_empty_list(tmp_path):
    path = tmp_path / "pizzas.json"
    path.write_text("null", encoding="utf-8")
    store = PizzaStore(path, [Pizza(1)])
    store.load()
    assert store.pizzas == []