"""File-backed list of pizzas and the business rules on them."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from cursoapps.pizzaria.models import Pizza, Review

DEFAULT_DATA_PATH = Path("dados/pizzas.json")


class ValidationError(ValueError):
    """Raised when a pizza or review breaks a business rule."""


def validate_pizza_price(pizza: Pizza) -> None:
    """Reject a pizza with a negative price."""
    if pizza.preco < 0:
        raise ValidationError("o preço da pizza não pode ser negativo")


def validate_review_rating(review: Review) -> None:
    """Reject a review whose rating is outside 0 to 5."""
    if review.rating < 0 or review.rating > 5:
        raise ValidationError("rating must be between 1 and 5")


@dataclass
class PizzaStore:
    """The pizzas kept in memory and persisted to a JSON file."""

    path: Path = DEFAULT_DATA_PATH
    pizzas: list[Pizza] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> None:
        """Replace the pizzas with the content of the file.

        Raises OSError if the file cannot be read and ValueError if it does
        not hold a JSON list of pizzas; the pizzas are left unchanged then.
        """
        with self.path.open(encoding="utf-8") as handle:
            raw = json.load(handle)
        if raw is None:
            self.pizzas = []
            return
        if not isinstance(raw, list):
            raise ValueError(f"json: cannot unmarshal {type(raw).__name__} into list of pizzas")
        self.pizzas = [Pizza.from_dict(item) for item in raw]

    def save(self) -> None:
        """Write all pizzas to the file, replacing it."""
        text = json.dumps([pizza.to_dict() for pizza in self.pizzas], ensure_ascii=False)
        self.path.write_text(text + "\n", encoding="utf-8")