"""Pizza and review records with their JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _get(data: Any, key: str, kind: type | tuple, default: Any) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"json: cannot unmarshal {type(data).__name__} into object")
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"json: cannot unmarshal {type(value).__name__} into field {key}")
    return value


@dataclass
class Review:
    """A customer's rating (1 to 5) and comment on a pizza."""

    rating: int = 0
    comment: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form."""
        return {"rating": self.rating, "comment": self.comment}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Review:
        """Build a review from decoded JSON; raise ValueError on wrong types."""
        return cls(_get(data, "rating", int, 0), _get(data, "comment", str, ""))


@dataclass
class Pizza:
    """A pizza on the menu with its reviews."""

    id: int = 0
    nome: str = ""
    preco: float = 0.0
    reviews: list[Review] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form."""
        return {
            "id": self.id,
            "nome": self.nome,
            "preco": self.preco,
            "reviews": [review.to_dict() for review in self.reviews],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Pizza:
        """Build a pizza from decoded JSON; raise ValueError on wrong types."""
        return cls(
            _get(data, "id", int, 0),
            _get(data, "nome", str, ""),
            float(_get(data, "preco", (int, float), 0.0)),
            [Review.from_dict(item) for item in _get(data, "reviews", list, [])],
        )