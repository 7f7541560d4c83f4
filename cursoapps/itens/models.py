"""Stock items, their validation and decoding from JSON."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from typing import Any


class ItemError(ValueError):
    """Raised when an item cannot be decoded or is not valid."""


@dataclass
class Item:
    """An item in stock."""

    id: int = 0
    nome: str = ""
    codigo: str = ""
    descricao: str = ""
    preco: float = 0.0
    quantidade: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form."""
        return asdict(self)


def validate_item(item: Item) -> None:
    """Require a positive price, a non-negative quantity and a 6-character code."""
    if item.preco <= 0:
        raise ItemError("o preço não pode ser negativo")
    if item.quantidade < 0:
        raise ItemError("quantidade deve ser maior que zero")
    if len(item.codigo.encode("utf-8")) != 6:
        raise ItemError("o código precisa ter 6 caracteres")


_KINDS = {f.name: f.type for f in fields(Item)}


def _decode(raw: Any) -> Item:
    if not isinstance(raw, dict):
        raise ValueError(f"json: cannot unmarshal {type(raw).__name__} into Item")
    values: dict[str, Any] = {}
    for key, value in raw.items():
        name = key.lower()
        if value is None or name not in _KINDS:
            continue
        kind = _KINDS[name]
        if kind == "str":
            ok = isinstance(value, str)
        elif isinstance(value, bool) or not isinstance(value, (int, float) if kind == "float" else int):
            ok = False
        else:
            ok = name != "id" or value >= 0
            value = float(value) if kind == "float" else value
        if not ok:
            raise ValueError(f"json: cannot unmarshal {value!r} into field {name}")
        values[name] = value
    return Item(**values)


def decode_and_validate_item(body: str | bytes) -> Item:
    """Decode an item from a JSON body and validate it."""
    try:
        item = _decode(json.loads(body))
    except ValueError as err:
        raise ItemError("Erro ao decodificar o item: " + str(err)) from err
    try:
        validate_item(item)
    except ItemError as err:
        raise ItemError("Erro de validação: " + str(err)) from err
    return item