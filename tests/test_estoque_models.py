from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from cursoapps.estoque.models import Item, LogEntry


def test_item_info_uses_fixed_format():
    item = Item(id=1, name="Fone", quantity=5, price=100)
    assert item.info() == "ID: 1 | Name: Fone | Quantidade: 5 | Preço: 100.00"


def test_item_info_contains_name_and_quantity():
    item = Item(id=42, name="Mouse", quantity=2, price=12.5)
    text = item.info()
    assert text.startswith("ID: 42 | Name: Mouse")
    assert "Quantidade: 2" in text


def test_item_is_a_value():
    assert Item(3, "Mouse", 2, 12.99) == Item(3, "Mouse", 2, 12.99)
    with pytest.raises(FrozenInstanceError):
        Item(3, "Mouse", 2, 12.99).quantity = 5


def test_log_entry_holds_fields():
    moment = datetime(2024, 5, 6, 7, 8, 9)
    entry = LogEntry(moment, "Entrada de estoque", "Paulinho", 1, 5, "motivo")
    assert entry.timestamp == moment
    assert entry.user == "Paulinho"
    assert entry.item_id == 1
    with pytest.raises(FrozenInstanceError):
        entry.quantity = 1