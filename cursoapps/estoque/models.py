"""Data records used by the inventory service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Item:
    """A product held in stock."""

    id: int
    name: str
    quantity: int
    price: float

    def info(self) -> str:
        """Return a one-line human readable description of the item."""
        return (
            f"ID: {self.id} | Name: {self.name} | "
            f"Quantidade: {self.quantity} | Preço: {self.price:.2f}"
        )


@dataclass(frozen=True)
class LogEntry:
    """One audit record of a stock movement."""

    timestamp: datetime
    action: str
    user: str
    item_id: int
    quantity: int
    reason: str