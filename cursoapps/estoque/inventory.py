"""In-memory stock keeping with an audit trail, plus supplier records."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Iterable, TypeVar

from cursoapps.estoque.models import Item, LogEntry

T = TypeVar("T")


class InventoryError(Exception):
    """Raised when a stock operation is not allowed."""


class NotFoundError(InventoryError, LookupError):
    """Raised when a requested item or match does not exist."""


class Estoque:
    """A stock of items keyed by id, recording every movement."""

    def __init__(self) -> None:
        self._items: dict[int, Item] = {}
        self._logs: list[LogEntry] = []

    def add_item(self, item: Item, user: str) -> None:
        """Add an item, merging its quantity with any item of the same id."""
        if item.quantity <= 0:
            raise InventoryError(
                f"erro ao adicionar o item: [ID:{item.id}] possui uma "
                "quantidade inválida (zero ou negativa)"
            )
        existing = self._items.get(item.id)
        if existing is not None:
            item = replace(item, quantity=item.quantity + existing.quantity)
        self._items[item.id] = item
        self._logs.append(
            LogEntry(
                timestamp=datetime.now(),
                action="Entrada de estoque",
                user=user,
                item_id=item.id,
                quantity=item.quantity,
                reason="Adicionando novos itens no estoque",
            )
        )

    def list_items(self) -> list[Item]:
        """Return the items currently in stock."""
        return list(self._items.values())

    def view_audit_log(self) -> list[LogEntry]:
        """Return the audit log, oldest entry first."""
        return list(self._logs)

    def calculate_total_cost(self) -> float:
        """Return the value of everything in stock."""
        return sum((item.quantity * item.price for item in self._items.values()), 0.0)

    def delete_item(self, item_id: int, quantity: int, user: str) -> None:
        """Remove a quantity of an item, dropping it when none is left."""
        existing = self._items.get(item_id)
        if existing is None:
            raise NotFoundError(
                f"erro ao remover item: [ID:{item_id}] não existe no estoque"
            )
        if quantity <= 0:
            raise InventoryError(
                "erro ao remover item: quantidade inválida (zero ou negativa) "
                f"para [ID:{item_id}]"
            )
        if existing.quantity < quantity:
            raise InventoryError(
                f"erro ao remover item: estoque insuficiente para [ID:{item_id}]. "
                f"Disponível: {existing.quantity}, Solicitado: {quantity}"
            )

        remaining = existing.quantity - quantity
        if remaining == 0:
            del self._items[item_id]
        else:
            self._items[item_id] = replace(existing, quantity=remaining)

        self._logs.append(
            LogEntry(
                timestamp=datetime.now(),
                action="Saída de estoque",
                user=user,
                item_id=item_id,
                quantity=quantity,
                reason="Removendo itens do estoque",
            )
        )


def find_by(data: Iterable[T], comparator: Callable[[T], bool]) -> list[T]:
    """Return the elements accepted by ``comparator``; raise if there are none."""
    result = [value for value in data if comparator(value)]
    if not result:
        raise NotFoundError("nenhum item foi encontrado")
    return result


@dataclass(frozen=True)
class Fornecedor:
    """A supplier."""

    cnpj: str
    contato: str
    cidade: str

    def get_info(self) -> str:
        """Return the supplier's details as one line ending in a newline."""
        return f"CNPJ: {self.cnpj} | Contato: {self.contato} | Cidade: {self.cidade}\n"

    def verificar_disponibilidade(
        self, quantidade_solicitada: int, quantidade_disponivel: int
    ) -> bool:
        """Tell whether the requested amount is below the available one."""
        return quantidade_solicitada < quantidade_disponivel