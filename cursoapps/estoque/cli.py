"""Demonstration run of the inventory service."""

from __future__ import annotations

import argparse

from cursoapps.estoque.inventory import Estoque, Fornecedor, InventoryError, find_by
from cursoapps.estoque.models import Item

_USER = "Paulinho"


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _format_items(items: list[Item]) -> str:
    parts = (
        f"{{{item.id} {item.name} {item.quantity} {_format_number(item.price)}}}"
        for item in items
    )
    return "[" + " ".join(parts) + "]"


def main(argv: list[str] | None = None) -> int:
    """Fill a stock, remove some of it and print the results."""
    argparse.ArgumentParser(description="Sistema de Estoque").parse_args(argv)

    print("Sistema de Estoque")

    estoque = Estoque()
    items = [
        Item(id=1, name="Fone", quantity=5, price=100),
        Item(id=2, name="Camiseta", quantity=1, price=55.99),
        Item(id=3, name="Mouse", quantity=2, price=12.99),
    ]
    for item in items:
        try:
            estoque.add_item(item, _USER)
        except InventoryError as err:
            print(err)

    for item in estoque.list_items():
        print(
            f"ID: {item.id} | Name: {item.name} | Quantidade: {item.quantity} "
            f"| Preço: {item.price:.2f}"
        )
    print("Valor total do estoque:", _format_number(estoque.calculate_total_cost()))

    try:
        estoque.delete_item(3, 2, _USER)
    except InventoryError as err:
        print(err)

    for entry in estoque.view_audit_log():
        print(
            f"[{entry.timestamp:%d/%m/%Y-%H:%M:%S}] Ação: {entry.action} - "
            f"Usuario: {entry.user} - Item ID: {entry.item_id} - "
            f"Quantidade: {entry.quantity} - Motivo: {entry.reason}"
        )

    try:
        found = find_by(items, lambda item: item.price > 40)
    except InventoryError as err:
        print(err)
        found = []
    print("Item encontrado:", _format_items(found))

    fornecedor = Fornecedor(cnpj="123456", contato="contato@example.com", cidade="São Paulo")
    print(fornecedor.get_info(), end="")
    if fornecedor.verificar_disponibilidade(10, 15):
        print("Possui disponibilidade")
    else:
        print("Não possui disponibilidade")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())