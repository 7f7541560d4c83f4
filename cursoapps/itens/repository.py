"""SQLite storage of stock items."""

from __future__ import annotations

import os
import sqlite3
import threading
from dataclasses import astuple, replace
from pathlib import Path

from cursoapps.itens.models import Item

_SCHEMA = (
    "create table if not exists items (id integer primary key autoincrement,"
    " nome text not null default '', codigo text unique, descricao text not null default '',"
    " preco real not null default 0, quantidade integer not null default 0)"
)


class ItemNotFound(LookupError):
    """Raised when no item matches a lookup."""


def _item(row: tuple) -> Item:
    return Item(row[0], row[1], row[2], row[3], float(row[4]), row[5])


class ItemRepository:
    """Stores and retrieves items in an SQLite database."""

    def __init__(self, database: str | Path) -> None:
        self._conn = sqlite3.connect(str(database), check_same_thread=False)
        self._lock = threading.Lock()
        self._run(_SCHEMA)

    def _run(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._lock, self._conn:
            return self._conn.execute(sql, params)

    def ping(self) -> bool:
        """Tell whether the database answers a query."""
        return self._run("select 1").fetchone() == (1,)

    def close(self) -> None:
        """Close the underlying database connection."""
        self._conn.close()

    def __enter__(self) -> ItemRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _one(self, column: str, value: object) -> Item:
        row = self._run(f"select * from items where {column} = ? order by id limit 1", (value,)).fetchone()
        if row is None:
            raise ItemNotFound("record not found")
        return _item(row)

    def list_all(self) -> list[Item]:
        """Return every item, ordered by id."""
        return [_item(row) for row in self._run("select * from items order by id")]

    def get_by_id(self, id: int) -> Item:
        """Return the item with the given id."""
        return self._one("id", id)

    def get_by_code(self, code: str) -> Item:
        """Return the item with the given code."""
        return self._one("codigo", code)

    def create(self, item: Item) -> Item:
        """Insert an item; an id of 0 gets a new one. Return the stored item."""
        cursor = self._run("insert into items values (?, ?, ?, ?, ?, ?)", (item.id or None, *astuple(item)[1:]))
        return replace(item, id=cursor.lastrowid or item.id)

    def update(self, item: Item) -> Item:
        """Insert or overwrite an item with all its fields."""
        if not item.id:
            return self.create(item)
        self._run("insert or replace into items values (?, ?, ?, ?, ?, ?)", astuple(item))
        return item

    def delete(self, id: int) -> None:
        """Delete the item with the given id, if there is one."""
        self._run("delete from items where id = ?", (id,))


def connect_database(dsn: str | None = None) -> ItemRepository:
    """Open the database named by ``dsn`` or the DB_DSN environment variable."""
    target = dsn if dsn is not None else os.environ.get("DB_DSN", "")
    if not target:
        raise ValueError("Erro ao conectar com o BD: DB_DSN não definido")
    return ItemRepository(target)