"""Products of a small shop, kept in an SQLite database."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_DATABASE = Path("alura_loja.db")

_SCHEMA = """
create table if not exists produtos (
    id integer primary key autoincrement,
    nome text not null default '',
    descricao text not null default '',
    preco real not null default 0,
    quantidade integer not null default 0
)
"""

_COLUMNS = "id, nome, descricao, preco, quantidade"


@dataclass
class Produto:
    """A product on sale."""

    id: int = 0
    nome: str = ""
    descricao: str = ""
    preco: float = 0.0
    quantidade: int = 0


class ProdutoRepository:
    """Stores and retrieves products in an SQLite database."""

    def __init__(self, database: str | Path = DEFAULT_DATABASE) -> None:
        self._conn = sqlite3.connect(str(database), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(_SCHEMA)

    def close(self) -> None:
        """Close the underlying database connection."""
        self._conn.close()

    def __enter__(self) -> ProdutoRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _rows(self, sql: str, params: tuple = ()) -> Iterator[Produto]:
        with self._lock:
            rows = self._conn.execute(sql, params).fetchall()
        for id_, nome, descricao, preco, quantidade in rows:
            yield Produto(id_, nome, descricao, float(preco), quantidade)

    def _execute(self, sql: str, params: tuple) -> sqlite3.Cursor:
        with self._lock, self._conn:
            return self._conn.execute(sql, params)

    def busca_todos_os_produtos(self) -> list[Produto]:
        """Return every product, ordered by id."""
        return list(self._rows(f"select {_COLUMNS} from produtos order by id asc"))

    def cria_novo_produto(
        self, nome: str, descricao: str, preco: float, quantidade: int
    ) -> Produto:
        """Insert a product and return it with its new id."""
        cursor = self._execute(
            "insert into produtos(nome, descricao, preco, quantidade) values (?, ?, ?, ?)",
            (nome, descricao, preco, quantidade),
        )
        return Produto(cursor.lastrowid or 0, nome, descricao, float(preco), quantidade)

    def deleta_produto(self, id: int | str) -> None:
        """Delete the product with the given id, if there is one."""
        self._execute("delete from produtos where id = ?", (id,))

    def edita_produto(self, id: int | str) -> Produto:
        """Return the product with the given id, or an empty product."""
        found = Produto()
        for produto in self._rows(f"select {_COLUMNS} from produtos where id = ?", (id,)):
            found = produto
        return found

    def atualiza_produto(
        self, id: int, nome: str, descricao: str, preco: float, quantidade: int
    ) -> None:
        """Overwrite the fields of the product with the given id."""
        self._execute(
            "update produtos set nome = ?, descricao = ?, preco = ?, quantidade = ? where id = ?",
            (nome, descricao, preco, quantidade, id),
        )