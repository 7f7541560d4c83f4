"""Famous people and their stories, kept in an SQLite database."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

DEFAULT_DATABASE = Path("personalidades.db")


@dataclass
class Personalidade:
    """A famous person and their story."""

    id: int = 0
    nome: str = ""
    historia: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form."""
        return asdict(self)


class PersonalidadeRepository:
    """Stores and retrieves personalities in an SQLite database."""

    def __init__(self, database: str | Path = DEFAULT_DATABASE) -> None:
        self._conn = sqlite3.connect(str(database), check_same_thread=False)
        self._lock = threading.Lock()
        self._run(
            "create table if not exists personalidades (id integer primary key autoincrement,"
            " nome text not null default '', historia text not null default '')"
        )

    def _run(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._lock, self._conn:
            return self._conn.execute(sql, params)

    def close(self) -> None:
        """Close the underlying database connection."""
        self._conn.close()

    def __enter__(self) -> PersonalidadeRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def find_all(self) -> list[Personalidade]:
        """Return every personality, ordered by id."""
        return [Personalidade(*row) for row in self._run("select * from personalidades order by id")]

    def first(self, id: int) -> Personalidade | None:
        """Return the personality with the given id, or None."""
        row = self._run("select * from personalidades where id = ?", (id,)).fetchone()
        return Personalidade(*row) if row else None

    def create(self, personalidade: Personalidade) -> Personalidade:
        """Insert a personality; an id of 0 gets a new one. Return the stored record."""
        p = personalidade
        cursor = self._run("insert into personalidades values (?, ?, ?)", (p.id or None, p.nome, p.historia))
        return replace(p, id=cursor.lastrowid or p.id)

    def save(self, personalidade: Personalidade) -> Personalidade:
        """Insert or overwrite a personality with all its fields."""
        if not personalidade.id:
            return self.create(personalidade)
        p = personalidade
        self._run("insert or replace into personalidades values (?, ?, ?)", (p.id, p.nome, p.historia))
        return p

    def delete(self, id: int) -> bool:
        """Delete the personality with the given id; tell whether one existed."""
        return self._run("delete from personalidades where id = ?", (id,)).rowcount > 0