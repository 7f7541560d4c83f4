"""Students, their validation rules and their SQLite storage."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import Any

DEFAULT_DATABASE = Path("alunos.db")

_DIGITS = re.compile(r"^[0-9]*$")
_SELECT = "select id, created_at, updated_at, deleted_at, nome, cpf, rg from alunos where deleted_at is null"


class ValidationError(ValueError):
    """Raised when a student's data breaks a validation rule."""


@dataclass
class Aluno:
    """A student record with bookkeeping timestamps."""

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    nome: str = ""
    cpf: str = ""
    rg: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form."""
        stamp = lambda s: s.isoformat() if s else None  # noqa: E731
        return {
            "ID": self.id,
            "CreatedAt": stamp(self.created_at),
            "UpdatedAt": stamp(self.updated_at),
            "DeletedAt": stamp(self.deleted_at),
            "nome": self.nome,
            "cpf": self.cpf,
            "rg": self.rg,
        }


def validate_aluno(aluno: Aluno) -> None:
    """Require a name, an 11-digit CPF and a 9-digit RG."""
    problems = [] if aluno.nome else ["Nome: zero value"]
    for name, value, length in (("CPF", aluno.cpf, 11), ("RG", aluno.rg, 9)):
        if len(value) != length:
            problems.append(f"{name}: invalid length")
        if not _DIGITS.match(value):
            problems.append(f"{name}: regular expression mismatch")
    if problems:
        raise ValidationError(", ".join(problems))


def _from_row(row: tuple) -> Aluno:
    id_, *stamps, nome, cpf, rg = row
    created, updated, deleted = (datetime.fromisoformat(s) if s else None for s in stamps)
    return Aluno(id_, created, updated, deleted, nome, cpf, rg)


class AlunoRepository:
    """Stores students in SQLite; deletion only marks a record as deleted."""

    def __init__(self, database: str | Path = DEFAULT_DATABASE) -> None:
        self._conn = sqlite3.connect(str(database), check_same_thread=False)
        self._lock = threading.Lock()
        self._run(
            "create table if not exists alunos (id integer primary key autoincrement,"
            " created_at text, updated_at text, deleted_at text, nome text not null default '',"
            " cpf text not null default '', rg text not null default '')"
        )

    def _run(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._lock, self._conn:
            return self._conn.execute(sql, params)

    def _one(self, where: str, value: Any) -> Aluno | None:
        row = self._run(f"{_SELECT} and {where} = ? order by id limit 1", (value,)).fetchone()
        return _from_row(row) if row else None

    def close(self) -> None:
        """Close the underlying database connection."""
        self._conn.close()

    def __enter__(self) -> AlunoRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def find_all(self) -> list[Aluno]:
        """Return every student not deleted, ordered by id."""
        return [_from_row(row) for row in self._run(_SELECT + " order by id")]

    def first(self, id: int) -> Aluno | None:
        """Return the student with the given id, or None."""
        return self._one("id", id)

    def find_by_cpf(self, cpf: str) -> Aluno | None:
        """Return the first student with the given CPF, or None."""
        return self._one("cpf", cpf)

    def create(self, aluno: Aluno) -> Aluno:
        """Insert a student and return it with its id and timestamps."""
        now = datetime.now()
        cursor = self._run(
            "insert into alunos(created_at, updated_at, nome, cpf, rg) values (?, ?, ?, ?, ?)",
            (now.isoformat(), now.isoformat(), aluno.nome, aluno.cpf, aluno.rg),
        )
        return replace(aluno, id=cursor.lastrowid or 0, created_at=now, updated_at=now, deleted_at=None)

    def update(self, aluno: Aluno) -> Aluno:
        """Overwrite the non-empty fields of a stored student; return the result."""
        now = datetime.now()
        changes = {k: v for k, v in (("nome", aluno.nome), ("cpf", aluno.cpf), ("rg", aluno.rg)) if v}
        assignments = "".join(f", {key} = ?" for key in changes)
        self._run(
            f"update alunos set updated_at = ?{assignments} where id = ? and deleted_at is null",
            (now.isoformat(), *changes.values(), aluno.id),
        )
        return replace(aluno, updated_at=now)

    def delete(self, id: int) -> bool:
        """Mark the student as deleted; tell whether one was found."""
        cursor = self._run(
            "update alunos set deleted_at = ? where id = ? and deleted_at is null",
            (datetime.now().isoformat(), id),
        )
        return cursor.rowcount > 0