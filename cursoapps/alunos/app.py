"""HTTP API and pages for managing students."""

from __future__ import annotations

import argparse
import json
import os
import sqlite3
from dataclasses import replace
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, render_template_string, request

from cursoapps.alunos.model import (
    DEFAULT_DATABASE,
    Aluno,
    AlunoRepository,
    ValidationError,
    validate_aluno,
)

_INDEX = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Alunos</title></head>
<body>
<h1>Alunos</h1>
<table>
<thead><tr><th>Nome</th><th>CPF</th><th>RG</th></tr></thead>
<tbody>
{% for aluno in alunos %}
<tr><td>{{ aluno.nome }}</td><td>{{ aluno.cpf }}</td><td>{{ aluno.rg }}</td></tr>
{% endfor %}
</tbody>
</table>
</body>
</html>
"""

_NOT_FOUND = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>404</title></head>
<body><h1>Página não encontrada</h1></body>
</html>
"""


class _BindError(ValueError):
    pass


def _bind(base: Aluno) -> Aluno:
    try:
        raw: Any = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as err:
        raise _BindError(str(err)) from err
    if not isinstance(raw, dict):
        raise _BindError(f"json: cannot unmarshal {type(raw).__name__} into Aluno")
    changes: dict[str, Any] = {}
    for key, value in raw.items():
        name = key.lower()
        if name in ("nome", "cpf", "rg"):
            if value is None:
                continue
            if not isinstance(value, str):
                raise _BindError(f"json: cannot unmarshal {type(value).__name__} into field {name} of type string")
            changes[name] = value
    return replace(base, **changes)


def _to_id(text: str) -> int | None:
    return int(text) if text.isdigit() else None


def _not_found_json():
    return jsonify({"Not found": "Aluno não encontrado"}), 404


def create_app(repository: AlunoRepository) -> Flask:
    """Build the Flask application serving ``repository``."""
    app = Flask(__name__, static_url_path="/assets", static_folder=os.path.abspath("assets"))

    @app.errorhandler(_BindError)
    @app.errorhandler(ValidationError)
    def bad_request(err: ValueError):
        return jsonify({"error": str(err)}), 400

    @app.errorhandler(404)
    @app.errorhandler(405)
    def rota_nao_encontrada(_err):
        return render_template_string(_NOT_FOUND), 404

    @app.get("/alunos")
    def exibe_todos_alunos():
        return jsonify([a.to_dict() for a in repository.find_all()])

    @app.get("/<nome>")
    def saudacao(nome: str):
        return jsonify({"API diz": "E ai " + nome + ", tudo beleza?"})

    @app.post("/alunos")
    def cria_novo_aluno():
        aluno = _bind(Aluno())
        validate_aluno(aluno)
        return jsonify(repository.create(aluno).to_dict())

    @app.get("/alunos/<id_param>")
    def busca_aluno_por_id(id_param: str):
        aluno_id = _to_id(id_param)
        aluno = repository.first(aluno_id) if aluno_id is not None else None
        if aluno is None:
            return _not_found_json()
        return jsonify(aluno.to_dict())

    @app.delete("/alunos/<id_param>")
    def deletar_aluno(id_param: str):
        aluno_id = _to_id(id_param)
        if aluno_id is not None:
            repository.delete(aluno_id)
        return jsonify({"data": "Aluno deletado com sucesso"})

    @app.patch("/alunos/<id_param>")
    def edita_aluno(id_param: str):
        aluno_id = _to_id(id_param)
        aluno = (repository.first(aluno_id) if aluno_id is not None else None) or Aluno()
        aluno = _bind(aluno)
        validate_aluno(aluno)
        return jsonify(repository.update(aluno).to_dict())

    @app.get("/alunos/cpf/<cpf>")
    def busca_aluno_por_cpf(cpf: str):
        aluno = repository.find_by_cpf(cpf) if cpf else None
        if aluno is None:
            return _not_found_json()
        return jsonify(aluno.to_dict())

    @app.get("/index")
    def exibir_pagina_index():
        return render_template_string(_INDEX, alunos=repository.find_all())

    return app


def main(argv: list[str] | None = None) -> int:
    """Open the student database and serve the API."""
    parser = argparse.ArgumentParser(description="API de alunos")
    parser.add_argument("--database", type=Path, default=DEFAULT_DATABASE, help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8080")))
    args = parser.parse_args(argv)

    try:
        repository = AlunoRepository(args.database)
    except sqlite3.Error:
        print("Erro ao conectar com o banco de dados")
        return 1
    with repository:
        create_app(repository).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())