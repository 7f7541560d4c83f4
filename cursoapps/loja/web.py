"""Web pages for listing, creating, editing and deleting products."""

from __future__ import annotations

import argparse
import sqlite3
from pathlib import Path

from flask import Flask, redirect, render_template_string, request

from cursoapps.loja.produtos import DEFAULT_DATABASE, ProdutoRepository

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

_FORM = """<form method="post" action="/{{ action }}">
<input type="hidden" name="id" value="{{ produto.id }}">
<input name="nome" value="{{ produto.nome }}"><input name="descricao" value="{{ produto.descricao }}">
<input name="preco" value="{{ produto.preco }}"><input name="quantidade" value="{{ produto.quantidade }}">
<button type="submit">Salvar</button></form>"""

_INDEX = """<table>{% for p in produtos %}<tr><td>{{ p.nome }}</td><td>{{ p.descricao }}</td>
<td>{{ p.preco }}</td><td>{{ p.quantidade }}</td><td><a href="/edit?id={{ p.id }}">Editar</a>
<a href="/delete?id={{ p.id }}">Deletar</a></td></tr>{% endfor %}</table><a href="/new">Novo</a>"""


def create_app(repository: ProdutoRepository) -> Flask:
    """Build the Flask application serving the products in ``repository``."""
    app = Flask(__name__)

    def number(name: str, kind: type, what: str):
        text = request.values.get(name, "")
        try:
            if text != text.strip():
                raise ValueError(f'parsing "{text}": invalid syntax')
            return kind(text)
        except ValueError as err:
            app.logger.warning("Erro na conversão de %s: %s", what, err)
            return kind(0)

    def fields():
        return (
            request.values.get("nome", ""),
            request.values.get("descricao", ""),
            number("preco", float, "preço"),
            number("quantidade", int, "quantidade"),
        )

    @app.route("/", methods=_METHODS)
    @app.route("/<path:_rest>", methods=_METHODS)
    def index(_rest: str = ""):
        return render_template_string(_INDEX, produtos=repository.busca_todos_os_produtos())

    @app.route("/new", methods=_METHODS)
    def new():
        return render_template_string(_FORM, action="insert", produto={})

    @app.route("/insert", methods=_METHODS)
    def insert():
        if request.method == "POST":
            repository.cria_novo_produto(*fields())
        return redirect("/", code=301)

    @app.route("/delete", methods=_METHODS)
    def delete():
        repository.deleta_produto(request.args.get("id", ""))
        return redirect("/", code=301)

    @app.route("/edit", methods=_METHODS)
    def edit():
        produto = repository.edita_produto(request.args.get("id", ""))
        return render_template_string(_FORM, action="update", produto=produto)

    @app.route("/update", methods=_METHODS)
    def update():
        if request.method == "POST":
            repository.atualiza_produto(number("id", int, "id"), *fields())
        return redirect("/", code=301)

    return app


def main(argv: list[str] | None = None) -> int:
    """Open the product database and serve the shop pages on port 8080."""
    parser = argparse.ArgumentParser(description="Loja web")
    parser.add_argument("--database", type=Path, default=DEFAULT_DATABASE)
    args = parser.parse_args(argv)
    try:
        repository = ProdutoRepository(args.database)
    except sqlite3.Error as err:
        print("Erro ao conectar com o banco de dados:", err)
        return 1
    with repository:
        create_app(repository).run(host="0.0.0.0", port=8080)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())