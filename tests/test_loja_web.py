import pytest

from cursoapps.loja.produtos import Produto, ProdutoRepository
from cursoapps.loja.web import create_app


@pytest.fixture
def repo():
    repository = ProdutoRepository(":memory:")
    yield repository
    repository.close()


@pytest.fixture
def client(repo):
    return create_app(repo).test_client()


def test_index_lists_products(client, repo):
    repo.cria_novo_produto("Camiseta", "Azul", 29.9, 10)
    response = client.get("/")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Camiseta" in body
    assert "Azul" in body


def test_unknown_path_falls_back_to_index(client, repo):
    repo.cria_novo_produto("Caneca", "", 1.0, 1)
    response = client.get("/qualquer/coisa")
    assert response.status_code == 200
    assert "Caneca" in response.get_data(as_text=True)


def test_new_page_has_form_posting_to_insert(client):
    response = client.get("/new")
    assert response.status_code == 200
    assert 'action="/insert"' in response.get_data(as_text=True)


def test_insert_creates_product_and_redirects(client, repo):
    response = client.post(
        "/insert",
        data={"nome": "Fone", "descricao": "Sem fio", "preco": "99.5", "quantidade": "3"},
    )
    assert response.status_code == 301
    assert response.headers["Location"].endswith("/")
    [produto] = repo.busca_todos_os_produtos()
    assert (produto.nome, produto.descricao, produto.preco, produto.quantidade) == (
        "Fone",
        "Sem fio",
        99.5,
        3,
    )


def test_insert_with_bad_numbers_stores_zero(client, repo):
    client.post("/insert", data={"nome": "X", "descricao": "", "preco": "abc", "quantidade": "1.5"})
    [produto] = repo.busca_todos_os_produtos()
    assert produto.preco == 0.0
    assert produto.quantidade == 0


def test_insert_by_get_only_redirects(client, repo):
    response = client.get("/insert?nome=Fone&preco=1&quantidade=1")
    assert response.status_code == 301
    assert repo.busca_todos_os_produtos() == []


def test_delete_removes_product(client, repo):
    produto = repo.cria_novo_produto("Mouse", "", 5.0, 2)
    response = client.get(f"/delete?id={produto.id}")
    assert response.status_code == 301
    assert repo.busca_todos_os_produtos() == []


def test_edit_page_shows_product(client, repo):
    produto = repo.cria_novo_produto("Teclado", "Mecanico", 250.0, 4)
    body = client.get(f"/edit?id={produto.id}").get_data(as_text=True)
    assert 'value="Teclado"' in body
    assert 'value="Mecanico"' in body
    assert f'name="id" value="{produto.id}"' in body


def test_edit_page_escapes_html(client, repo):
    produto = repo.cria_novo_produto("<b>x</b>", "", 1.0, 1)
    body = client.get(f"/edit?id={produto.id}").get_data(as_text=True)
    assert "<b>x</b>" not in body
    assert "&lt;b&gt;" in body


def test_update_changes_product(client, repo):
    produto = repo.cria_novo_produto("Tenis", "Preto", 100.0, 3)
    response = client.post(
        "/update",
        data={
            "id": str(produto.id),
            "nome": "Tenis",
            "descricao": "Branco",
            "preco": "120.5",
            "quantidade": "7",
        },
    )
    assert response.status_code == 301
    assert repo.edita_produto(produto.id) == Produto(produto.id, "Tenis", "Branco", 120.5, 7)