import pytest

from cursoapps.loja.produtos import Produto, ProdutoRepository


@pytest.fixture
def repo():
    repository = ProdutoRepository(":memory:")
    yield repository
    repository.close()


def test_empty_database_has_no_products(repo):
    assert repo.busca_todos_os_produtos() == []


def test_created_product_is_listed(repo):
    created = repo.cria_novo_produto("Camiseta", "Azul", 29.9, 10)
    listed = repo.busca_todos_os_produtos()
    assert listed == [created]
    assert (created.nome, created.descricao, created.preco, created.quantidade) == (
        "Camiseta",
        "Azul",
        29.9,
        10,
    )


def test_products_are_ordered_by_id(repo):
    for nome in ("a", "b", "c"):
        repo.cria_novo_produto(nome, "", 1.0, 1)
    ids = [p.id for p in repo.busca_todos_os_produtos()]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_delete_accepts_string_id(repo):
    keep = repo.cria_novo_produto("Fone", "", 10.0, 1)
    gone = repo.cria_novo_produto("Mouse", "", 5.0, 2)
    repo.deleta_produto(str(gone.id))
    assert repo.busca_todos_os_produtos() == [keep]


def test_edit_returns_the_stored_product(repo):
    created = repo.cria_novo_produto("Notebook", "Rapido", 1999.0, 2)
    assert repo.edita_produto(str(created.id)) == created
    assert repo.edita_produto(created.id) == created


def test_edit_of_missing_product_is_empty(repo):
    assert repo.edita_produto(42) == Produto()


def test_update_overwrites_fields(repo):
    created = repo.cria_novo_produto("Tenis", "Preto", 100.0, 3)
    repo.atualiza_produto(created.id, "Tenis", "Branco", 120.5, 7)
    assert repo.edita_produto(created.id) == Produto(created.id, "Tenis", "Branco", 120.5, 7)


def test_context_manager_closes(tmp_path):
    path = tmp_path / "loja.db"
    with ProdutoRepository(path) as repository:
        created = repository.cria_novo_produto("Caneca", "", 15.0, 4)
    with ProdutoRepository(path) as repository:
        assert repository.busca_todos_os_produtos() == [created]