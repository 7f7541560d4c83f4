import pytest

from cursoapps.pizzaria.app import create_app
from cursoapps.pizzaria.models import Pizza
from cursoapps.pizzaria.store import PizzaStore


@pytest.fixture
def store(tmp_path):
    return PizzaStore(tmp_path / "pizzas.json")


@pytest.fixture
def client(store):
    return create_app(store).test_client()


def _create(client, nome="Calabresa", preco=40.0):
    return client.post("/pizzas", json={"nome": nome, "preco": preco})


def test_list_empty(client):
    response = client.get("/pizzas")
    assert response.status_code == 200
    assert response.get_json() == {"pizzas": []}


def test_create_assigns_sequential_ids_and_persists(client, store):
    first = _create(client)
    second = _create(client, "Atum", 45.0)
    assert first.status_code == 201
    assert first.get_json()["id"] == 1
    assert second.get_json()["id"] == 2
    reloaded = PizzaStore(store.path)
    reloaded.load()
    assert [p.nome for p in reloaded.pizzas] == ["Calabresa", "Atum"]


def test_create_with_negative_price_is_refused(client, store):
    response = _create(client, preco=-1)
    assert response.status_code == 401
    assert response.get_json() == {"erro": "o preço da pizza não pode ser negativo"}
    assert store.pizzas == []


def test_create_with_invalid_json(client):
    response = client.post("/pizzas", data="not json", content_type="application/json")
    assert response.status_code == 400
    assert "erro" in response.get_json()


def test_create_with_wrong_field_type(client):
    response = client.post("/pizzas", json={"preco": "caro"})
    assert response.status_code == 400


def test_get_by_id(client):
    _create(client)
    response = client.get("/pizzas/1")
    assert response.status_code == 200
    assert response.get_json()["nome"] == "Calabresa"


def test_get_by_bad_id(client):
    response = client.get("/pizzas/abc")
    assert response.status_code == 400
    assert "invalid syntax" in response.get_json()["erro"]


def test_get_missing(client):
    response = client.get("/pizzas/99")
    assert response.status_code == 404
    assert response.get_json() == {"message": "pizza not found"}


def test_update_keeps_id(client, store):
    _create(client)
    response = client.put("/pizzas/1", json={"id": 7, "nome": "Portuguesa", "preco": 50})
    assert response.status_code == 200
    assert response.get_json()["id"] == 1
    assert store.pizzas == [Pizza(id=1, nome="Portuguesa", preco=50.0)]


def test_update_missing(client):
    response = client.put("/pizzas/5", json={"nome": "X", "preco": 1})
    assert response.status_code == 404


def test_update_negative_price(client):
    _create(client)
    assert client.put("/pizzas/1", json={"preco": -5}).status_code == 401


def test_delete(client, store):
    _create(client)
    response = client.delete("/pizzas/1")
    assert response.status_code == 200
    assert response.get_json() == {"message": "pizza deletada"}
    assert store.pizzas == []
    assert client.delete("/pizzas/1").status_code == 404


def test_post_review(client, store):
    _create(client)
    response = client.post("/pizzas/1/reviews", json={"rating": 5, "comment": "ótima"})
    assert response.status_code == 201
    assert response.get_json()["reviews"] == [{"rating": 5, "comment": "ótima"}]
    reloaded = PizzaStore(store.path)
    reloaded.load()
    assert reloaded.pizzas[0].reviews[0].comment == "ótima"


def test_post_review_bad_rating(client):
    _create(client)
    response = client.post("/pizzas/1/reviews", json={"rating": 6})
    assert response.status_code == 401
    assert response.get_json() == {"erro": "rating must be between 1 and 5"}


def test_post_review_missing_pizza(client):
    response = client.post("/pizzas/3/reviews", json={"rating": 4})
    assert response.status_code == 404