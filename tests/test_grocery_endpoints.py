"""Tests for grocery endpoints."""

from fastapi.testclient import TestClient

from grocery_inventory.api.app import create_app
from grocery_inventory.domain.groceries import Category
from tests.conftest import InMemoryGroceryRepository, make_item

APPLE = {
    "name": "Apple",
    "category": "Fruit",
    "price": 1.99,
    "costToProduce": 0.5,
    "stock": 10,
}


def test_create_and_fetch_grocery(container) -> None:
    client = TestClient(create_app(container))

    created = client.post("/groceries", json=APPLE)

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 1
    assert body["costToProduce"] == 0.5
    assert body["category"] == "Fruit"
    assert "createdUtc" in body
    assert created.headers["Location"] == "/groceries/1"

    fetched = client.get("/groceries/1")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_uses_default_stock(container) -> None:
    client = TestClient(create_app(container))
    payload = {key: value for key, value in APPLE.items() if key != "stock"}

    response = client.post("/groceries", json=payload)

    assert response.status_code == 201
    assert response.json()["stock"] == 10


def test_create_rejects_invalid_payload(
    container, repository: InMemoryGroceryRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/groceries", json={**APPLE, "price": 0, "name": ""})

    assert response.status_code == 422
    assert repository.items == {}


def test_list_groceries_ordered(
    container, repository: InMemoryGroceryRepository
) -> None:
    for item in [
        make_item(1, "Bagels", Category.BREAD),
        make_item(2, "Kiwi", Category.FRUIT),
        make_item(3, "Apple", Category.FRUIT),
    ]:
        repository.items[item.id] = item
    client = TestClient(create_app(container))

    response = client.get("/groceries")

    assert response.status_code == 200
    assert [entry["name"] for entry in response.json()] == ["Apple", "Kiwi", "Bagels"]


def test_missing_grocery_returns_404(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/groceries/99").status_code == 404
    assert client.put("/groceries/99", json=APPLE).status_code == 404
    assert client.delete("/groceries/99").status_code == 404
    assert client.post("/groceries/99/stock", json={"delta": 1}).status_code == 404


def test_update_and_delete_grocery(container) -> None:
    client = TestClient(create_app(container))
    client.post("/groceries", json=APPLE)

    updated = client.put("/groceries/1", json={**APPLE, "name": "Green Apple"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Green Apple"

    deleted = client.delete("/groceries/1")
    assert deleted.status_code == 204
    assert client.get("/groceries/1").status_code == 404


def test_adjust_stock_endpoint_clamps(container) -> None:
    client = TestClient(create_app(container))
    client.post("/groceries", json={**APPLE, "stock": 3})

    response = client.post("/groceries/1/stock", json={"delta": -10})

    assert response.status_code == 200
    assert response.json()["stock"] == 0


def test_service_validation_error_maps_to_400(
    container, repository: InMemoryGroceryRepository
) -> None:
    repository.items[1] = make_item(1, "A" * 101)
    client = TestClient(create_app(container))

    response = client.post("/groceries/1/stock", json={"delta": 1})

    assert response.status_code == 400
    assert response.json()["detail"][0]["field"] == "name"


def test_health(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok"}
