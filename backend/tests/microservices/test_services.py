"""Tests for the user, product and order microservices."""

import pytest

from showcase.microservices import (
    create_order_service,
    create_product_service,
    create_user_service,
)
from showcase.microservices.store import InMemoryStore


@pytest.fixture
def users_client():
    return create_user_service().test_client()


@pytest.fixture
def products_client():
    return create_product_service().test_client()


@pytest.fixture
def orders_client():
    return create_order_service().test_client()


class TestInMemoryStore:
    def test_ids_continue_after_seed(self):
        store = InMemoryStore(seed=[{"id": "1", "name": "seed"}])
        assert store.add({"name": "new"})["id"] == "2"

    def test_prefix_and_copy_semantics(self):
        store = InMemoryStore(prefix="order-")
        record = store.add({"total": 1})
        record["total"] = 99
        assert store.get("order-1") == {"id": "order-1", "total": 1}
        assert store.get("missing") is None
        assert len(store.all()) == 1


class TestUserService:
    def test_seeded_user(self, users_client):
        response = users_client.get("/users/1")
        assert response.status_code == 200
        assert response.get_json() == {
            "id": "1",
            "name": "John Doe",
            "email": "john@example.com",
        }

    def test_missing_user(self, users_client):
        response = users_client.get("/users/42")
        assert response.status_code == 404
        assert response.get_json() == {"error": "user not found"}

    def test_create_user(self, users_client):
        response = users_client.post("/users", json={"name": "Ann", "email": "ann@example.com"})
        assert response.status_code == 201
        user = response.get_json()
        assert users_client.get(f"/users/{user['id']}").get_json()["name"] == "Ann"

    @pytest.mark.parametrize(
        "payload", [{"name": "Ann"}, {"name": "", "email": "a@b.c"}, {"name": "Ann", "email": "nope"}]
    )
    def test_create_user_validation(self, users_client, payload):
        assert users_client.post("/users", json=payload).status_code == 400

    def test_services_do_not_share_state(self):
        first = create_user_service().test_client()
        second = create_user_service().test_client()
        created = first.post("/users", json={"name": "Ann", "email": "ann@example.com"})
        assert second.get(f"/users/{created.get_json()['id']}").status_code == 404


class TestProductService:
    def test_seeded_catalogue(self, products_client):
        products = products_client.get("/products").get_json()
        assert {p["name"] for p in products} == {"Laptop", "Mouse"}

    def test_get_product(self, products_client):
        assert products_client.get("/products/2").get_json()["name"] == "Mouse"
        assert products_client.get("/products/99").status_code == 404


class TestOrderService:
    def test_create_and_get(self, orders_client):
        response = orders_client.post(
            "/orders", json={"user_id": "1", "product_id": "2", "total": 59.98}
        )
        assert response.status_code == 201
        order = response.get_json()
        assert order["id"] == "order-1"
        assert orders_client.get("/orders/order-1").get_json()["total"] == 59.98

    @pytest.mark.parametrize(
        "payload",
        [
            {"product_id": "2", "total": 1},
            {"user_id": "1", "product_id": "2", "total": -1},
            {"user_id": "1", "product_id": "2", "total": "ten"},
        ],
    )
    def test_validation(self, orders_client, payload):
        assert orders_client.post("/orders", json=payload).status_code == 400

    def test_missing_order(self, orders_client):
        assert orders_client.get("/orders/order-9").get_json() == {"error": "order not found"}

    @pytest.mark.parametrize("factory", [create_user_service, create_product_service, create_order_service])
    def test_health(self, factory):
        response = factory().test_client().get("/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"
