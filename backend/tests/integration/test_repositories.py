"""
Integration tests for the SQLAlchemy repositories against in-memory SQLite.

Each test gets a freshly created schema through the ``db_session`` fixture.
"""

from datetime import timedelta, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest

from showcase.domain.order import CustomerId, Money, Order, OrderItem, OrderStatus
from showcase.domain.product import Category, Product
from showcase.domain.product import Money as ProductMoney
from showcase.domain.task import Task
from showcase.repositories import OrderRepository, ProductRepository, TaskRepository


class TestTaskRepository:
    def test_create_assigns_id(self, db_session):
        repo = TaskRepository(db_session)
        task = repo.create(Task.new("Write docs", "for the API"))

        assert task.id is not None
        loaded = repo.get_by_id(task.id)
        assert loaded.title == "Write docs"
        assert loaded.description == "for the API"
        assert loaded.created_at.tzinfo == timezone.utc

    def test_get_missing_returns_none(self, db_session):
        assert TaskRepository(db_session).get_by_id(12345) is None

    def test_get_all_newest_first(self, db_session):
        repo = TaskRepository(db_session)
        older = Task.new("older")
        older.created_at -= timedelta(minutes=5)
        repo.create(older)
        repo.create(Task.new("newer"))

        assert [t.title for t in repo.get_all()] == ["newer", "older"]

    def test_update_persists_changes(self, db_session):
        repo = TaskRepository(db_session)
        task = repo.create(Task.new("draft"))
        task.update("final", "done", True)
        repo.update(task)

        loaded = repo.get_by_id(task.id)
        assert (loaded.title, loaded.completed) == ("final", True)

    def test_update_missing_task(self, db_session):
        task = Task.new("ghost")
        task.id = 999
        with pytest.raises(ValueError):
            TaskRepository(db_session).update(task)

    def test_delete(self, db_session):
        repo = TaskRepository(db_session)
        task = repo.create(Task.new("temporary"))
        assert repo.delete(task.id) is True
        assert repo.delete(task.id) is False
        assert repo.get_by_id(task.id) is None

    def test_create_rolls_back_on_commit_failure(self, mock_db_session):
        mock_db_session.commit.side_effect = RuntimeError("db down")
        with pytest.raises(RuntimeError):
            TaskRepository(mock_db_session).create(Task.new("fails"))
        mock_db_session.rollback.assert_called_once()


class TestProductRepository:
    def make_product(self, name="Laptop", amount="999.99"):
        return Product.create(
            name, "desc", ProductMoney.create(amount, "USD"), Category.create("Electronics")
        )

    def test_save_and_find(self, db_session):
        repo = ProductRepository(db_session)
        product = self.make_product()
        repo.save(product)

        loaded = repo.find_by_id(product.id.value)
        assert loaded == product
        assert loaded.price.amount == Decimal("999.99")
        assert loaded.category.name == "Electronics"

    def test_save_existing_updates_row(self, db_session):
        repo = ProductRepository(db_session)
        product = self.make_product()
        repo.save(product)
        product.update_info("Ultrabook", "thin")
        product.change_price(ProductMoney.create("899.99", "USD"))
        repo.save(product)

        loaded = repo.find_by_id(product.id.value)
        assert loaded.name == "Ultrabook"
        assert loaded.price.amount == Decimal("899.99")
        assert len(repo.find_all()) == 1

    def test_delete(self, db_session):
        repo = ProductRepository(db_session)
        product = self.make_product()
        repo.save(product)
        assert repo.delete(product.id.value) is True
        assert repo.find_by_id(product.id.value) is None
        assert repo.delete(product.id.value) is False


class TestOrderRepository:
    def make_order(self, customer="customer-1"):
        items = [
            OrderItem.create("p1", "Laptop", 1, Money.create("999.99")),
            OrderItem.create("p2", "Mouse", 2, Money.create("29.99")),
        ]
        return Order.create(CustomerId(customer), items)

    def test_save_and_find_round_trips_items(self, db_session):
        repo = OrderRepository(db_session)
        order = self.make_order()
        repo.save(order)

        loaded = repo.find_by_id(order.id.value)
        assert loaded.id == order.id
        assert loaded.status == OrderStatus.PENDING
        assert loaded.total.amount == Decimal("1059.97")
        assert [i.product_name for i in loaded.items] == ["Laptop", "Mouse"]
        assert loaded.items[1].quantity == 2
        assert loaded.items[1].price.amount == Decimal("29.99")

    def test_lookup_uses_real_order_id(self, db_session):
        repo = OrderRepository(db_session)
        first, second = self.make_order(), self.make_order()
        repo.save(first)
        repo.save(second)

        assert repo.find_by_id(second.id.value).id == second.id
        assert repo.find_by_id("unknown") is None

    def test_update_status(self, db_session):
        repo = OrderRepository(db_session)
        order = self.make_order()
        repo.save(order)
        order.mark_as_paid()
        repo.update(order)

        assert repo.find_by_id(order.id.value).status == OrderStatus.PAID

    def test_update_missing_order(self, db_session):
        with pytest.raises(ValueError):
            OrderRepository(db_session).update(self.make_order())

    def test_find_by_customer(self, db_session):
        repo = OrderRepository(db_session)
        repo.save(self.make_order("alice"))
        repo.save(self.make_order("alice"))
        repo.save(self.make_order("bob"))

        assert len(repo.find_by_customer_id("alice")) == 2
        assert repo.find_by_customer_id("nobody") == []

    def test_save_rolls_back_on_failure(self):
        session = Mock()
        session.commit.side_effect = RuntimeError("db down")
        with pytest.raises(RuntimeError):
            OrderRepository(session).save(self.make_order())
        session.rollback.assert_called_once()
