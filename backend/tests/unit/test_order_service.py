"""
Unit tests for OrderService.

Repository is mocked; the publisher is real with a recording observer so
the published events can be asserted.
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from showcase.core.exceptions import (
    EmptyOrderError,
    InvalidOrderStateError,
    OrderNotFoundError,
    UnsupportedPaymentTypeError,
)
from showcase.domain.events import (
    ORDER_CANCELLED,
    ORDER_CREATED,
    ORDER_PAID,
    ORDER_SHIPPED,
)
from showcase.domain.order import OrderStatus
from showcase.schemas.dtos import CreateOrderInput, OrderItemInput
from showcase.services.order_service import OrderService
from showcase.services.payment_strategies import PaymentFactory
from tests.factories.repository_factories import OrderRepositoryFactory


@pytest.fixture
def mock_repo():
    return OrderRepositoryFactory.create_mock_full()


@pytest.fixture
def service(mock_repo, event_publisher):
    return OrderService(mock_repo, event_publisher)


def order_input(customer_id="customer-1"):
    return CreateOrderInput(
        customer_id=customer_id,
        items=[
            OrderItemInput("p1", "Laptop", 1, "999.99"),
            OrderItemInput("p2", "Mouse", 2, 29.99),
        ],
    )


@pytest.fixture
def placed_order(service, mock_repo, recording_observer):
    order = service.create_order(order_input())
    mock_repo.find_by_id.return_value = order
    recording_observer.events.clear()
    return order


class TestCreateOrder:
    def test_create_order_saves_and_publishes(
        self, service, mock_repo, recording_observer
    ):
        order = service.create_order(order_input())

        mock_repo.save.assert_called_once_with(order)
        assert order.total.amount == Decimal("1059.97")
        assert [e.type for e in recording_observer.events] == [ORDER_CREATED]
        data = recording_observer.events[0].data
        assert data.order_id == order.id.value
        assert data.customer_id == "customer-1"
        assert data.total == "1059.97"

    def test_empty_order_is_not_saved(self, service, mock_repo, recording_observer):
        with pytest.raises(EmptyOrderError):
            service.create_order(CreateOrderInput(customer_id="c", items=[]))
        mock_repo.save.assert_not_called()
        assert recording_observer.events == []


class TestOrderLifecycle:
    def test_get_missing_order(self, service):
        with pytest.raises(OrderNotFoundError, match="order not found"):
            service.get_order("missing")

    def test_process_payment(self, service, mock_repo, placed_order, recording_observer):
        order = service.process_payment(placed_order.id.value, "paypal")

        assert order.status == OrderStatus.PAID
        mock_repo.update.assert_called_once_with(placed_order)
        event = recording_observer.events[0]
        assert event.type == ORDER_PAID
        assert event.data.payment_method == "PayPal"
        assert event.data.amount == "1059.97"

    def test_unsupported_payment_leaves_order_pending(
        self, service, mock_repo, placed_order, recording_observer
    ):
        with pytest.raises(UnsupportedPaymentTypeError):
            service.process_payment(placed_order.id.value, "cash")
        assert placed_order.status == OrderStatus.PENDING
        mock_repo.update.assert_not_called()
        assert recording_observer.events == []

    def test_payment_uses_injected_factory(self, mock_repo, event_publisher, placed_order):
        strategy = Mock()
        strategy.name = "Test"
        factory = Mock(spec=PaymentFactory)
        factory.create_payment.return_value = strategy

        OrderService(mock_repo, event_publisher, factory).process_payment(
            placed_order.id.value, "anything"
        )

        strategy.process_payment.assert_called_once_with(
            placed_order.total.amount, placed_order.id.value
        )

    def test_second_payment_rejected(self, service, placed_order):
        service.process_payment(placed_order.id.value, "credit_card")
        with pytest.raises(InvalidOrderStateError):
            service.process_payment(placed_order.id.value, "credit_card")

    def test_ship_order(self, service, placed_order, recording_observer):
        service.process_payment(placed_order.id.value, "crypto")
        order = service.ship_order(placed_order.id.value, "TRACK-123")

        assert order.status == OrderStatus.SHIPPED
        shipped = recording_observer.events[-1]
        assert shipped.type == ORDER_SHIPPED
        assert shipped.data.tracking_number == "TRACK-123"

    def test_cancel_order(self, service, placed_order, recording_observer):
        order = service.cancel_order(placed_order.id.value)
        assert order.status == OrderStatus.CANCELLED
        assert recording_observer.events[-1].type == ORDER_CANCELLED

    def test_customer_orders_delegates_to_repository(self, service, mock_repo):
        mock_repo.find_by_customer_id.return_value = []
        assert service.get_customer_orders("c1") == []
        mock_repo.find_by_customer_id.assert_called_once_with("c1")

    def test_failing_observer_does_not_break_use_case(self, mock_repo, event_publisher):
        class Broken:
            def on_event(self, event):
                raise RuntimeError("boom")

        event_publisher.subscribe(Broken())
        order = OrderService(mock_repo, event_publisher).create_order(order_input())
        assert order.status == OrderStatus.PENDING
