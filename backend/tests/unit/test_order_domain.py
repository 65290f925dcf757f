"""Unit tests for the Order aggregate and its status machine."""

from decimal import Decimal

import pytest

from showcase.core.exceptions import (
    CurrencyMismatchError,
    EmptyOrderError,
    InvalidOrderStateError,
    NegativeAmountError,
    NonPositiveQuantityError,
)
from showcase.domain.events import (
    ORDER_CREATED,
    Event,
    OrderCreatedEvent,
    OrderShippedEvent,
)
from showcase.domain.order import (
    CustomerId,
    Money,
    Order,
    OrderItem,
    OrderStatus,
)


def make_order() -> Order:
    items = [
        OrderItem.create("p1", "Laptop", 1, Money.create("999.99")),
        OrderItem.create("p2", "Mouse", 2, Money.create("29.99")),
    ]
    return Order.create(CustomerId("customer-1"), items)


@pytest.mark.domain
class TestOrderMoney:
    def test_empty_currency_uses_default(self):
        assert Money.create(5).currency == "USD"

    def test_negative_amount(self):
        with pytest.raises(NegativeAmountError, match="amount cannot be negative"):
            Money.create(-5)

    def test_add_and_multiply(self):
        total = Money.create("1.50").add(Money.create("2.25")).multiply(2)
        assert total == Money(Decimal("7.50"), "USD")

    def test_add_rejects_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            Money.create(1, "USD").add(Money.create(1, "EUR"))


@pytest.mark.domain
class TestOrderCreation:
    def test_total_is_sum_of_items(self):
        order = make_order()

        assert order.status == OrderStatus.PENDING
        assert order.total.amount == Decimal("1059.97")
        assert order.total.currency == "USD"
        assert order.id.value

    def test_empty_order_rejected(self):
        with pytest.raises(EmptyOrderError, match="order must have at least one item"):
            Order.create(CustomerId("c"), [])

    def test_item_quantity_must_be_positive(self):
        with pytest.raises(NonPositiveQuantityError):
            OrderItem.create("p1", "Laptop", 0, Money.create(1))

    def test_non_default_currency_items_rejected(self):
        items = [OrderItem.create("p1", "Laptop", 1, Money.create(1, "EUR"))]
        with pytest.raises(CurrencyMismatchError):
            Order.create(CustomerId("c"), items)

    def test_total_matches_rounded_item_prices(self):
        items = [OrderItem.create(f"p{i}", "Pen", 1, Money.create("0.333")) for i in range(3)]
        order = Order.create(CustomerId("c"), items)
        assert [item.price.amount for item in order.items] == [Decimal("0.33")] * 3
        assert order.total.amount == Decimal("0.99")


@pytest.mark.domain
class TestOrderStatusMachine:
    def test_happy_path(self):
        order = make_order()
        order.mark_as_paid()
        assert order.status == OrderStatus.PAID
        order.ship()
        assert order.status == OrderStatus.SHIPPED
        order.deliver()
        assert order.status == OrderStatus.DELIVERED

    def test_pay_twice_rejected(self):
        order = make_order()
        order.mark_as_paid()
        with pytest.raises(InvalidOrderStateError, match="only pending orders"):
            order.mark_as_paid()

    def test_ship_unpaid_rejected(self):
        with pytest.raises(InvalidOrderStateError, match="only paid orders"):
            make_order().ship()

    def test_deliver_unshipped_rejected(self):
        order = make_order()
        order.mark_as_paid()
        with pytest.raises(InvalidOrderStateError, match="only shipped orders"):
            order.deliver()

    @pytest.mark.parametrize("paid", [False, True])
    def test_cancel_pending_or_paid(self, paid):
        order = make_order()
        if paid:
            order.mark_as_paid()
        order.cancel()
        assert order.status == OrderStatus.CANCELLED

    def test_cancel_shipped_rejected(self):
        order = make_order()
        order.mark_as_paid()
        order.ship()
        with pytest.raises(InvalidOrderStateError, match="cannot cancel"):
            order.cancel()
        assert order.status == OrderStatus.SHIPPED


@pytest.mark.domain
class TestDomainEvents:
    def test_wrap_sets_type(self):
        event = Event.wrap(OrderCreatedEvent("o1", "c1", "10.00"))
        assert event.type == ORDER_CREATED
        assert event.data.order_id == "o1"

    def test_to_dict(self):
        payload = Event.wrap(OrderShippedEvent("o1", "TRACK-1")).to_dict()
        assert payload["type"] == "OrderShipped"
        assert payload["data"] == {"order_id": "o1", "tracking_number": "TRACK-1"}
        assert "occurred_at" in payload
