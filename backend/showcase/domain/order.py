"""
Order aggregate for the integration example.

The aggregate owns its line items and its status machine:

    PENDING --pay--> PAID --ship--> SHIPPED --deliver--> DELIVERED
       |               |
       +----cancel-----+-----> CANCELLED
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List

from showcase.core.config import get_default_currency
from showcase.core.exceptions import (
    CurrencyMismatchError,
    EmptyOrderError,
    InvalidOrderStateError,
    NegativeAmountError,
    NonPositiveQuantityError,
)
from showcase.domain.product import Number, to_cents, to_decimal
from showcase.domain.task import utcnow


@dataclass(frozen=True)
class OrderId:
    value: str

    @classmethod
    def generate(cls) -> "OrderId":
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomerId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Money value object; an empty currency means the configured default."""

    amount: Decimal
    currency: str

    @classmethod
    def create(cls, amount: Number, currency: str = "") -> "Money":
        value = to_decimal(amount)
        if value < 0:
            raise NegativeAmountError("amount cannot be negative")
        return cls(amount=to_cents(value), currency=currency or get_default_currency())

    @classmethod
    def zero(cls, currency: str = "") -> "Money":
        return cls.create(0, currency)

    def add(self, other: "Money") -> "Money":
        if self.currency != other.currency:
            raise CurrencyMismatchError()
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: int) -> "Money":
        return Money(self.amount * factor, self.currency)


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    product_name: str
    quantity: int
    price: Money

    @classmethod
    def create(
        cls, product_id: str, product_name: str, quantity: int, price: Money
    ) -> "OrderItem":
        if quantity <= 0:
            raise NonPositiveQuantityError()
        return cls(product_id, product_name, quantity, price)

    def total(self) -> Money:
        return self.price.multiply(self.quantity)


@dataclass
class Order:
    """Aggregate root. Build new orders with ``Order.create``."""

    id: OrderId
    customer_id: CustomerId
    items: List[OrderItem]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def create(cls, customer_id: CustomerId, items: List[OrderItem]) -> "Order":
        if not items:
            raise EmptyOrderError()

        total = Money.zero()
        for item in items:
            total = total.add(item.total())

        now = utcnow()
        return cls(
            id=OrderId.generate(),
            customer_id=customer_id,
            items=list(items),
            total=total,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def _transition(self, status: OrderStatus) -> None:
        self.status = status
        self.updated_at = utcnow()

    def mark_as_paid(self) -> None:
        if self.status != OrderStatus.PENDING:
            raise InvalidOrderStateError("only pending orders can be marked as paid")
        self._transition(OrderStatus.PAID)

    def ship(self) -> None:
        if self.status != OrderStatus.PAID:
            raise InvalidOrderStateError("only paid orders can be shipped")
        self._transition(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        if self.status != OrderStatus.SHIPPED:
            raise InvalidOrderStateError("only shipped orders can be delivered")
        self._transition(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        if self.status in (OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            raise InvalidOrderStateError("cannot cancel shipped or delivered orders")
        self._transition(OrderStatus.CANCELLED)
