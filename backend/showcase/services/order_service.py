"""
Order use cases: placing, paying, shipping and cancelling orders.

Each state change is persisted first and then announced through the
event publisher.
"""

import logging
from typing import List, Optional

from showcase.core.exceptions import OrderNotFoundError
from showcase.domain.events import (
    Event,
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderPaidEvent,
    OrderShippedEvent,
)
from showcase.domain.interfaces import IOrderRepository
from showcase.domain.order import CustomerId, Money, Order, OrderItem
from showcase.schemas.dtos import CreateOrderInput
from showcase.services.event_publisher import EventPublisher
from showcase.services.payment_strategies import PaymentFactory

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(
        self,
        repository: IOrderRepository,
        event_publisher: EventPublisher,
        payment_factory: Optional[PaymentFactory] = None,
    ):
        self.repository = repository
        self.event_publisher = event_publisher
        self.payment_factory = payment_factory or PaymentFactory()

    def create_order(self, data: CreateOrderInput) -> Order:
        items = [
            OrderItem.create(
                item.product_id,
                item.product_name,
                item.quantity,
                Money.create(item.price, item.currency),
            )
            for item in data.items
        ]
        order = Order.create(CustomerId(data.customer_id), items)
        self.repository.save(order)

        logger.info(
            "Order created",
            extra={
                "context": {
                    "order_id": order.id.value,
                    "customer_id": order.customer_id.value,
                    "total": str(order.total.amount),
                }
            },
        )
        self.event_publisher.publish(
            Event.wrap(
                OrderCreatedEvent(
                    order_id=order.id.value,
                    customer_id=order.customer_id.value,
                    total=str(order.total.amount),
                )
            )
        )
        return order

    def get_order(self, order_id: str) -> Order:
        order = self.repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def get_customer_orders(self, customer_id: str) -> List[Order]:
        return self.repository.find_by_customer_id(customer_id)

    def process_payment(self, order_id: str, payment_method: str) -> Order:
        order = self.get_order(order_id)
        strategy = self.payment_factory.create_payment(payment_method)
        strategy.process_payment(order.total.amount, order.id.value)

        order.mark_as_paid()
        self.repository.update(order)

        self.event_publisher.publish(
            Event.wrap(
                OrderPaidEvent(
                    order_id=order.id.value,
                    payment_method=strategy.name,
                    amount=str(order.total.amount),
                )
            )
        )
        return order

    def ship_order(self, order_id: str, tracking_number: str) -> Order:
        order = self.get_order(order_id)
        order.ship()
        self.repository.update(order)

        self.event_publisher.publish(
            Event.wrap(
                OrderShippedEvent(order_id=order.id.value, tracking_number=tracking_number)
            )
        )
        return order

    def cancel_order(self, order_id: str) -> Order:
        order = self.get_order(order_id)
        order.cancel()
        self.repository.update(order)

        self.event_publisher.publish(
            Event.wrap(OrderCancelledEvent(order_id=order.id.value))
        )
        return order
