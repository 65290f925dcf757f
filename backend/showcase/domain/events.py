"""Domain events raised by the Order aggregate."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict

from showcase.domain.task import utcnow

ORDER_CREATED = "OrderCreated"
ORDER_PAID = "OrderPaid"
ORDER_SHIPPED = "OrderShipped"
ORDER_CANCELLED = "OrderCancelled"


@dataclass(frozen=True)
class OrderCreatedEvent:
    order_id: str
    customer_id: str
    total: str


@dataclass(frozen=True)
class OrderPaidEvent:
    order_id: str
    payment_method: str
    amount: str


@dataclass(frozen=True)
class OrderShippedEvent:
    order_id: str
    tracking_number: str


@dataclass(frozen=True)
class OrderCancelledEvent:
    order_id: str


_EVENT_TYPES = {
    OrderCreatedEvent: ORDER_CREATED,
    OrderPaidEvent: ORDER_PAID,
    OrderShippedEvent: ORDER_SHIPPED,
    OrderCancelledEvent: ORDER_CANCELLED,
}


@dataclass(frozen=True)
class Event:
    """Envelope handed to observers: an event type name plus its payload."""

    type: str
    data: Any
    occurred_at: datetime = field(default_factory=utcnow)

    @classmethod
    def wrap(cls, payload) -> "Event":
        return cls(type=_EVENT_TYPES[type(payload)], data=payload)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "data": asdict(self.data),
            "occurred_at": self.occurred_at.isoformat(),
        }
