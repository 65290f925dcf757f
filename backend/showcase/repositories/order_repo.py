"""Order repository: the aggregate is stored as a row plus a JSON list of items."""

import json
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from showcase.db.base import OrderModel
from showcase.domain.interfaces import IOrderRepository
from showcase.domain.order import (
    CustomerId,
    Money,
    Order,
    OrderId,
    OrderItem,
    OrderStatus,
)
from showcase.repositories.task_repo import as_utc


def _items_to_json(items: List[OrderItem]) -> str:
    return json.dumps(
        [
            {
                "product_id": item.product_id,
                "product_name": item.product_name,
                "quantity": item.quantity,
                "price": str(item.price.amount),
                "currency": item.price.currency,
            }
            for item in items
        ]
    )


def _items_from_json(raw: str) -> List[OrderItem]:
    return [
        OrderItem(
            product_id=data["product_id"],
            product_name=data["product_name"],
            quantity=int(data["quantity"]),
            price=Money(Decimal(data["price"]), data["currency"]),
        )
        for data in json.loads(raw or "[]")
    ]


class OrderRepository(IOrderRepository):
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def save(self, order: Order) -> None:
        db_order = OrderModel(
            id=order.id.value,
            customer_id=order.customer_id.value,
            items=_items_to_json(order.items),
            total_amount=order.total.amount,
            currency=order.total.currency,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
        try:
            self.db.add(db_order)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def update(self, order: Order) -> None:
        db_order = self.db.query(OrderModel).filter_by(id=order.id.value).first()
        if not db_order:
            raise ValueError(f"Order with ID {order.id} not found")
        db_order.status = order.status.value
        db_order.updated_at = order.updated_at
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def find_by_id(self, order_id: str) -> Optional[Order]:
        db_order = self.db.query(OrderModel).filter_by(id=order_id).first()
        return self._to_domain(db_order) if db_order else None

    def find_by_customer_id(self, customer_id: str) -> List[Order]:
        db_orders = (
            self.db.query(OrderModel)
            .filter_by(customer_id=customer_id)
            .order_by(OrderModel.created_at.desc())
            .all()
        )
        return [self._to_domain(o) for o in db_orders]

    def _to_domain(self, db_order: OrderModel) -> Order:
        return Order(
            id=OrderId(db_order.id),
            customer_id=CustomerId(db_order.customer_id),
            items=_items_from_json(db_order.items),
            total=Money(db_order.total_amount, db_order.currency),
            status=OrderStatus(db_order.status),
            created_at=as_utc(db_order.created_at),
            updated_at=as_utc(db_order.updated_at),
        )
