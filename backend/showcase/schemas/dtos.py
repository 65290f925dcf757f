"""
Data Transfer Objects (DTOs) for the task, product and order use cases.

Input DTOs carry request data into services; response DTOs turn domain
objects into JSON-ready dictionaries. Domain rules are enforced by the
entities themselves, so ``validate()`` here only checks shape.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from showcase.core.api_utils import isoformat
from showcase.core.exceptions import DomainValidationError


def _require_str(data: Dict[str, Any], key: str, default: Optional[str] = None) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise DomainValidationError("invalid request body")
    return value


# ------------------- Tasks -------------------


@dataclass
class CreateTaskInput:
    """DTO for task creation requests."""

    title: str
    description: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CreateTaskInput":
        return cls(
            title=_require_str(data, "title", ""),
            description=_require_str(data, "description", ""),
        )


@dataclass
class UpdateTaskInput:
    """DTO for full task updates; absent fields fall back to empty/false."""

    id: int
    title: str
    description: str = ""
    completed: bool = False

    @classmethod
    def from_json(cls, task_id: int, data: Dict[str, Any]) -> "UpdateTaskInput":
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise DomainValidationError("invalid request body")
        return cls(
            id=task_id,
            title=_require_str(data, "title", ""),
            description=_require_str(data, "description", ""),
            completed=completed,
        )


@dataclass
class TaskResponse:
    """DTO for task API responses."""

    id: int
    title: str
    description: str
    completed: bool
    created_at: Optional[str]
    updated_at: Optional[str]

    @classmethod
    def from_domain(cls, task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=isoformat(task.created_at),
            updated_at=isoformat(task.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ------------------- Products -------------------


@dataclass
class CreateProductInput:
    """DTO for product creation requests."""

    name: str
    description: str
    price: Any
    currency: str
    category: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CreateProductInput":
        price = data.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float, str)):
            raise DomainValidationError("invalid request body")
        return cls(
            name=_require_str(data, "name", ""),
            description=_require_str(data, "description", ""),
            price=price,
            currency=_require_str(data, "currency", ""),
            category=_require_str(data, "category", ""),
        )


@dataclass
class ProductResponse:
    """DTO for product API responses."""

    id: str
    name: str
    description: str
    price: Dict[str, str]
    category: str
    created_at: Optional[str]
    updated_at: Optional[str]

    @classmethod
    def from_domain(cls, product) -> "ProductResponse":
        return cls(
            id=product.id.value,
            name=product.name,
            description=product.description,
            price={
                "amount": str(product.price.amount),
                "currency": product.price.currency,
            },
            category=product.category.name,
            created_at=isoformat(product.created_at),
            updated_at=isoformat(product.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ------------------- Orders -------------------


@dataclass
class OrderItemInput:
    product_id: str
    product_name: str
    quantity: int
    price: Any
    currency: str = ""


@dataclass
class CreateOrderInput:
    """DTO for order placement."""

    customer_id: str
    items: List[OrderItemInput] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CreateOrderInput":
        raw_items = data.get("items", [])
        if not isinstance(raw_items, list):
            raise DomainValidationError("invalid request body")

        items = []
        for raw in raw_items:
            if not isinstance(raw, dict):
                raise DomainValidationError("invalid request body")
            quantity = raw.get("quantity")
            price = raw.get("price")
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise DomainValidationError("invalid request body")
            if isinstance(price, bool) or not isinstance(price, (int, float, str)):
                raise DomainValidationError("invalid request body")
            items.append(
                OrderItemInput(
                    product_id=_require_str(raw, "product_id"),
                    product_name=_require_str(raw, "product_name", ""),
                    quantity=quantity,
                    price=price,
                    currency=_require_str(raw, "currency", ""),
                )
            )

        return cls(customer_id=_require_str(data, "customer_id"), items=items)


@dataclass
class OrderResponse:
    """DTO for order API responses."""

    id: str
    customer_id: str
    items: List[Dict[str, Any]]
    total: str
    currency: str
    status: str
    created_at: Optional[str]
    updated_at: Optional[str]

    @classmethod
    def from_domain(cls, order) -> "OrderResponse":
        return cls(
            id=order.id.value,
            customer_id=order.customer_id.value,
            items=[
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
            total=str(order.total.amount),
            currency=order.total.currency,
            status=order.status.value,
            created_at=isoformat(order.created_at),
            updated_at=isoformat(order.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
