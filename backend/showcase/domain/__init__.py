"""
Domain package - Pure business logic layer.

This package contains:
- task.py: Task entity (clean architecture example)
- product.py, pricing.py: Product aggregate, value objects and pricing service (DDD example)
- order.py, events.py: Order aggregate and its domain events (integration example)
- interfaces.py: Repository contracts

Nothing here imports Flask or SQLAlchemy.
"""

from .events import (
    Event,
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderPaidEvent,
    OrderShippedEvent,
)
from .interfaces import (
    IOrderReader,
    IOrderRepository,
    IOrderWriter,
    IProductReader,
    IProductRepository,
    IProductWriter,
    ITaskReader,
    ITaskRepository,
    ITaskWriter,
)
from .order import CustomerId, Order, OrderId, OrderItem, OrderStatus
from .pricing import PricingService
from .product import Category, Money, Product, ProductId
from .task import Task

__all__ = [
    # Domain entities
    "Task",
    "Product",
    "Order",
    # Value objects
    "ProductId",
    "Money",
    "Category",
    "OrderId",
    "CustomerId",
    "OrderItem",
    "OrderStatus",
    # Domain services and events
    "PricingService",
    "Event",
    "OrderCreatedEvent",
    "OrderPaidEvent",
    "OrderShippedEvent",
    "OrderCancelledEvent",
    # Repository interfaces
    "ITaskRepository",
    "IProductRepository",
    "IOrderRepository",
    # Segregated interfaces
    "ITaskReader",
    "ITaskWriter",
    "IProductReader",
    "IProductWriter",
    "IOrderReader",
    "IOrderWriter",
]
