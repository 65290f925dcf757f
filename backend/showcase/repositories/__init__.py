# Repositories package initialization
from .order_repo import OrderRepository
from .product_repo import ProductRepository
from .task_repo import TaskRepository

__all__ = ["TaskRepository", "ProductRepository", "OrderRepository"]
