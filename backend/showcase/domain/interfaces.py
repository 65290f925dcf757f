"""
Abstract interfaces for repositories following Interface Segregation Principle.

Services depend on these contracts only; the SQLAlchemy implementations
live in ``showcase.repositories`` and are injected at the edge.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .order import Order
from .product import Product
from .task import Task


class ITaskReader(ABC):
    """Interface for task read operations."""

    @abstractmethod
    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID, or None when it does not exist."""
        pass

    @abstractmethod
    def get_all(self) -> List[Task]:
        """Get all tasks, newest first."""
        pass


class ITaskWriter(ABC):
    """Interface for task write operations."""

    @abstractmethod
    def create(self, task: Task) -> Task:
        """Persist a new task and assign its id."""
        pass

    @abstractmethod
    def update(self, task: Task) -> Task:
        """Persist changes to an existing task."""
        pass

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Delete a task; False when it did not exist."""
        pass


class ITaskRepository(ITaskReader, ITaskWriter):
    """Complete task repository interface combining read/write operations."""

    pass


class IProductReader(ABC):
    """Interface for product read operations."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    def find_all(self) -> List[Product]:
        pass


class IProductWriter(ABC):
    """Interface for product write operations."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert or update the aggregate."""
        pass

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        pass


class IProductRepository(IProductReader, IProductWriter):
    pass


class IOrderReader(ABC):
    """Interface for order read operations."""

    @abstractmethod
    def find_by_id(self, order_id: str) -> Optional[Order]:
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: str) -> List[Order]:
        pass


class IOrderWriter(ABC):
    """Interface for order write operations."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Insert a new order."""
        pass

    @abstractmethod
    def update(self, order: Order) -> None:
        """Persist status changes of an existing order."""
        pass


class IOrderRepository(IOrderReader, IOrderWriter):
    pass
