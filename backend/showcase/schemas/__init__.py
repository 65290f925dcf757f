"""Request and response DTOs shared by controllers and services."""

from .dtos import (
    CreateOrderInput,
    CreateProductInput,
    CreateTaskInput,
    OrderItemInput,
    OrderResponse,
    ProductResponse,
    TaskResponse,
    UpdateTaskInput,
)

__all__ = [
    "CreateTaskInput",
    "UpdateTaskInput",
    "TaskResponse",
    "CreateProductInput",
    "ProductResponse",
    "OrderItemInput",
    "CreateOrderInput",
    "OrderResponse",
]
