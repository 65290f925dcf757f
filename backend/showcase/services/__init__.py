# Services package initialization
# Application services (use cases) plus the payment and event plumbing
# they are wired with.

from . import event_publisher
from . import order_service
from . import payment_strategies
from . import product_service
from . import task_service

__all__ = [
    "event_publisher",
    "order_service",
    "payment_strategies",
    "product_service",
    "task_service",
]
