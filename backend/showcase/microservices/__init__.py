"""
Microservices example: three independently deployable Flask services plus
an API gateway in front of them.

Each service owns its data; they only know each other by id.
"""

from .gateway import create_gateway
from .orders import create_order_service
from .products import create_product_service
from .users import create_user_service

SERVICE_FACTORIES = {
    "gateway": create_gateway,
    "users": create_user_service,
    "products": create_product_service,
    "orders": create_order_service,
}

__all__ = [
    "SERVICE_FACTORIES",
    "create_gateway",
    "create_order_service",
    "create_product_service",
    "create_user_service",
]
