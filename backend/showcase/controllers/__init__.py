# Controllers package initialization
# Each module exposes one Blueprint registered by showcase.main.create_app

from .health_controller import health_bp
from .order_controller import order_bp
from .product_controller import product_bp
from .task_controller import task_bp

__all__ = ["health_bp", "order_bp", "product_bp", "task_bp"]
