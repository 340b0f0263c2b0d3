# marketplace_panel/modules/orders/__init__.py
from .service import OrderService

__all__ = ["OrderService"]
