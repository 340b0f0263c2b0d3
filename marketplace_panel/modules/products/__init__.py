# marketplace_panel/modules/products/__init__.py
from .service import ProductService

__all__ = ["ProductService"]
