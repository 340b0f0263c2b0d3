# marketplace_panel/modules/categories/__init__.py
from .service import CategoryService

__all__ = ["CategoryService"]
