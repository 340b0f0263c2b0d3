# marketplace_panel/modules/buyers/__init__.py
from .service import BuyerService

__all__ = ["BuyerService"]
