# marketplace_panel/modules/sellers/__init__.py
from .service import SellerService

__all__ = ["SellerService"]
