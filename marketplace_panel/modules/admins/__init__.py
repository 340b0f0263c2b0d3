# marketplace_panel/modules/admins/__init__.py
from .service import AdminService

__all__ = ["AdminService"]
