# marketplace_panel/modules/couriers/__init__.py
from .service import CourierAdminService

__all__ = ["CourierAdminService"]
