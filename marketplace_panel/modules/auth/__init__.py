# marketplace_panel/modules/auth/__init__.py
from .service import AuthService

__all__ = ["AuthService"]
