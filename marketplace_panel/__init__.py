# marketplace_panel/__init__.py
"""
Cliente del panel de administración del marketplace (admin / seller / courier)

- core/: sesión, pipeline HTTP con reintentos, clasificador de errores
- modules/: namespaces por entidad y flujo de entregas del corredor
- dashboard.py: composición de todo lo anterior
"""

from .core.client import ApiClient
from .core.errors import ApiError, ErrorKind, NormalizedError
from .core.session import SessionContext
from .dashboard import Dashboard

__all__ = [
    "ApiClient",
    "ApiError",
    "Dashboard",
    "ErrorKind",
    "NormalizedError",
    "SessionContext"
]
