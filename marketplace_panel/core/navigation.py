# marketplace_panel/core/navigation.py
"""
Colaborador de navegación

El cliente solo marca el error con session_invalidated; la decisión de
redirigir al login la toma este guardián, registrado explícitamente.
"""

import logging
from typing import List, Optional

from marketplace_panel.config.settings import settings
from marketplace_panel.core.errors import NormalizedError

logger = logging.getLogger(__name__)


class Navigator:
    """Interfaz del enrutador de la UI"""

    @property
    def current_path(self) -> str:
        raise NotImplementedError

    def navigate(self, path: str) -> None:
        raise NotImplementedError


class MemoryNavigator(Navigator):
    """Enrutador en memoria que conserva el historial"""

    def __init__(self, initial_path: str = "/"):
        self.history: List[str] = [initial_path]

    @property
    def current_path(self) -> str:
        return self.history[-1]

    def navigate(self, path: str) -> None:
        self.history.append(path)


class SessionGuard:
    """Redirige al login cuando la sesión fue invalidada"""

    def __init__(self, navigator: Navigator, login_path: Optional[str] = None):
        self.navigator = navigator
        self.login_path = login_path or settings.login_path

    def __call__(self, error: NormalizedError) -> bool:
        return self.handle(error)

    def handle(self, error: NormalizedError) -> bool:
        if not error.session_invalidated:
            return False

        if self.navigator.current_path == self.login_path:
            return False

        logger.info(f"↪️ Sesión invalidada, redirigiendo a {self.login_path}")
        self.navigator.navigate(self.login_path)
        return True
