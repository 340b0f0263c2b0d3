# marketplace_panel/core/session.py
"""
Contexto de sesión del cliente

Guarda el token bearer activo y el perfil de usuario cacheado bajo claves
fijas en un almacenamiento clave-valor (equivalente al localStorage del
navegador). Es el único punto de escritura de la credencial.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class KeyValueStorage:
    """Interfaz mínima de almacenamiento clave-valor"""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """Almacenamiento en memoria, vive lo que vive el proceso"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """Almacenamiento persistido en un archivo JSON"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning(f"⚠️ Archivo de sesión corrupto, se ignora: {self.path}")
            return {}

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class SessionContext:
    """Sesión activa del cliente (una credencial como máximo)"""

    def __init__(self, storage: Optional[KeyValueStorage] = None):
        self.storage = storage if storage is not None else MemoryStorage()

    @property
    def token(self) -> Optional[str]:
        return self.storage.get(TOKEN_KEY) or None

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self.storage.get(USER_KEY)

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def role(self) -> Optional[str]:
        user = self.user or {}
        return user.get("role")

    def start(self, token: str, user: Optional[Dict[str, Any]] = None) -> None:
        """Registrar credencial y perfil tras un login exitoso"""
        if not token:
            raise ValueError("El token de sesión no puede estar vacío")

        self.storage.set(TOKEN_KEY, token)
        if user is not None:
            self.storage.set(USER_KEY, user)
        else:
            self.storage.remove(USER_KEY)
        logger.info(f"🔐 Sesión iniciada - rol: {self.role or 'desconocido'}")

    def clear(self) -> None:
        """Eliminar token y perfil juntos"""
        had_session = self.is_authenticated
        self.storage.remove(TOKEN_KEY)
        self.storage.remove(USER_KEY)
        if had_session:
            logger.info("🔓 Sesión eliminada")
