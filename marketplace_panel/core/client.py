# marketplace_panel/core/client.py
"""
Cliente de API

Compone el pipeline de peticiones con el clasificador de errores. Es la
frontera a partir de la cual solo existen ApiError normalizados.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from marketplace_panel.config.settings import Settings, settings as default_settings
from marketplace_panel.core.errors import UNEXPECTED_MESSAGE, ApiError, ErrorKind, NormalizedError, classify
from marketplace_panel.core.pipeline import (
    OnlineProbe, RequestDescriptor, RequestPipeline, SleepFn, TransportError, always_online
)
from marketplace_panel.core.session import SessionContext
from marketplace_panel.shared.schemas.common import ListResult, PaginationCursor

logger = logging.getLogger(__name__)

SessionListener = Callable[[NormalizedError], Any]


def clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Quitar filtros vacíos del query string"""
    return {k: v for k, v in (params or {}).items() if v is not None and v != ""}


class ApiClient:
    def __init__(
        self,
        session: Optional[SessionContext] = None,
        settings: Optional[Settings] = None,
        is_online: OnlineProbe = always_online,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: SleepFn = asyncio.sleep,
        listeners: Optional[List[SessionListener]] = None
    ):
        self.session = session if session is not None else SessionContext()
        self.settings = settings or default_settings
        self.pipeline = RequestPipeline(
            self.session,
            settings=self.settings,
            is_online=is_online,
            transport=transport,
            sleep=sleep
        )
        self.listeners: List[SessionListener] = list(listeners or [])

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def add_session_listener(self, listener: SessionListener) -> None:
        self.listeners.append(listener)

    def _handle_failure(self, failure: TransportError) -> ApiError:
        error = classify(failure)

        if error.is_big_error:
            logger.error(f"❌ {failure.descriptor.method} {failure.descriptor.path}: {error.message} (code {error.code})")
        else:
            logger.warning(f"⚠️ {failure.descriptor.method} {failure.descriptor.path}: {error.message} (code {error.code})")

        if error.session_invalidated:
            self.session.clear()
            for listener in self.listeners:
                listener(error)

        return ApiError(error)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None
    ) -> Any:
        """Enviar petición y devolver el JSON del servidor tal cual"""
        descriptor = RequestDescriptor(method=method.upper(), path=path, params=clean_params(params) or None, json=json)

        try:
            response = await self.pipeline.send(descriptor)
        except TransportError as failure:
            raise self._handle_failure(failure) from None

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ApiError.build(UNEXPECTED_MESSAGE, 500, ErrorKind.UNKNOWN, original_error=e) from None

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def get_list(
        self,
        path: str,
        resource: str,
        page: int = 1,
        limit: Optional[int] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> ListResult:
        """
        Listado paginado

        Valida la forma {success, data: [...], pagination: {total}} y
        devuelve los datos junto con el cursor reportado por el servidor.
        """
        limit = limit or self.settings.page_size
        query = {"page": page, "limit": limit}
        query.update(params or {})

        body = await self.get(path, params=query)

        if not isinstance(body, dict) or not body.get("success") or not isinstance(body.get("data"), list):
            logger.error(f"❌ Respuesta inválida para {resource}: {str(body)[:200]}")
            raise ApiError.build(f"Invalid {resource} data received.", 500, ErrorKind.UNKNOWN, original_error=body)

        data = body["data"]
        pagination = body.get("pagination") or {}
        total = pagination.get("total") if isinstance(pagination, dict) else None

        return ListResult(
            data=data,
            pagination=PaginationCursor(page=page, limit=limit, total=total if isinstance(total, int) else len(data)),
            raw=body
        )
