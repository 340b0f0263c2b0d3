# marketplace_panel/core/pipeline.py
"""
Pipeline de peticiones HTTP

Adjunta la credencial, aplica el timeout por intento y reintenta de forma
transparente cuando el fallo califica (status >= 500, cliente sin conexión o
timeout). No inspecciona ni reescribe el cuerpo de las respuestas.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from marketplace_panel.config.settings import Settings, settings as default_settings
from marketplace_panel.core.session import SessionContext

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]
OnlineProbe = Callable[[], bool]


def always_online() -> bool:
    return True


@dataclass
class RequestDescriptor:
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


class TransportError(Exception):
    """Fallo terminal de una cadena de peticiones (tras agotar reintentos)"""

    def __init__(
        self,
        descriptor: RequestDescriptor,
        response: Optional[httpx.Response] = None,
        cause: Optional[BaseException] = None,
        offline: bool = False,
        timed_out: bool = False,
        attempts: int = 1
    ):
        self.descriptor = descriptor
        self.response = response
        self.cause = cause
        self.offline = offline
        self.timed_out = timed_out
        self.attempts = attempts

        if response is not None:
            detail = f"status {response.status_code}"
        elif offline:
            detail = "offline"
        elif timed_out:
            detail = "timeout"
        else:
            detail = repr(cause)
        super().__init__(f"{descriptor.method} {descriptor.path} falló ({detail}) tras {attempts} intento(s)")

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def retryable(self) -> bool:
        return self.offline or self.timed_out or (self.status_code or 0) >= 500


class RequestPipeline:
    """Envío de peticiones con autenticación, timeout y reintentos lineales"""

    def __init__(
        self,
        session: SessionContext,
        settings: Optional[Settings] = None,
        is_online: OnlineProbe = always_online,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: SleepFn = asyncio.sleep
    ):
        self.session = session
        self.settings = settings or default_settings
        self.is_online = is_online
        self.transport = transport
        self.sleep = sleep

    def _get_headers(self) -> Dict[str, str]:
        """Headers comunes; Authorization solo si hay credencial"""
        headers = {"Content-Type": "application/json"}
        token = self.session.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def retry_delay(self, attempt: int) -> float:
        """Backoff lineal: 1s, 2s, 3s..."""
        return attempt * self.settings.retry_delay

    async def _attempt(self, client: httpx.AsyncClient, descriptor: RequestDescriptor, attempt: int) -> httpx.Response:
        if not self.is_online():
            raise TransportError(descriptor, offline=True, attempts=attempt)

        headers = self._get_headers()
        headers.update(descriptor.headers)

        try:
            response = await client.request(
                descriptor.method,
                descriptor.path,
                params=descriptor.params,
                json=descriptor.json,
                headers=headers
            )
        except httpx.TimeoutException as e:
            raise TransportError(descriptor, cause=e, timed_out=True, attempts=attempt)
        except httpx.ConnectError as e:
            # La petición nunca salió: equivale a navegador offline
            raise TransportError(descriptor, cause=e, offline=True, attempts=attempt)
        except httpx.HTTPError as e:
            raise TransportError(descriptor, cause=e, attempts=attempt)

        if response.is_error:
            raise TransportError(descriptor, response=response, attempts=attempt)

        return response

    async def send(self, descriptor: RequestDescriptor) -> httpx.Response:
        """
        Enviar una petición; devuelve la respuesta exitosa o lanza
        TransportError con el último fallo
        """
        max_retries = self.settings.max_retries
        attempt = 0

        async with httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=httpx.Timeout(self.settings.request_timeout),
            transport=self.transport
        ) as client:
            while True:
                attempt += 1
                try:
                    response = await self._attempt(client, descriptor, attempt)
                    if attempt > 1:
                        logger.info(f"✅ {descriptor.method} {descriptor.path} exitoso en intento {attempt}")
                    return response
                except TransportError as failure:
                    retries_done = attempt - 1
                    if not failure.retryable or retries_done >= max_retries:
                        raise

                    delay = self.retry_delay(attempt)
                    logger.warning(
                        f"🔁 Reintento {attempt}/{max_retries} de {descriptor.method} {descriptor.path} "
                        f"en {delay:.1f}s ({failure})"
                    )
                    await self.sleep(delay)
