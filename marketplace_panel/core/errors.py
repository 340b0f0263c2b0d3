# marketplace_panel/core/errors.py
"""
Clasificador de errores

Convierte cualquier fallo terminal del pipeline en un único error
normalizado. Ningún consumidor aguas arriba inspecciona excepciones de httpx.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from marketplace_panel.core.pipeline import TransportError


class ErrorKind(str, Enum):
    """Taxonomía de errores del cliente"""
    NETWORK_UNAVAILABLE = "network_unavailable"
    SERVER_FAULT = "server_fault"
    MALFORMED_REQUEST = "malformed_request"
    VALIDATION_FAILURE = "validation_failure"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNKNOWN = "unknown"


OFFLINE_MESSAGE = "No internet connection. Please check your network."
BAD_REQUEST_MESSAGE = "Bad request. Something went wrong with the system."
SERVER_ERROR_MESSAGE = "Internal server error. Please try again later."
INVALID_REQUEST_MESSAGE = "Invalid request. Please check your input."
UNEXPECTED_MESSAGE = "An unexpected error occurred"

DEFAULT_MESSAGES = {
    401: "Session expired. Please log in again.",
    403: "Access denied. Insufficient permissions.",
    404: "Resource not found.",
    409: "Resource conflict.",
}

STATUS_KINDS = {
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
}


class NormalizedError(BaseModel):
    message: str
    code: int
    is_big_error: bool = False
    kind: ErrorKind = ErrorKind.UNKNOWN
    session_invalidated: bool = False
    original_error: Optional[Any] = Field(default=None, exclude=True)

    class Config:
        arbitrary_types_allowed = True


class ApiError(Exception):
    """Excepción estructurada que reciben todos los consumidores"""

    def __init__(self, error: NormalizedError):
        super().__init__(error.message)
        self.error = error

    @classmethod
    def build(
        cls,
        message: str,
        code: int,
        kind: ErrorKind,
        is_big_error: bool = False,
        original_error: Any = None
    ) -> "ApiError":
        return cls(NormalizedError(
            message=message,
            code=code,
            kind=kind,
            is_big_error=is_big_error,
            original_error=original_error
        ))

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def is_big_error(self) -> bool:
        return self.error.is_big_error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def session_invalidated(self) -> bool:
        return self.error.session_invalidated

    def __repr__(self) -> str:
        return f"ApiError(code={self.code}, kind={self.kind.value}, message={self.message!r})"


def server_message(failure: TransportError) -> Optional[str]:
    """Mensaje de negocio enviado por el servidor, si existe"""
    if failure.response is None:
        return None
    try:
        body = failure.response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


def classify(failure: TransportError) -> NormalizedError:
    """Tabla de clasificación; la primera coincidencia gana"""
    status = failure.status_code
    message = server_message(failure)

    def normalized(text: str, code: int, kind: ErrorKind, big: bool = False, invalidated: bool = False):
        return NormalizedError(
            message=text,
            code=code,
            is_big_error=big,
            kind=kind,
            session_invalidated=invalidated,
            original_error=failure
        )

    if failure.offline:
        return normalized(OFFLINE_MESSAGE, 0, ErrorKind.NETWORK_UNAVAILABLE, big=True)

    if status == 400 and message is None:
        return normalized(BAD_REQUEST_MESSAGE, 400, ErrorKind.MALFORMED_REQUEST, big=True)

    if status == 500:
        return normalized(SERVER_ERROR_MESSAGE, 500, ErrorKind.SERVER_FAULT, big=True)

    if status == 400:
        return normalized(message or INVALID_REQUEST_MESSAGE, 400, ErrorKind.VALIDATION_FAILURE)

    if status in STATUS_KINDS:
        return normalized(
            message or DEFAULT_MESSAGES[status],
            status,
            STATUS_KINDS[status],
            invalidated=status == 401
        )

    kind = ErrorKind.SERVER_FAULT if (status or 0) >= 500 else ErrorKind.UNKNOWN
    return normalized(UNEXPECTED_MESSAGE, 500, kind)
