"""
Pruebas del clasificador: tabla de políticas, primera coincidencia gana.
"""

import httpx
import pytest

from marketplace_panel.core.errors import ApiError, ErrorKind, classify
from marketplace_panel.core.pipeline import RequestDescriptor, TransportError

DESCRIPTOR = RequestDescriptor(method="GET", path="/admin/admins")


def failure_for(status, body=None, content=None):
    request = httpx.Request("GET", "http://testserver/api/admin/admins")
    if content is not None:
        response = httpx.Response(status, content=content, request=request)
    else:
        response = httpx.Response(status, json=body if body is not None else {}, request=request)
    return TransportError(DESCRIPTOR, response=response)


@pytest.mark.parametrize(
    "status,body,message,code,big,kind",
    [
        (400, {}, "Bad request. Something went wrong with the system.", 400, True, ErrorKind.MALFORMED_REQUEST),
        (400, {"message": "Email is required"}, "Email is required", 400, False, ErrorKind.VALIDATION_FAILURE),
        (500, {"message": "db down"}, "Internal server error. Please try again later.", 500, True, ErrorKind.SERVER_FAULT),
        (401, {}, "Session expired. Please log in again.", 401, False, ErrorKind.UNAUTHORIZED),
        (401, {"message": "Token expired"}, "Token expired", 401, False, ErrorKind.UNAUTHORIZED),
        (403, {}, "Access denied. Insufficient permissions.", 403, False, ErrorKind.FORBIDDEN),
        (404, {"message": "Order not found"}, "Order not found", 404, False, ErrorKind.NOT_FOUND),
        (404, {}, "Resource not found.", 404, False, ErrorKind.NOT_FOUND),
        (409, {}, "Resource conflict.", 409, False, ErrorKind.CONFLICT),
        (422, {"message": "ignored"}, "An unexpected error occurred", 500, False, ErrorKind.UNKNOWN),
        (503, {}, "An unexpected error occurred", 500, False, ErrorKind.SERVER_FAULT),
    ],
)
def test_policy_table(status, body, message, code, big, kind):
    error = classify(failure_for(status, body))

    assert error.message == message
    assert error.code == code
    assert error.is_big_error is big
    assert error.kind == kind


def test_offline_wins_over_everything():
    failure = TransportError(DESCRIPTOR, offline=True, attempts=4)

    error = classify(failure)

    assert error.code == 0
    assert error.is_big_error is True
    assert error.message.startswith("No internet connection")
    assert error.original_error is failure


def test_only_unauthorized_invalidates_session():
    assert classify(failure_for(401)).session_invalidated is True
    for status in (400, 403, 404, 409, 500):
        assert classify(failure_for(status)).session_invalidated is False


def test_non_json_body_has_no_server_message():
    error = classify(failure_for(400, content=b"<html>Bad Request</html>"))

    assert error.kind == ErrorKind.MALFORMED_REQUEST
    assert error.is_big_error is True


def test_blank_server_message_is_ignored():
    error = classify(failure_for(403, {"message": "   "}))

    assert error.message == "Access denied. Insufficient permissions."


def test_api_error_exposes_normalized_fields():
    exc = ApiError(classify(failure_for(409, {"message": "Email already in use"})))

    assert str(exc) == "Email already in use"
    assert exc.code == 409
    assert exc.kind == ErrorKind.CONFLICT
    assert exc.error.model_dump() == {
        "message": "Email already in use",
        "code": 409,
        "is_big_error": False,
        "kind": ErrorKind.CONFLICT,
        "session_invalidated": False,
    }
