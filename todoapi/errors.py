"""Domain outcome values + JSON error handler registration.

Store operations do not raise for expected failures. They return an outcome:
``Ok`` wraps the result, ``ValidationError`` and ``NotFoundError`` describe why
the operation was refused. Each failure carries a ``kind`` that the HTTP
boundary maps to a status code; ``internal`` is reserved for the catch-all
handler registered here and is never produced by the store.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeVar

from flask import request
from werkzeug.exceptions import HTTPException, MethodNotAllowed
from werkzeug.wrappers.response import Response

from .http_errors import error_response, internal_server_error, too_many_requests
from .rate_limiter import RateLimitError

T = TypeVar("T")

ErrorKind = Literal["bad_request", "not_found", "internal"]

TITLE_RULE_MESSAGE = "O campo Title deve ser preenchido e deve conter mais do que 3 caracteres"
TASK_NOT_FOUND_MESSAGE = "Tarefa não encontrada"

STATUS_BY_KIND: dict[ErrorKind, int] = {
    "bad_request": 400,
    "not_found": 404,
    "internal": 500,
}


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Client input violates a field constraint."""

    message: str = TITLE_RULE_MESSAGE
    kind: ClassVar[ErrorKind] = "bad_request"


@dataclass(frozen=True, slots=True)
class NotFoundError:
    """Referenced task id does not exist (or was deleted)."""

    message: str = TASK_NOT_FOUND_MESSAGE
    kind: ClassVar[ErrorKind] = "not_found"


Failure = ValidationError | NotFoundError
Outcome = Ok[T] | ValidationError | NotFoundError


def status_for(failure: Failure) -> int:
    return STATUS_BY_KIND[failure.kind]


def failure_response(failure: Failure) -> Response:
    return error_response(status_for(failure), failure.message)


def register_error_handlers(app: Any) -> None:
    @app.errorhandler(RateLimitError)
    def _h_rate_limit(ex: RateLimitError) -> Response:
        app.logger.warning(
            "Rate limit exceeded key=%s path=%s retry_after=%s", ex.key, request.path, ex.retry_after
        )
        return too_many_requests(str(ex), retry_after=ex.retry_after)

    @app.errorhandler(HTTPException)
    def _h_http(ex: HTTPException) -> Response:
        status = ex.code or 500
        if status >= 500:
            app.logger.error("HTTP %s on %s", status, request.path)
            return internal_server_error()
        resp = error_response(status, ex.name)
        if isinstance(ex, MethodNotAllowed) and ex.valid_methods:
            resp.headers["Allow"] = ", ".join(sorted(ex.valid_methods))
        return resp

    @app.errorhandler(Exception)
    def _h_exception(ex: Exception) -> Response:
        app.logger.exception("Unhandled exception method=%s path=%s", request.method, request.path)
        return internal_server_error()


__all__ = [
    "ErrorKind",
    "TITLE_RULE_MESSAGE",
    "TASK_NOT_FOUND_MESSAGE",
    "STATUS_BY_KIND",
    "Ok",
    "ValidationError",
    "NotFoundError",
    "Failure",
    "Outcome",
    "status_for",
    "failure_response",
    "register_error_handlers",
]
