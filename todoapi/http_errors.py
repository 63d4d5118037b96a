"""Shared JSON error helpers for consistent ``{message, statusCode}`` responses."""
from __future__ import annotations

from flask import g, jsonify
from werkzeug.wrappers.response import Response

from .api_types import ErrorBody


def error_response(status: int, message: str) -> Response:
    payload: ErrorBody = {"message": message, "statusCode": status}
    resp = jsonify(payload)
    resp.status_code = status
    # Always echo request id header when available
    rid = getattr(g, "request_id", None)
    if rid and "X-Request-Id" not in resp.headers:
        resp.headers["X-Request-Id"] = rid
    return resp


def too_many_requests(message: str, retry_after: int | None = None) -> Response:
    resp = error_response(429, message)
    if retry_after is not None:
        resp.headers["Retry-After"] = str(max(0, int(retry_after)))
    return resp


def internal_server_error() -> Response:
    # Never carries exception detail
    return error_response(500, "Internal Server Error")


__all__ = [
    "error_response",
    "too_many_requests",
    "internal_server_error",
]
