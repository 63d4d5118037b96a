"""Request logging.

One structured dict per request on the ``todoapi.requests`` logger, plus a
level for the package loggers taken from config.
"""

from __future__ import annotations

import logging
import time
import uuid

from flask import Flask, g, request
from werkzeug.wrappers.response import Response

REQUEST_LOGGER = "todoapi.requests"


def resolve_level(level: object, default: str = "INFO") -> str:
    name = str(level or "").strip().upper()
    return name if name in logging.getLevelNamesMapping() else default


def install_request_logger(level: str = "INFO") -> logging.Logger:
    level = resolve_level(level)
    log = logging.getLogger(REQUEST_LOGGER)
    # Avoid duplicate attachment when several apps are created in one process
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(h)
    log.setLevel(level)
    logging.getLogger("todoapi").setLevel(level)
    return log


def init_request_logging(app: Flask, level: str = "INFO") -> None:
    log = install_request_logger(level)

    @app.before_request
    def _log_before_request() -> None:
        g._t0 = time.perf_counter()
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())

    @app.after_request
    def _log_after_request(resp: Response) -> Response:
        dur_ms = int((time.perf_counter() - getattr(g, "_t0", time.perf_counter())) * 1000)
        rid = getattr(g, "request_id", None) or str(uuid.uuid4())
        resp.headers["X-Request-Id"] = rid
        resp.headers["X-Request-Duration-ms"] = str(dur_ms)
        log.info(
            {
                "request_id": rid,
                "method": request.method,
                "path": request.path,
                "status": resp.status_code,
                "duration_ms": dur_ms,
                "remote_addr": request.remote_addr,
            }
        )
        return resp


__all__ = ["REQUEST_LOGGER", "resolve_level", "install_request_logger", "init_request_logging"]
