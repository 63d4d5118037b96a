"""Security middleware.

Features:
 - Security headers (nosniff, frame options, referrer policy, CSP, HSTS, ...).
 - CORS allow-list with a fixed method/header policy.
 - Preflight (OPTIONS) answered directly with 204.

The API has no sessions or cookies, so there is no CSRF layer.
"""

from __future__ import annotations

from flask import Flask, make_response, request
from werkzeug.wrappers.response import Response

CORS_ALLOWED_METHODS = "GET,POST,PUT,PATCH,DELETE"
CORS_ALLOWED_HEADERS = "Content-Type,Authorization"

DEFAULT_CSP = (
    "default-src 'self'; base-uri 'self'; object-src 'none'; frame-ancestors 'self'; "
    "img-src 'self' data:; style-src 'self' https: 'unsafe-inline'; script-src 'self'"
)
# Swagger UI assets come from the unpkg CDN and bootstrap from an inline script
DOCS_CSP = (
    "default-src 'self'; base-uri 'self'; object-src 'none'; frame-ancestors 'self'; "
    "img-src 'self' data: https://unpkg.com; style-src 'self' https://unpkg.com 'unsafe-inline'; "
    "script-src 'self' https://unpkg.com 'unsafe-inline'"
)
DOCS_PREFIX = "/api-docs"


def _origin_from_request() -> str | None:
    return request.headers.get("Origin")


def _apply_cors(app: Flask, resp: Response) -> Response:
    allowed: list[str] = app.config.get("CORS_ALLOWED_ORIGINS", []) or []
    origin = _origin_from_request()
    if not allowed or not origin:
        return resp
    resp.headers.add("Vary", "Origin")
    if origin in allowed or "*" in allowed:
        resp.headers["Access-Control-Allow-Origin"] = origin
        if request.method == "OPTIONS":
            resp.headers["Access-Control-Allow-Methods"] = CORS_ALLOWED_METHODS
            resp.headers["Access-Control-Allow-Headers"] = CORS_ALLOWED_HEADERS
    return resp


def _apply_security_headers(app: Flask, resp: Response) -> None:
    resp.headers.setdefault("X-Content-Type-Options", "nosniff")
    resp.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
    resp.headers.setdefault("Referrer-Policy", "no-referrer")
    resp.headers.setdefault("X-DNS-Prefetch-Control", "off")
    resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")
    resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
    resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
    if not app.config.get("TESTING") and not app.config.get("DEBUG"):
        resp.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
    csp = DOCS_CSP if request.path.startswith(DOCS_PREFIX) else DEFAULT_CSP
    resp.headers.setdefault("Content-Security-Policy", csp)


def init_security(app: Flask) -> Flask:
    @app.before_request
    def _security_before_request() -> Response | None:
        # Preflight never reaches the views
        if request.method == "OPTIONS":
            resp = make_response("", 204)
            return resp
        return None

    @app.after_request
    def _security_after_request(resp: Response) -> Response:
        _apply_security_headers(app, resp)
        # Apply CORS last
        return _apply_cors(app, resp)

    return app


__all__ = ["init_security", "CORS_ALLOWED_METHODS", "CORS_ALLOWED_HEADERS"]
