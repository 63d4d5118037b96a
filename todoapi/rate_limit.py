"""Global HTTP rate limiting hook.

Every request (except CORS preflight) counts against a fixed window keyed by
the client address. Quota and window come from app config; the backend
instance is stored in ``app.extensions["rate_limiter"]``.
"""
from __future__ import annotations

from flask import Flask, request

from .rate_limiter import RATE_LIMIT_MESSAGE, RateLimiter, RateLimitError


def client_key() -> str:
    return f"global:{request.remote_addr or 'unknown'}"


def init_rate_limit(app: Flask, limiter: RateLimiter) -> None:
    app.extensions["rate_limiter"] = limiter

    @app.before_request
    def _rate_limit_before_request() -> None:
        if request.method == "OPTIONS":
            return None
        quota = int(app.config.get("RATE_LIMIT_QUOTA", 100))
        per = int(app.config.get("RATE_LIMIT_WINDOW_SECONDS", 900))
        key = client_key()
        if not limiter.allow(key, quota=quota, per_seconds=per):
            raise RateLimitError(
                RATE_LIMIT_MESSAGE,
                retry_after=limiter.retry_after(key, per_seconds=per),
                key=key,
            )
        return None


__all__ = ["client_key", "init_rate_limit"]
