"""Typed RateLimiter Protocol (allow/retry_after) and a factory selecting a backend by name."""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

RATE_LIMIT_MESSAGE = "Muitas requisições, tente novamente mais tarde."


class RateLimitError(Exception):
    """Raised when a client exceeds the configured rate limit.

    Attributes:
        retry_after: Seconds until next permitted attempt.
        key: Limiter key that was exhausted (client address based).
    """

    def __init__(self, message: str, retry_after: int, key: str | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after
        self.key = key


@runtime_checkable
class RateLimiter(Protocol):
    def allow(self, key: str, quota: int, per_seconds: int) -> bool: ...  # pragma: no cover
    def retry_after(self, key: str, per_seconds: int) -> int: ...  # pragma: no cover


class NoopRateLimiter:
    """Never limits; selected with RATE_LIMIT_BACKEND=noop."""

    def allow(self, key: str, quota: int, per_seconds: int) -> bool:
        return True

    def retry_after(self, key: str, per_seconds: int) -> int:
        return 0


class BackendInitError(Exception):
    pass


def build_rate_limiter(backend: str) -> RateLimiter:
    name = (backend or "").strip().lower()
    if name == "memory":  # in-process fixed window, single worker
        from .rate_limiter_memory import MemoryRateLimiter

        return MemoryRateLimiter()
    if name == "noop":
        return NoopRateLimiter()
    raise BackendInitError(f"unknown rate limit backend '{backend}'")


def window_start(epoch: float | None = None, size: int = 60) -> int:
    """Return the epoch second representing the window bucket start."""
    e = int(epoch if epoch is not None else time.time())
    return e - (e % size)


__all__ = [
    "RATE_LIMIT_MESSAGE",
    "RateLimiter",
    "RateLimitError",
    "NoopRateLimiter",
    "BackendInitError",
    "build_rate_limiter",
    "window_start",
]
