from __future__ import annotations

import os
from dataclasses import dataclass, field

from .logging_setup import resolve_level


@dataclass
class Config:
    public_base_url: str = "http://localhost:3000"  # prefix for meta.location
    cors_allowed_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])
    rate_limit_backend: str = "memory"  # memory | noop
    rate_limit_quota: int = 100
    rate_limit_window_seconds: int = 900  # 15 minutes
    log_level: str = "INFO"
    api_title: str = "To-Do List API"
    api_version: str = "1.0.0"

    @classmethod
    def from_env(cls) -> Config:
        cors = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")
        return cls(
            public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:3000").rstrip("/"),
            cors_allowed_origins=[o for o in [c.strip() for c in cors.split(",")] if o],
            rate_limit_backend=os.getenv("RATE_LIMIT_BACKEND", "memory").strip().lower() or "memory",
            rate_limit_quota=int(os.getenv("RATE_LIMIT_QUOTA", "100")),
            rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")),
            log_level=resolve_level(os.getenv("LOG_LEVEL", "INFO")),
        )

    def override(self, d: dict):
        for k, v in d.items():
            if hasattr(self, k):
                setattr(self, k, v)

    def to_flask_dict(self):
        return {
            "PUBLIC_BASE_URL": self.public_base_url,
            "CORS_ALLOWED_ORIGINS": self.cors_allowed_origins,
            "RATE_LIMIT_BACKEND": self.rate_limit_backend,
            "RATE_LIMIT_QUOTA": self.rate_limit_quota,
            "RATE_LIMIT_WINDOW_SECONDS": self.rate_limit_window_seconds,
            "LOG_LEVEL": self.log_level,
            "API_TITLE": self.api_title,
            "API_VERSION": self.api_version,
        }
