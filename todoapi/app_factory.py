"""Flask application factory.

Provides:
 - App factory with configuration override
 - Task store injection (one in-memory store per app unless one is passed in)
 - Unified JSON error schema {message, statusCode}
 - Request id / timing / structured request log
 - Security headers + CORS allow-list
 - Global per-client rate limit
 - Blueprint registration (tasks, health, docs)
"""

from __future__ import annotations

from typing import Any

from flask import Flask

from .config import Config
from .errors import register_error_handlers
from .health_api import bp as health_bp
from .logging_setup import init_request_logging
from .openapi_ui import bp as openapi_ui_bp
from .rate_limit import init_rate_limit
from .rate_limiter import build_rate_limiter
from .security import init_security
from .task_store import TaskStore
from .tasks_api import bp as tasks_bp


def create_app(config_override: dict[str, Any] | None = None, store: TaskStore | None = None) -> Flask:
    app = Flask(__name__)

    # --- Configuration ---
    cfg = Config.from_env()
    if config_override:
        known = {k: v for k, v in config_override.items() if hasattr(cfg, k)}
        if known:
            cfg.override(known)
    app.config.update(cfg.to_flask_dict())
    if config_override:
        for k, v in config_override.items():  # also allow direct Flask config keys
            if k.isupper():
                app.config[k] = v
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    app.json.sort_keys = False  # type: ignore[attr-defined]

    # --- Middleware (before_request hooks run in registration order) ---
    init_request_logging(app, level=cfg.log_level)
    init_security(app)
    limiter = build_rate_limiter(cfg.rate_limit_backend)
    init_rate_limit(app, limiter)
    app.logger.info(
        "Rate limiter initialized backend=%s quota=%s window=%ss",
        cfg.rate_limit_backend,
        cfg.rate_limit_quota,
        cfg.rate_limit_window_seconds,
    )

    # --- Error handling ---
    register_error_handlers(app)

    # --- Domain store ---
    app.extensions["task_store"] = store if store is not None else TaskStore(base_url=cfg.public_base_url)

    # --- Register blueprints ---
    app.register_blueprint(tasks_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(openapi_ui_bp)

    return app


__all__ = ["create_app"]
