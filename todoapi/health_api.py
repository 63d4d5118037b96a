from __future__ import annotations

import time
from datetime import UTC, datetime

from flask import Blueprint, current_app, url_for

from .api_types import HealthResponse, WelcomeResponse
from .models import isoformat_utc

bp = Blueprint("health_api", __name__)

_PROCESS_STARTED = time.monotonic()


@bp.get("/")
def welcome() -> tuple[WelcomeResponse, int]:
    base = current_app.config.get("PUBLIC_BASE_URL", "").rstrip("/")
    return {
        "message": "🚀 Bem-vindo à API To-Do List",
        "version": current_app.config.get("API_VERSION", "1.0.0"),
        "docs": f"{base}{url_for('openapi_ui.docs_index')}",
    }, 200


@bp.get("/health")
def health() -> tuple[HealthResponse, int]:
    # Liveness only; the store is in-process so there is nothing else to probe
    return {
        "status": "ok",
        "uptime": round(time.monotonic() - _PROCESS_STARTED, 3),
        "timestamp": isoformat_utc(datetime.now(UTC)),
    }, 200
