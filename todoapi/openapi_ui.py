from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, current_app

from .openapi import build_openapi_spec

bp = Blueprint("openapi_ui", __name__)

HTML = """<!doctype html>
<html>
  <head>
    <meta charset=\"utf-8\">
    <title>To-Do List API Docs</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">
    <link rel=\"stylesheet\" href=\"https://unpkg.com/swagger-ui-dist@5/swagger-ui.css\">
    <style>body { margin:0;} .topbar { display:none; }</style>
  </head>
  <body>
    <div id=\"swagger\"></div>
    <script src=\"https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js\"></script>
    <script>
      window.ui = SwaggerUIBundle({
        url: '/openapi.json',
        dom_id: '#swagger',
        deepLinking: true,
        presets: [SwaggerUIBundle.presets.apis],
      });
    </script>
  </body>
</html>"""


@bp.get("/openapi.json")
def openapi_spec() -> dict[str, Any]:
    cfg = current_app.config
    return build_openapi_spec(
        title=cfg.get("API_TITLE", "To-Do List API"),
        version=cfg.get("API_VERSION", "1.0.0"),
        server_url=cfg.get("PUBLIC_BASE_URL", "http://localhost:3000"),
    )


@bp.get("/api-docs/")
def docs_index() -> Response:
    return Response(HTML, mimetype="text/html")
