from __future__ import annotations

from dotenv import load_dotenv

from todoapi.app_factory import create_app

load_dotenv()

# Expose a module-level WSGI application for Gunicorn
app = create_app()
