"""ASGI entrypoint used by uvicorn."""

from __future__ import annotations

from faleproxy.api.app import create_app

app = create_app()
