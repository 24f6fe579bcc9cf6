"""Uvicorn server launcher.

Console scripts must point to a callable, not an ASGI app object.
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
import uvicorn

from faleproxy.config import load_settings


def main(
    host: Annotated[Optional[str], typer.Option(help="Bind host (default: FALEPROXY_API_HOST)")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port (default: FALEPROXY_API_PORT)")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload (dev)")] = False,
) -> None:
    """Start the Faleproxy API server."""

    settings = load_settings()
    uvicorn.run(
        "faleproxy.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    typer.run(main)


if __name__ == "__main__":
    run()
