"""FastAPI app exposing the pipeline as ``POST /fetch``."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from faleproxy.config import Settings, load_settings
from faleproxy.errors import FetchError, InvalidUrlError
from faleproxy.logging import configure_logging, get_logger
from faleproxy.orchestrator.runner import Pipeline
from faleproxy.tools.page_fetcher import PageFetcher


class FetchBody(BaseModel):
    """Fetch request body."""

    url: str | None = None


def create_app(settings: Settings | None = None, *, fetcher: PageFetcher | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)
    pipeline = Pipeline.from_settings(settings, fetcher=fetcher)

    app = FastAPI(title="Faleproxy", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/fetch", response_model=None)
    async def fetch(body: FetchBody) -> Any:
        if not body.url or not body.url.strip():
            return JSONResponse(status_code=400, content={"error": "URL is required"})

        logger.info("API fetch requested", extra={"url": body.url})
        try:
            result = await pipeline.run(body.url)
        except InvalidUrlError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except FetchError as e:
            logger.error("Error fetching URL: %s", e)
            return JSONResponse(status_code=500, content={"error": f"Failed to fetch content: {e}"})
        return result.model_dump(by_alias=True)

    return app
