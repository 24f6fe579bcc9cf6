"""CLI entrypoints for Faleproxy."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from faleproxy import __version__
from faleproxy.config import Settings, load_settings
from faleproxy.errors import FetchError, InvalidUrlError
from faleproxy.logging import configure_logging, get_logger
from faleproxy.orchestrator.runner import run_pipeline
from faleproxy.tools.page_fetcher import PageFetcher

app = typer.Typer(add_completion=False, help="Fetch a page and rewrite Yale into Fale")
logger = get_logger(__name__)


def build_fetcher(settings: Settings) -> PageFetcher:
    """Create the fetcher used by CLI commands."""

    return PageFetcher(settings)


@app.command()
def fetch(
    url: str = typer.Argument(..., help="Absolute http(s) URL of the page to transform."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the output to a file"),
) -> None:
    """Fetch URL, apply the substitution and print the transformed content."""

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("CLI fetch requested")

    try:
        result = asyncio.run(run_pipeline(url, settings=settings, fetcher=build_fetcher(settings)))
    except InvalidUrlError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e
    except FetchError as e:
        typer.echo(f"Failed to fetch content: {e}", err=True)
        raise typer.Exit(code=1) from e

    if as_json:
        text = json.dumps(result.model_dump(by_alias=True), ensure_ascii=False, indent=2)
    else:
        text = result.content

    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.echo(str(output))


@app.command()
def version() -> None:
    """Print the package version."""

    typer.echo(__version__)


if __name__ == "__main__":
    app()
