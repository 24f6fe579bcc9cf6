"""Shared fixtures: settings and an in-memory HTTP transport."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from faleproxy.config import Settings
from faleproxy.tools.page_fetcher import PageFetcher

SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="description" content="Yale University page">
</head>
<body>
  <p>Welcome to Yale University</p>
  <a href="https://www.yale.edu/about">About Yale</a>
  <img src="https://www.yale.edu/logo.png" alt="Yale logo">
</body>
</html>
"""


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_fetcher(settings: Settings) -> Callable[..., tuple[PageFetcher, RecordingTransport]]:
    """Build a fetcher whose network is ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[PageFetcher, RecordingTransport]:
        transport = RecordingTransport(handler)
        return PageFetcher(settings, transport=transport), transport

    return _make


def html_response(body: str, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, html=body)

    return _handler
