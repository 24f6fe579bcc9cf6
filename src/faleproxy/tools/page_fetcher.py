"""Page fetching utilities."""

from __future__ import annotations

import asyncio

import httpx

from faleproxy.config import Settings
from faleproxy.errors import FetchError, FetchTimeoutError, InvalidUrlError, UnsupportedContentError
from faleproxy.logging import get_logger
from faleproxy.models.document import FetchedDocument, FetchRequest

logger = get_logger(__name__)

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


class PageFetcher:
    """Fetch HTML pages over HTTP.

    A fresh client is opened for every call and closed on every exit path, so a fetcher can
    be shared between concurrent callers.
    """

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.http_timeout_s),
            headers={"User-Agent": self._settings.http_user_agent},
            follow_redirects=self._settings.http_follow_redirects,
            transport=self._transport,
        )

    async def fetch(self, url: str | None) -> FetchedDocument:
        """Fetch a URL with one outbound request and no retries.

        Raises:
            InvalidUrlError: If ``url`` is missing or malformed. No request is made.
            FetchError: On transport failure, timeout, non-2xx status or non-HTML content.
        """

        request = FetchRequest.from_url(url)
        try:
            return await asyncio.wait_for(
                self._fetch(request.url), timeout=self._settings.fetch_total_timeout_s
            )
        except asyncio.TimeoutError as e:
            logger.warning("Fetch timed out url=%s", request.url)
            raise FetchTimeoutError(
                f"Timed out after {self._settings.fetch_total_timeout_s}s fetching {request.url}",
                url=request.url,
            ) from e

    async def _fetch(self, url: str) -> FetchedDocument:
        logger.info("Fetching url=%s", url)
        async with self._client() as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
            except httpx.InvalidURL as e:
                raise InvalidUrlError(f"Invalid URL: {url}", url=url) from e
            except httpx.TimeoutException as e:
                logger.warning("Fetch timed out url=%s: %s", url, e)
                raise FetchTimeoutError(f"Timed out fetching {url}: {e}", url=url) from e
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.warning("Fetch failed url=%s status=%d", url, status)
                raise FetchError(f"{url} responded with HTTP {status}", url=url, status_code=status) from e
            except httpx.HTTPError as e:
                logger.warning("Fetch failed url=%s: %s", url, e)
                raise FetchError(f"Request to {url} failed: {e}", url=url) from e

            content_type = resp.headers.get("content-type")
            if not _is_html(content_type):
                raise UnsupportedContentError(
                    f"{url} returned non-HTML content ({content_type})",
                    url=url,
                    content_type=content_type,
                )

            logger.info("Fetched url=%s status=%d bytes=%d", resp.url, resp.status_code, len(resp.content))
            return FetchedDocument(
                url=str(resp.url),
                markup=resp.content,
                encoding=resp.charset_encoding,
                requested_url=url,
                content_type=content_type,
                status_code=resp.status_code,
            )


def _is_html(content_type: str | None) -> bool:
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in HTML_CONTENT_TYPES
