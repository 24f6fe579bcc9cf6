"""Exceptions raised by the fetch/transform pipeline.

Parsing and substitution are total over any text input, so only the fetch side can fail.
"""

from __future__ import annotations


class FaleProxyError(RuntimeError):
    pass


class InvalidUrlError(FaleProxyError):
    """The input URL is missing or not an absolute http(s) URL.

    Raised before any network activity.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class FetchError(FaleProxyError):
    """The document could not be retrieved."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    pass


class UnsupportedContentError(FetchError):
    """The response body is not an HTML document."""

    def __init__(self, message: str, *, url: str, content_type: str | None) -> None:
        super().__init__(message, url=url)
        self.content_type = content_type
