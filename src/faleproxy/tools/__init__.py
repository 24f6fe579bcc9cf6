"""Pipeline stages: fetch, transform, extract."""

from __future__ import annotations

from faleproxy.tools.page_extractor import PageExtractor
from faleproxy.tools.page_fetcher import PageFetcher
from faleproxy.tools.page_transformer import PageTransformer
from faleproxy.tools.text_substitution import match_case, substitute

__all__ = [
    "PageExtractor",
    "PageFetcher",
    "PageTransformer",
    "match_case",
    "substitute",
]
