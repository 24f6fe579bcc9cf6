"""Extraction of normalized result fields from a transformed tree."""

from __future__ import annotations

from typing import Literal

from faleproxy.logging import get_logger
from faleproxy.models.document import ParsedDocument, TransformResult

logger = get_logger(__name__)

ContentScope = Literal["body", "document"]

_FOREIGN_TAGS = frozenset({"svg", "math"})


class PageExtractor:
    """Project a :class:`ParsedDocument` onto a :class:`TransformResult`."""

    def __init__(self, *, content_scope: ContentScope = "body") -> None:
        self._content_scope = content_scope

    def extract(self, doc: ParsedDocument, original_url: str) -> TransformResult:
        """Read the title and serialize the content region.

        A missing title or body is not an error: the title becomes ``None`` and the whole
        tree is serialized instead of the body.
        """

        return TransformResult(
            title=self._title(doc),
            content=self._content(doc),
            original_url=original_url,
        )

    @staticmethod
    def _title(doc: ParsedDocument) -> str | None:
        # <title> inside inline svg/math labels a graphic, not the page.
        scope = doc.tree.head if doc.tree.head is not None else doc.tree
        for title in scope.find_all("title"):
            if any(parent.name in _FOREIGN_TAGS for parent in title.parents):
                continue
            return title.get_text(strip=True) or None
        return None

    def _content(self, doc: ParsedDocument) -> str:
        if self._content_scope == "body":
            body = doc.tree.body
            if body is not None:
                return body.decode_contents()
        return str(doc.tree)
