"""HTML transformation: parse a fetched page and rewrite its rendered text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString

from faleproxy.logging import get_logger
from faleproxy.models.document import FetchedDocument, ParsedDocument, SubstitutionRule
from faleproxy.tools.text_substitution import substitute

logger = get_logger(__name__)

DEFAULT_SKIP_TAGS: frozenset[str] = frozenset({"script", "style"})


class PageTransformer:
    """Apply a :class:`SubstitutionRule` to the text nodes of an HTML document.

    Only rendered text is touched. Attribute values, comments, doctypes and the bodies of
    ``skip_tags`` elements are left byte-for-byte as parsed.
    """

    def __init__(
        self,
        rule: SubstitutionRule | None = None,
        *,
        skip_tags: Iterable[str] = DEFAULT_SKIP_TAGS,
        parser: str = "lxml",
    ) -> None:
        self._rule = rule or SubstitutionRule()
        self._skip_tags = frozenset(t.lower() for t in skip_tags)
        self._parser = parser

    def transform(self, doc: FetchedDocument) -> ParsedDocument:
        """Parse ``doc`` and substitute text in place.

        Byte markup is decoded by the parser: the header charset wins, then a BOM or
        <meta> declaration, then detection.
        Malformed markup is repaired by the parser, never rejected.
        """

        if isinstance(doc.markup, bytes):
            tree = BeautifulSoup(doc.markup, self._parser, from_encoding=doc.encoding)
        else:
            tree = BeautifulSoup(doc.markup, self._parser)
        count = self.transform_tree(tree)
        logger.debug("Transformed url=%s substitutions=%d", doc.url, count)
        return ParsedDocument(url=doc.url, tree=tree, substitutions=count)

    def transform_tree(self, tree: BeautifulSoup) -> int:
        """Rewrite text nodes of an already parsed tree. Returns the substitution count."""

        total = 0
        # Materialized first: replace_with() detaches the node being iterated.
        for node in list(self._text_nodes(tree)):
            new_text, n = substitute(str(node), self._rule)
            if n:
                node.replace_with(type(node)(new_text))
                total += n
        return total

    def _text_nodes(self, tree: BeautifulSoup) -> Iterator[NavigableString]:
        for node in tree.find_all(string=True):
            # Comment, Doctype, CData, Declaration, ProcessingInstruction
            if isinstance(node, PreformattedString):
                continue
            if self._inside_skipped(node):
                continue
            yield node

    def _inside_skipped(self, node: NavigableString) -> bool:
        return any(parent.name in self._skip_tags for parent in node.parents if parent.name)
