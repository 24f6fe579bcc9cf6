"""Tests for the HTML tree transformer."""

from __future__ import annotations

from bs4 import BeautifulSoup
from conftest import SAMPLE_HTML_WITH_YALE

from faleproxy.models.document import FetchedDocument, SubstitutionRule
from faleproxy.tools.page_transformer import PageTransformer


def _doc(html: str) -> FetchedDocument:
    return FetchedDocument(url="https://example.com/", markup=html, content_type="text/html")


def _structure(tree: BeautifulSoup) -> list[tuple[str, dict]]:
    return [(tag.name, dict(tag.attrs)) for tag in tree.find_all(True)]


def test_text_is_replaced_and_attributes_are_kept() -> None:
    """It should rewrite rendered text while leaving href/src/alt/content attributes intact."""

    parsed = PageTransformer().transform(_doc(SAMPLE_HTML_WITH_YALE))
    html = str(parsed.tree)

    assert "Welcome to Fale University" in html
    assert ">About Fale<" in html
    assert "<title>Fale University Test Page</title>" in html
    assert 'href="https://www.yale.edu/about"' in html
    assert 'src="https://www.yale.edu/logo.png"' in html
    assert 'alt="Yale logo"' in html
    assert 'content="Yale University page"' in html
    assert parsed.substitutions == 3


def test_no_target_left_in_text_nodes() -> None:
    html = "<html><body><p>YALE yale Yale</p><ul><li>yAlE</li></ul></body></html>"
    parsed = PageTransformer().transform(_doc(html))

    assert "yale" not in parsed.tree.get_text().lower()
    assert parsed.tree.p.get_text() == "FALE fale Fale"
    assert parsed.tree.li.get_text() == "Fale"


def test_script_style_and_comments_are_not_touched() -> None:
    html = (
        "<html><head><style>.yale { color: blue; }</style></head>"
        "<body><!-- Yale comment --><p>Yale</p>"
        '<script>var yale = "Yale";</script></body></html>'
    )
    parsed = PageTransformer().transform(_doc(html))
    out = str(parsed.tree)

    assert ".yale { color: blue; }" in out
    assert 'var yale = "Yale";' in out
    assert "<!-- Yale comment -->" in out
    assert "<p>Fale</p>" in out
    assert parsed.substitutions == 1


def test_skip_tags_are_configurable() -> None:
    html = "<html><body><code>yale.edu</code><p>yale</p></body></html>"
    parsed = PageTransformer(skip_tags=["code"]).transform(_doc(html))

    assert parsed.tree.code.get_text() == "yale.edu"
    assert parsed.tree.p.get_text() == "fale"


def test_structure_is_preserved() -> None:
    """Tags, attribute maps and element order should be identical before and after."""

    before = BeautifulSoup(SAMPLE_HTML_WITH_YALE, "lxml")
    parsed = PageTransformer().transform(_doc(SAMPLE_HTML_WITH_YALE))

    assert _structure(parsed.tree) == _structure(before)


def test_second_pass_is_a_no_op() -> None:
    transformer = PageTransformer()
    first = str(transformer.transform(_doc(SAMPLE_HTML_WITH_YALE)).tree)
    second = transformer.transform(_doc(first))

    assert str(second.tree) == first
    assert second.substitutions == 0


def test_entities_survive_substitution() -> None:
    parsed = PageTransformer().transform(_doc("<p>Yale &amp; Harvard &lt;3</p>"))

    assert "Fale &amp; Harvard &lt;3" in str(parsed.tree)


def test_malformed_markup_is_tolerated() -> None:
    parsed = PageTransformer().transform(_doc("<p>Yale<div>unclosed <b>yale"))

    assert "Fale" in parsed.tree.get_text()
    assert "fale" in parsed.tree.get_text()


def test_custom_rule() -> None:
    rule = SubstitutionRule(find="cat", replace="dog")
    parsed = PageTransformer(rule).transform(_doc('<p title="cat">Cats and CATS</p>'))

    assert parsed.tree.p.get_text() == "Dogs and DOGS"
    assert parsed.tree.p["title"] == "cat"
