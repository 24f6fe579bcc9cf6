"""Case-preserving word substitution over plain strings."""

from __future__ import annotations

import re
from functools import lru_cache

from faleproxy.models.document import SubstitutionRule


def match_case(matched: str, replacement: str) -> str:
    """Render ``replacement`` in the case pattern of ``matched``.

    All-uppercase matches give an all-uppercase replacement, all-lowercase matches give an
    all-lowercase one, and anything else (title or mixed case) falls back to title case.

    >>> match_case("YALE", "fale"), match_case("yale", "Fale"), match_case("yAlE", "fale")
    ('FALE', 'fale', 'Fale')
    """

    if matched.isupper():
        return replacement.upper()
    if matched.islower():
        return replacement.lower()
    return replacement[:1].upper() + replacement[1:].lower()


@lru_cache(maxsize=32)
def _compile(find: str) -> re.Pattern[str]:
    return re.compile(re.escape(find), re.IGNORECASE)


def substitute(text: str, rule: SubstitutionRule) -> tuple[str, int]:
    """Replace every case-insensitive occurrence of ``rule.find`` in ``text``.

    Matching is substring based; no word boundary is required.

    Returns:
        The rewritten text and the number of replacements made.
    """

    if not text:
        return text, 0
    pattern = _compile(rule.find)
    return pattern.subn(lambda m: match_case(m.group(0), rule.replace), text)
