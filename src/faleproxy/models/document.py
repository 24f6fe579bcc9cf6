"""Document models flowing through the fetch -> transform -> extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from bs4 import BeautifulSoup
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, UrlConstraints, ValidationError

from faleproxy.errors import InvalidUrlError

# Absolute http(s) URL with a host; no length limit.
_HTTP_URL = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]
)


class SubstitutionRule(BaseModel):
    """A find/replace word pair applied case-insensitively to rendered text."""

    model_config = ConfigDict(frozen=True)

    find: str = Field(default="yale", min_length=1)
    replace: str = Field(default="fale", min_length=1)


class FetchRequest(BaseModel):
    """A validated request to fetch one document.

    ``url`` keeps the caller's spelling; validation only checks that it is an absolute
    http(s) URL with a host.
    """

    model_config = ConfigDict(frozen=True)

    url: str

    @classmethod
    def from_url(cls, url: str | None) -> FetchRequest:
        """Validate ``url`` and build a request.

        Raises:
            InvalidUrlError: If the URL is missing or malformed.
        """

        if url is None or not str(url).strip():
            raise InvalidUrlError("URL is required", url=url)
        candidate = str(url).strip()
        try:
            _HTTP_URL.validate_python(candidate)
        except ValidationError as e:
            raise InvalidUrlError(f"Invalid URL: {candidate}", url=candidate) from e
        return cls(url=candidate)


@dataclass(frozen=True)
class FetchedDocument:
    """Fetched page payload.

    ``markup`` is the raw response body. Decoding is left to the HTML parser so a charset
    declared in a <meta> tag or BOM is honoured; ``encoding`` is the charset from the
    Content-Type header, when one was sent.
    """

    url: str
    markup: bytes | str
    encoding: str | None = None
    requested_url: str | None = None
    content_type: str | None = None
    status_code: int = 200


@dataclass
class ParsedDocument:
    """A parsed HTML tree after substitution.

    The tree is owned by this object; nodes are never shared with another document.
    """

    url: str
    tree: BeautifulSoup
    substitutions: int = 0


class TransformResult(BaseModel):
    """Normalized fields extracted from a transformed document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool = True
    title: str | None = None
    content: str
    original_url: str = Field(serialization_alias="originalUrl")
