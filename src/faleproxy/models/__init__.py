"""Pydantic models and pipeline payloads used across the project."""

from __future__ import annotations

from faleproxy.models.document import (
    FetchedDocument,
    FetchRequest,
    ParsedDocument,
    SubstitutionRule,
    TransformResult,
)

__all__ = [
    "FetchRequest",
    "FetchedDocument",
    "ParsedDocument",
    "SubstitutionRule",
    "TransformResult",
]
