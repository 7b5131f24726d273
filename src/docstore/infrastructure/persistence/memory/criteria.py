"""Per-dimension match predicates for in-memory search.

Each predicate returns True when its dimension is inactive (None or empty).
A document field is only read when its dimension is active; a missing field
raises MalformedDocument.
"""

from collections.abc import Collection
from datetime import datetime
from typing import Any

from docstore.application.dto.search_request import SearchRequest
from docstore.domain.entities import Document
from docstore.domain.exceptions import MalformedDocument


def _require(doc: Document, field: str) -> Any:
    value = getattr(doc, field)
    if value is None:
        raise MalformedDocument(str(doc.id), field)
    return value


def matches_title_prefixes(doc: Document, title_prefixes: Collection[str] | None) -> bool:
    """True if the title starts with any of the prefixes (case-sensitive)."""
    if not title_prefixes:
        return True
    title = _require(doc, "title")
    return any(title.startswith(prefix) for prefix in title_prefixes)


def matches_contains_contents(doc: Document, contains_contents: Collection[str] | None) -> bool:
    """True if the content contains every one of the substrings."""
    if not contains_contents:
        return True
    content = _require(doc, "content")
    return all(part in content for part in contains_contents)


def matches_author_ids(doc: Document, author_ids: Collection[str] | None) -> bool:
    """True if the author id is one of the ids."""
    if not author_ids:
        return True
    author = _require(doc, "author")
    return author.id in author_ids


def is_within_date_range(
    doc: Document, created_from: datetime | None, created_to: datetime | None
) -> bool:
    """True if created falls in [created_from, created_to]; either bound may be open."""
    if created_from is None and created_to is None:
        return True
    created = _require(doc, "created")
    if created_from is not None and created < created_from:
        return False
    if created_to is not None and created > created_to:
        return False
    return True


def matches_request(doc: Document, request: SearchRequest) -> bool:
    """True if the document satisfies every dimension of the request."""
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contains_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and is_within_date_range(doc, request.created_from, request.created_to)
    )
