"""Document entity."""

from dataclasses import dataclass
from datetime import datetime

from docstore.domain.entities.author import Author


@dataclass(frozen=True)
class Document:
    """Stored record. id and created are assigned by the store when absent."""

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None
