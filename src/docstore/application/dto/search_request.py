"""Search request DTO."""

from collections.abc import Collection
from dataclasses import dataclass
from datetime import datetime

from docstore.domain.exceptions import ValidationError
from docstore.domain.timestamps import as_utc


@dataclass(frozen=True)
class SearchRequest:
    """Search criteria. None or empty imposes no constraint on that dimension.

    Dimensions combine with AND. Within a dimension, title_prefixes and
    author_ids match on any listed value, contains_contents requires all.
    Collections are stored as tuples or frozensets and naive bounds are
    read as UTC.
    """

    title_prefixes: Collection[str] | None = None
    contains_contents: Collection[str] | None = None
    author_ids: Collection[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self) -> None:
        for name, kind in (
            ("title_prefixes", tuple),
            ("contains_contents", tuple),
            ("author_ids", frozenset),
        ):
            value = getattr(self, name)
            if isinstance(value, str):
                raise ValidationError(f"{name} must be a collection of strings, not a string")
            if value is not None:
                object.__setattr__(self, name, kind(value))
        for name in ("created_from", "created_to"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, as_utc(value))
