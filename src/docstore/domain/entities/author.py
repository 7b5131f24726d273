"""Author entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """Author embedded by value in a document."""

    id: str
    name: str
