"""Pytest fixtures for docstore tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from docstore.domain.entities import Author, Document
from docstore.infrastructure.persistence.memory.document_store import (
    InMemoryDocumentStore,
)

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Fresh strict store for each test."""
    return InMemoryDocumentStore()


@pytest.fixture
def fixed_clock_store() -> InMemoryDocumentStore:
    """Store whose clock always returns FIXED_NOW."""
    return InMemoryDocumentStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def john() -> Author:
    return Author(id="1", name="John Doe")


@pytest.fixture
def jane() -> Author:
    return Author(id="2", name="Jane Smith")


@pytest.fixture
def java_doc(john: Author) -> Document:
    """Unsaved document about Java, created 2023-01-01."""
    return Document(
        title="Java Programming",
        content="Java is a popular programming language",
        author=john,
        created=datetime(2023, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def python_doc(jane: Author) -> Document:
    """Unsaved document about Python, created 2023-02-01."""
    return Document(
        title="Python Basics",
        content="Python is easy to learn",
        author=jane,
        created=datetime(2023, 2, 1, tzinfo=UTC),
    )
