"""Unit tests for the composition root."""

import logging
from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from docstore.application.dto.search_request import SearchRequest
from docstore.config import Settings
from docstore.domain.entities import Document
from docstore.domain.exceptions import MalformedDocument
from docstore.main import create_document_store


@pytest.fixture(autouse=True)
def _restore_log_level() -> Iterator[None]:
    """Put the docstore logger level back after each test."""
    logger = logging.getLogger("docstore")
    level = logger.level
    yield
    logger.setLevel(level)


def test_create_document_store_strict_by_default() -> None:
    store = create_document_store(Settings(strict_fields=True))
    store.save(Document(id="untitled"))
    with pytest.raises(MalformedDocument):
        store.search(SearchRequest(title_prefixes=["J"]))


def test_create_document_store_lenient() -> None:
    store = create_document_store(Settings(strict_fields=False))
    store.save(Document(id="untitled"))
    assert store.search(SearchRequest(title_prefixes=["J"])) == []


def test_create_document_store_applies_log_level() -> None:
    create_document_store(Settings(log_level="DEBUG"))
    assert logging.getLogger("docstore").level == logging.DEBUG


def test_create_document_store_starts_empty() -> None:
    store = create_document_store(Settings(thread_safe=True))
    assert len(store) == 0


def test_settings_reject_unknown_log_level() -> None:
    """An unknown log level fails at settings validation, not in the logger."""
    with pytest.raises(ValidationError, match="log_level"):
        Settings(log_level="verbose")
