"""Composition root."""

import logging

from docstore.application.ports.repositories import DocumentRepository
from docstore.config import Settings, get_settings
from docstore.infrastructure.persistence.memory.document_store import (
    InMemoryDocumentStore,
)

logger = logging.getLogger(__name__)


def create_document_store(settings: Settings | None = None) -> DocumentRepository:
    """Build a document store configured from settings."""
    settings = settings or get_settings()
    logging.getLogger("docstore").setLevel(settings.log_level)

    store = InMemoryDocumentStore(
        strict=settings.strict_fields,
        thread_safe=settings.thread_safe,
    )
    logger.info(
        "Created document store (strict=%s, thread_safe=%s)",
        settings.strict_fields,
        settings.thread_safe,
    )
    return store
