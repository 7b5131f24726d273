"""In-memory document store implementation."""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import replace
from datetime import UTC, datetime
from uuid import uuid4

from docstore.application.dto.search_request import SearchRequest
from docstore.domain.entities import Document
from docstore.domain.exceptions import MalformedDocument
from docstore.domain.timestamps import as_utc
from docstore.infrastructure.persistence.memory.criteria import matches_request

logger = logging.getLogger(__name__)


def _generate_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemoryDocumentStore:
    """Document store backed by a dict keyed by document id.

    Search is a linear scan evaluating the request against every stored
    document. With strict=True a document missing a field needed by an active
    filter raises MalformedDocument; with strict=False it is left out of the
    results. thread_safe=True serializes access to the map with a lock.
    """

    def __init__(
        self,
        *,
        id_factory: Callable[[], str] = _generate_id,
        clock: Callable[[], datetime] = _utcnow,
        strict: bool = True,
        thread_safe: bool = False,
    ) -> None:
        self._storage: dict[str, Document] = {}
        self._id_factory = id_factory
        self._clock = clock
        self._strict = strict
        self._lock: AbstractContextManager = threading.Lock() if thread_safe else nullcontext()

    def __len__(self) -> int:
        return len(self._storage)

    def save(self, document: Document) -> Document:
        """Store a normalized copy of the document, replacing any record with the same id."""
        with self._lock:
            to_save = replace(
                document,
                id=document.id if document.id is not None else self._id_factory(),
                created=as_utc(document.created if document.created is not None else self._clock()),
            )
            replaced = to_save.id in self._storage
            self._storage[to_save.id] = to_save
        logger.debug("Saved document %s (replaced=%s)", to_save.id, replaced)
        return to_save

    def find_by_id(self, document_id: str) -> Document | None:
        """Get document by id."""
        return self._storage.get(document_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Return all documents matching every active dimension of the request."""
        with self._lock:
            candidates = list(self._storage.values())
        results = [doc for doc in candidates if self._matches(doc, request)]
        logger.debug("Search matched %d of %d documents", len(results), len(candidates))
        return results

    def _matches(self, doc: Document, request: SearchRequest) -> bool:
        try:
            return matches_request(doc, request)
        except MalformedDocument as e:
            if self._strict:
                raise
            logger.warning("Skipping document %s in search: no %s", e.document_id, e.field)
            return False
