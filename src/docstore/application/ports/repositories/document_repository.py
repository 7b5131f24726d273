"""Document repository port."""

from typing import Protocol

from docstore.application.dto.search_request import SearchRequest
from docstore.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document storage and lookup."""

    def save(self, document: Document) -> Document: ...

    def find_by_id(self, document_id: str) -> Document | None: ...

    def search(self, request: SearchRequest) -> list[Document]: ...

    def __len__(self) -> int: ...
