"""Domain exceptions."""


class DocStoreError(Exception):
    """Base exception for docstore."""

    pass


class ValidationError(DocStoreError):
    """Validation failed for input data."""

    pass


class MalformedDocument(DocStoreError):
    """Stored document lacks a field required by an active search filter."""

    def __init__(self, document_id: str, field: str) -> None:
        super().__init__(f"Document {document_id} has no {field}")
        self.document_id = document_id
        self.field = field
