"""
Ordered in-memory document store.
"""

from typing import Dict, Iterable, List, Optional

from loguru import logger

from note_search.exceptions import DocumentStoreError
from note_search.schemas.document import Document


class InMemoryDocumentStore:
    """
    Keeps documents in insertion order, keyed by ID.

    Used for tests and for read-only sources such as a JSON export.
    """

    def __init__(self, documents: Iterable[Document] = ()):
        self._documents: Dict[str, Document] = {}
        for document in documents:
            self.save(document)

    def load_all(self) -> List[Document]:
        return list(self._documents.values())

    def get(self, doc_id: str) -> Optional[Document]:
        return self._documents.get(doc_id)

    def save(self, document: Optional[Document]) -> None:
        """Store a new document."""
        self._require_id(document)
        if document.id in self._documents:
            raise DocumentStoreError(f"Document already exists: {document.id}")

        self._documents[document.id] = document
        logger.debug(f"Saved document {document.id}")

    def update(self, document: Optional[Document]) -> None:
        """Replace a stored document with the same ID."""
        self._require_id(document)
        if document.id not in self._documents:
            raise DocumentStoreError(f"Document not found: {document.id}")

        self._documents[document.id] = document
        logger.debug(f"Updated document {document.id}")

    def delete(self, document: Optional[Document]) -> None:
        self._require_id(document)
        if self._documents.pop(document.id, None) is None:
            raise DocumentStoreError(f"Document not found: {document.id}")
        logger.debug(f"Deleted document {document.id}")

    def __len__(self) -> int:
        return len(self._documents)

    @staticmethod
    def _require_id(document: Optional[Document]) -> None:
        if document is None:
            raise DocumentStoreError("Entry cannot be null")
        if not document.id:
            raise DocumentStoreError("Entry has no id")
