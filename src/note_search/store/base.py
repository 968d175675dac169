"""
Document store contract consumed by the Notebook.
"""

from typing import List, Protocol, runtime_checkable

from note_search.schemas.document import Document


@runtime_checkable
class DocumentStore(Protocol):
    """
    Source of truth for documents.

    ``load_all`` is read once at start-up to rebuild the index. Writes
    raise on failure so the index is only told about persisted changes.
    """

    def load_all(self) -> List[Document]:
        ...

    def save(self, document: Document) -> None:
        ...

    def update(self, document: Document) -> None:
        ...

    def delete(self, document: Document) -> None:
        ...
