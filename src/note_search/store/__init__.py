"""Document store collaborators"""

from note_search.store.base import DocumentStore
from note_search.store.memory import InMemoryDocumentStore

__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
]
