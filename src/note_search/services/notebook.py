"""
Notebook: composition root tying a document store to the search engine.

Every write goes to the store first; the engine is notified only after
the store accepted it, so the index never shows an unsaved entry.
"""

from datetime import date, datetime
from typing import List, Optional

from loguru import logger

from note_search.exceptions import DocumentStoreError
from note_search.schemas.document import Document
from note_search.schemas.search import ScoredDocument
from note_search.search.engine import SearchEngine
from note_search.store.base import DocumentStore


class Notebook:
    """
    Entry collection with search.

    Construct one per application and pass it to whatever needs it.
    """

    def __init__(self, store: DocumentStore, engine: Optional[SearchEngine] = None):
        """
        Initialize notebook.

        Args:
            store: Persistent document store
            engine: Search engine (new engine with default settings if omitted)
        """
        self.store = store
        self.engine = engine or SearchEngine()

    def open(self) -> "Notebook":
        """Build the index from every stored entry."""
        self.reload()
        return self

    def reload(self) -> int:
        """
        Rebuild the index from the store.

        Returns:
            Number of indexed entries
        """
        documents = self.store.load_all()
        count = self.engine.rebuild(documents)
        logger.info(f"Notebook loaded {count} entries")
        return count

    # Writes

    def create_entry(self, document: Optional[Document]) -> Document:
        """Persist a new entry, then index it."""
        if document is None:
            raise DocumentStoreError("Entry cannot be null")

        self.store.save(document)
        self.engine.on_document_created(document)
        return document

    def update_entry(self, old: Document, new: Document) -> Document:
        """
        Persist an edited entry, then re-index it.

        If ``new`` carries a different ID the old entry is deleted and the
        new one saved. A failed save restores the old entry.
        """
        if old is None or new is None:
            raise DocumentStoreError("Entry cannot be null")

        if old.id == new.id:
            self.store.update(new)
        else:
            self.store.delete(old)
            try:
                self.store.save(new)
            except Exception:
                logger.warning(f"Could not save entry {new.id}; restoring {old.id}")
                self.store.save(old)
                raise

        self.engine.on_document_updated(old, new)
        return new

    def delete_entry(self, document: Document) -> None:
        """Delete an entry from the store, then from the index."""
        if document is None:
            raise DocumentStoreError("Entry cannot be null")

        self.store.delete(document)
        self.engine.on_document_deleted(document)

    # Reads

    def all_entries(self) -> List[Document]:
        return self.store.load_all()

    def get_entry(self, doc_id: str) -> Optional[Document]:
        return self.engine.index.get_document(doc_id)

    def all_tags(self) -> List[str]:
        """Distinct tags across all entries, first-seen order."""
        tags: List[str] = []
        for document in self.store.load_all():
            for tag in document.tags:
                if tag not in tags:
                    tags.append(tag)
        return tags

    def entries_by_date(self, day: date) -> List[Document]:
        return self.engine.search_by_date_range(day, day)

    def entries_by_tag(self, tag: str) -> List[Document]:
        return self.engine.search_by_tag(tag)

    def favorite_entries(self) -> List[Document]:
        return self.engine.search_favorites()

    def search(self, query: str = "", **filters) -> List[ScoredDocument]:
        """Ranked search; keyword filters are passed to SearchEngine.search."""
        return self.engine.search(query, **filters)

    @property
    def total_entries(self) -> int:
        return self.engine.size

    def entries_this_month(self, now: Optional[datetime] = None) -> int:
        """Count of entries created in the current calendar month."""
        now = now or datetime.now()
        first = now.date().replace(day=1)
        if first.month == 12:
            next_first = first.replace(year=first.year + 1, month=1)
        else:
            next_first = first.replace(month=first.month + 1)

        return sum(
            1 for document in self.engine.search_by_date_range(first, None)
            if document.created_date < next_first
        )
