"""
Mutable inverted index over note entries.

Keeps per-field postings (term -> document IDs), a creation-date index,
the favorite set and the document table. All postings are projections of
the document table; every public read returns an owned copy.
"""

import threading
from contextlib import contextmanager
from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional, Set

from loguru import logger

from note_search.schemas.document import Document
from note_search.schemas.search import IndexField
from note_search.search.tokenizer import (
    MIN_INDEX_TERM_LENGTH,
    index_terms,
    normalize_tag,
    normalize_text,
)

Postings = Dict[str, Set[str]]


def _has_id(document: Optional[Document]) -> bool:
    return document is not None and bool(document.id)


class InvertedIndex:
    """
    Inverted index with incremental add/update/remove.

    One re-entrant lock guards every structure. Mutations and reads are
    serialized, so no reader observes a half-applied update.
    """

    def __init__(self, case_sensitive: bool = False):
        """
        Initialize an empty index.

        Args:
            case_sensitive: Keep term casing instead of lowercasing
        """
        self.case_sensitive = case_sensitive

        self._postings: Dict[IndexField, Postings] = {
            field: {} for field in IndexField
        }
        self._dates: Dict[date, Set[str]] = {}
        self._favorites: Set[str] = set()
        self._documents: Dict[str, Document] = {}

        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["InvertedIndex"]:
        """Hold the index lock for a multi-step read."""
        with self._lock:
            yield self

    # Mutation

    def add_document(self, document: Optional[Document]) -> None:
        """
        Index a document in every structure.

        A None document or one without an ID is ignored.

        Args:
            document: Document to index
        """
        if not _has_id(document):
            logger.debug("Ignoring add of document without id")
            return

        doc_id = document.id
        with self._lock:
            self._documents[doc_id] = document

            for term in index_terms(document.title, self.case_sensitive):
                self._post(IndexField.TITLE, term, doc_id)

            for term in index_terms(document.body, self.case_sensitive):
                self._post(IndexField.BODY, term, doc_id)

            for tag in document.tags:
                normalized = normalize_tag(tag, self.case_sensitive)
                if len(normalized) >= MIN_INDEX_TERM_LENGTH:
                    self._post(IndexField.TAG, normalized, doc_id)

            self._dates.setdefault(document.created_date, set()).add(doc_id)

            if document.favorite:
                self._favorites.add(doc_id)

        logger.debug(f"Indexed document {doc_id}")

    def update_document(
        self,
        old: Optional[Document],
        new: Optional[Document]
    ) -> None:
        """
        Re-index a document: remove ``old`` then add ``new``.

        Both steps happen under one lock hold. ``new`` may carry a
        different ID; a missing ``old`` makes this a plain add.
        """
        with self._lock:
            if _has_id(old):
                self.remove_document(old)
            self.add_document(new)

    def remove_document(self, document: Optional[Document]) -> None:
        """
        Remove a document's ID from every structure.

        Unknown IDs, None documents and empty IDs are no-ops. Postings
        are pruned using the indexed copy of the document, so a stale or
        edited instance still removes everything.
        """
        if not _has_id(document):
            logger.debug("Ignoring remove of document without id")
            return

        doc_id = document.id
        with self._lock:
            indexed = self._documents.pop(doc_id, None)
            if indexed is None:
                logger.debug(f"Remove of unknown document {doc_id} ignored")
                return

            for field in IndexField:
                self._unpost_all(self._postings[field], doc_id)

            bucket = self._dates.get(indexed.created_date)
            if bucket is not None:
                bucket.discard(doc_id)
                if not bucket:
                    del self._dates[indexed.created_date]

            self._favorites.discard(doc_id)

        logger.debug(f"Removed document {doc_id} from index")

    def clear(self) -> None:
        """Reset every structure to empty."""
        with self._lock:
            for postings in self._postings.values():
                postings.clear()
            self._dates.clear()
            self._favorites.clear()
            self._documents.clear()

    def index_documents(self, documents: Iterable[Optional[Document]]) -> int:
        """
        Rebuild the index from scratch.

        Args:
            documents: Every document to index

        Returns:
            Number of documents in the index afterwards
        """
        with self._lock:
            self.clear()
            for document in documents:
                self.add_document(document)
            count = len(self._documents)

        logger.info(f"Indexed {count} documents")
        return count

    # Lookup

    def lookup(self, field: IndexField, term: str) -> Set[str]:
        """IDs whose ``field`` contains the normalized ``term``."""
        with self._lock:
            return set(self._postings[field].get(term, ()))

    def ids_for_tag(self, tag: Optional[str]) -> Set[str]:
        """IDs carrying ``tag``, compared as a whole normalized string."""
        normalized = normalize_tag(tag, self.case_sensitive)
        if not normalized:
            return set()
        return self.lookup(IndexField.TAG, normalized)

    def ids_in_date_range(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None
    ) -> Set[str]:
        """
        IDs created within an inclusive date range.

        A missing bound leaves that side open.
        """
        ids: Set[str] = set()
        with self._lock:
            for day, bucket in self._dates.items():
                if from_date is not None and day < from_date:
                    continue
                if to_date is not None and day > to_date:
                    continue
                ids.update(bucket)
        return ids

    def document_ids(self) -> Set[str]:
        with self._lock:
            return set(self._documents)

    def favorite_ids(self) -> Set[str]:
        with self._lock:
            return set(self._favorites)

    def get_document(self, doc_id: str) -> Optional[Document]:
        with self._lock:
            return self._documents.get(doc_id)

    def get_documents(self, doc_ids: Iterable[str]) -> List[Document]:
        """Documents for the known IDs among ``doc_ids``."""
        with self._lock:
            return [
                self._documents[doc_id]
                for doc_id in doc_ids
                if doc_id in self._documents
            ]

    def terms(self, field: IndexField) -> List[str]:
        """Snapshot of the terms currently posted for ``field``."""
        with self._lock:
            return list(self._postings[field])

    def suggest_terms(self, prefix: Optional[str], max_results: int) -> List[str]:
        """
        Title and tag terms starting with a prefix.

        Args:
            prefix: Raw prefix text (normalized before matching)
            max_results: Upper bound on returned terms

        Returns:
            Terms distinct ignoring case, in case-insensitive lexicographic order
        """
        if prefix is None or not prefix.strip() or max_results <= 0:
            return []

        normalized = normalize_text(prefix, self.case_sensitive)
        with self._lock:
            matches = {
                term
                for field in (IndexField.TITLE, IndexField.TAG)
                for term in self._postings[field]
                if term.startswith(normalized)
            }

        # Terms differing only in case collapse to the first in sort order
        suggestions: List[str] = []
        seen = set()
        for term in sorted(matches, key=lambda t: (t.lower(), t)):
            if term.lower() in seen:
                continue
            seen.add(term.lower())
            suggestions.append(term)
            if len(suggestions) == max_results:
                break
        return suggestions

    def stats(self) -> Dict[str, int]:
        """Sizes of every structure at call time."""
        with self._lock:
            return {
                "documents": len(self._documents),
                "title_terms": len(self._postings[IndexField.TITLE]),
                "body_terms": len(self._postings[IndexField.BODY]),
                "tag_terms": len(self._postings[IndexField.TAG]),
                "dates": len(self._dates),
                "favorites": len(self._favorites),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._documents

    # Helpers

    def _post(self, field: IndexField, term: str, doc_id: str) -> None:
        self._postings[field].setdefault(term, set()).add(doc_id)

    @staticmethod
    def _unpost_all(postings: Postings, doc_id: str) -> None:
        # Drop terms whose postings become empty
        emptied = []
        for term, ids in postings.items():
            ids.discard(doc_id)
            if not ids:
                emptied.append(term)
        for term in emptied:
            del postings[term]
