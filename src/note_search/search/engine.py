"""
Search facade: ranked search, index-only shortcuts and index lifecycle.

Ranked search runs parse -> candidate planning -> filters -> scoring ->
sort, all under the index lock so it sees one consistent snapshot.
"""

from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from note_search.config import Settings, settings as default_settings
from note_search.schemas.document import Document
from note_search.schemas.search import ScoredDocument, SearchRequest
from note_search.search.inverted_index import InvertedIndex
from note_search.search.query_planner import QueryPlanner
from note_search.search.scorer import RelevanceScorer


def _creation_key(document: Document) -> Tuple[datetime, str]:
    # Aware timestamps are compared as local wall-clock time
    created_at = document.created_at
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone().replace(tzinfo=None)
    return created_at, document.id


def _by_creation(documents: Iterable[Document]) -> List[Document]:
    return sorted(documents, key=_creation_key)


class SearchEngine:
    """
    Owns an InvertedIndex and answers search requests against it.

    The document store calls ``on_document_created`` / ``_updated`` /
    ``_deleted`` after each successful write, and ``rebuild`` once at
    start-up.
    """

    def __init__(
        self,
        index: Optional[InvertedIndex] = None,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize search engine.

        Args:
            index: Index to search (new empty index if omitted)
            settings: Configuration (module settings if omitted)
            clock: Source of "now" for recency scoring
        """
        self.settings = settings or default_settings
        self.index = index or InvertedIndex(case_sensitive=self.settings.case_sensitive)
        self.planner = QueryPlanner(self.index)
        self.scorer = RelevanceScorer(
            case_sensitive=self.index.case_sensitive,
            recency_days=self.settings.recency_days,
            clock=clock,
        )

        if self.settings.use_stemming or self.settings.use_synonyms:
            logger.warning("Stemming and synonym expansion are not supported; ignoring")

        logger.info("Created search engine")

    # Document store callbacks

    def on_document_created(self, document: Optional[Document]) -> None:
        self.index.add_document(document)

    def on_document_updated(
        self,
        old: Optional[Document],
        new: Optional[Document]
    ) -> None:
        self.index.update_document(old, new)

    def on_document_deleted(self, document: Optional[Document]) -> None:
        self.index.remove_document(document)

    def rebuild(self, documents: Iterable[Optional[Document]]) -> int:
        """Clear the index and add every document."""
        return self.index.index_documents(documents)

    # Ranked search

    def search(
        self,
        query: Optional[str] = "",
        search_title: bool = True,
        search_body: bool = True,
        search_tags: bool = True,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        favorites_only: bool = False
    ) -> List[ScoredDocument]:
        """
        Ranked full-text search with filters.

        Args:
            query: Raw query text (blank selects every document)
            search_title: Match terms against titles
            search_body: Match terms against bodies
            search_tags: Match terms against tags
            from_date: Inclusive creation-date lower bound
            to_date: Inclusive creation-date upper bound
            favorites_only: Restrict to favorites

        Returns:
            Hits sorted by score descending, ties by document ID
        """
        terms = self.planner.parse(query)
        now = self.scorer.clock()

        with self.index.locked():
            candidates = self.planner.candidates_for_terms(
                terms, search_title, search_body, search_tags
            )
            candidates = self.planner.apply_filters(
                candidates, from_date, to_date, favorites_only
            )
            results = [
                ScoredDocument(document=doc, score=self.scorer.score(doc, terms, now))
                for doc in self.index.get_documents(candidates)
            ]

        results.sort(key=lambda hit: (-hit.score, hit.document.id))

        logger.info(f"Search found {len(results)} results for query: '{(query or '')[:50]}'")
        return results

    def run(self, request: SearchRequest) -> List[ScoredDocument]:
        """Ranked search from a request object."""
        return self.search(
            request.query,
            search_title=request.search_title,
            search_body=request.search_body,
            search_tags=request.search_tags,
            from_date=request.from_date,
            to_date=request.to_date,
            favorites_only=request.favorites_only,
        )

    # Index-only shortcuts (no scoring)

    def search_by_tag(self, tag: Optional[str]) -> List[Document]:
        """Documents carrying exactly ``tag`` after normalization."""
        if tag is None or not tag.strip():
            return []
        with self.index.locked():
            return _by_creation(self.index.get_documents(self.index.ids_for_tag(tag)))

    def search_by_date_range(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None
    ) -> List[Document]:
        """Documents created within an inclusive range (both None: all)."""
        with self.index.locked():
            ids = self.index.ids_in_date_range(from_date, to_date)
            return _by_creation(self.index.get_documents(ids))

    def search_favorites(self) -> List[Document]:
        with self.index.locked():
            return _by_creation(self.index.get_documents(self.index.favorite_ids()))

    # Diagnostics

    def suggest_terms(
        self,
        prefix: Optional[str],
        max_results: Optional[int] = None
    ) -> List[str]:
        """Auto-complete candidates from title and tag terms."""
        limit = self.settings.suggestion_limit if max_results is None else max_results
        return self.index.suggest_terms(prefix, limit)

    def stats(self) -> Dict[str, int]:
        return self.index.stats()

    @property
    def size(self) -> int:
        """Number of indexed documents"""
        return len(self.index)
