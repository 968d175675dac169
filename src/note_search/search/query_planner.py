"""
Candidate selection: query terms -> document IDs, then filters.
"""

from datetime import date
from typing import List, Optional, Sequence, Set

from note_search.schemas.search import IndexField
from note_search.search.inverted_index import InvertedIndex
from note_search.search.tokenizer import parse_query


class QueryPlanner:
    """
    Evaluates queries against an InvertedIndex with AND semantics.

    Each term must match at least one enabled field; different terms may
    match in different fields.
    """

    def __init__(self, index: InvertedIndex):
        self.index = index

    def parse(self, query: Optional[str]) -> List[str]:
        return parse_query(query, self.index.case_sensitive)

    def plan_candidates(
        self,
        query: Optional[str],
        search_title: bool = True,
        search_body: bool = True,
        search_tags: bool = True
    ) -> Set[str]:
        """
        Candidate IDs for a raw query.

        A blank query, or one with nothing left after stop-word and
        short-word removal, selects every document.

        Args:
            query: Raw query text
            search_title: Match terms against titles
            search_body: Match terms against bodies
            search_tags: Match terms against tags

        Returns:
            Unordered set of candidate IDs
        """
        terms = self.parse(query)
        return self.candidates_for_terms(terms, search_title, search_body, search_tags)

    def candidates_for_terms(
        self,
        terms: Sequence[str],
        search_title: bool = True,
        search_body: bool = True,
        search_tags: bool = True
    ) -> Set[str]:
        """Candidate IDs for already-parsed terms."""
        if not terms:
            return self.index.document_ids()

        fields = [
            field
            for field, enabled in (
                (IndexField.TITLE, search_title),
                (IndexField.BODY, search_body),
                (IndexField.TAG, search_tags),
            )
            if enabled
        ]

        candidates: Optional[Set[str]] = None
        with self.index.locked():
            for term in terms:
                hits: Set[str] = set()
                for field in fields:
                    hits |= self.index.lookup(field, term)

                candidates = hits if candidates is None else candidates & hits
                if not candidates:
                    return set()

        return candidates or set()

    def apply_filters(
        self,
        candidates: Set[str],
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        favorites_only: bool = False
    ) -> Set[str]:
        """
        Narrow candidates by creation date and favorite flag.

        Args:
            candidates: IDs to filter (not modified)
            from_date: Inclusive lower bound, or None
            to_date: Inclusive upper bound, or None
            favorites_only: Keep favorites only

        Returns:
            New set of surviving IDs
        """
        filtered = set(candidates)
        if not filtered:
            return filtered

        if from_date is not None or to_date is not None:
            filtered &= self.index.ids_in_date_range(from_date, to_date)

        if favorites_only:
            filtered &= self.index.favorite_ids()

        return filtered
