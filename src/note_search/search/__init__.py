"""
Search and indexing components.
"""

from note_search.search.tokenizer import (
    STOP_WORDS,
    TermSequence,
    index_terms,
    normalize_tag,
    normalize_text,
    parse_query,
    tokenize,
)
from note_search.search.inverted_index import InvertedIndex
from note_search.search.query_planner import QueryPlanner
from note_search.search.scorer import RelevanceScorer
from note_search.search.engine import SearchEngine
from note_search.search.background import BackgroundSearcher, SearchHandle

__all__ = [
    "STOP_WORDS",
    "TermSequence",
    "index_terms",
    "normalize_tag",
    "normalize_text",
    "parse_query",
    "tokenize",
    "InvertedIndex",
    "QueryPlanner",
    "RelevanceScorer",
    "SearchEngine",
    "BackgroundSearcher",
    "SearchHandle",
]
