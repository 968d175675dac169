"""Schemas package exports"""

from note_search.schemas.document import Document
from note_search.schemas.search import IndexField, ScoredDocument, SearchRequest

__all__ = [
    "Document",
    "IndexField",
    "ScoredDocument",
    "SearchRequest",
]
