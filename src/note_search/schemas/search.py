"""
Search request and result schemas.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from note_search.schemas.document import Document


class IndexField(str, Enum):
    """Field classes with their own postings structure."""

    TITLE = "title"
    BODY = "body"
    TAG = "tag"


class ScoredDocument(BaseModel):
    """A ranked search hit. The score only orders results."""

    model_config = ConfigDict(frozen=True)

    document: Document
    score: int = 0

    @property
    def id(self) -> Optional[str]:
        return self.document.id


class SearchRequest(BaseModel):
    """Parameters of one ranked search."""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    search_title: bool = True
    search_body: bool = True
    search_tags: bool = True
    from_date: Optional[date] = Field(None, description="Inclusive lower bound")
    to_date: Optional[date] = Field(None, description="Inclusive upper bound")
    favorites_only: bool = False

    @classmethod
    def simple(cls, query: str) -> "SearchRequest":
        """All fields, no filters."""
        return cls(query=query or "")

    def describe(self) -> str:
        """One-line summary for log messages"""
        return (
            f"Query: '{self.query}', Title: {self.search_title}, "
            f"Body: {self.search_body}, Tags: {self.search_tags}, "
            f"From: {self.from_date}, To: {self.to_date}, "
            f"Favorites: {self.favorites_only}"
        )
