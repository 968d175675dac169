"""
Text normalization and tokenization for indexing and query parsing.

Indexing and query parsing deliberately filter differently: indexing
drops terms of one character, query parsing drops terms of up to two
characters plus stop words. A two-character word can therefore sit in
the index without ever matching a query.
"""

import re
from typing import Iterator, List, Optional

# Anything but letters, digits, whitespace and apostrophes (underscore is
# part of \w, so it is listed separately)
_PUNCTUATION = re.compile(r"[^\w\s']|_")
_TOKEN = re.compile(r"\S+")

MIN_INDEX_TERM_LENGTH = 2
MIN_QUERY_TERM_LENGTH = 3

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "in", "on", "at",
    "to", "for", "of", "with", "by", "is", "am", "are", "was",
    "were", "be", "been", "being", "have", "has", "had", "do",
    "does", "did", "will", "would", "should", "could", "can",
    "may", "might", "must", "shall", "this", "that", "these",
    "those", "i", "you", "he", "she", "it", "we", "they",
})


def normalize_text(text: Optional[str], case_sensitive: bool = False) -> str:
    """
    Normalize text for indexing and matching.

    Trims, lowercases (unless case-sensitive) and replaces punctuation
    with single spaces. Apostrophes survive so contractions stay whole.

    Args:
        text: Raw text (None is treated as empty)
        case_sensitive: Keep original casing

    Returns:
        Normalized text
    """
    if text is None:
        return ""

    normalized = text.strip()
    if not case_sensitive:
        normalized = normalized.lower()

    return _PUNCTUATION.sub(" ", normalized)


def normalize_tag(tag: Optional[str], case_sensitive: bool = False) -> str:
    """Normalize a tag as one whole string rather than word by word."""
    return normalize_text(tag, case_sensitive).strip()


class TermSequence:
    """
    Lazy, restartable sequence of normalized terms.

    Every iteration re-scans the normalized text, so the sequence can be
    consumed any number of times.
    """

    def __init__(self, text: Optional[str], case_sensitive: bool = False):
        self._normalized = normalize_text(text, case_sensitive)

    def __iter__(self) -> Iterator[str]:
        for match in _TOKEN.finditer(self._normalized):
            yield match.group(0)

    def __repr__(self) -> str:
        return f"TermSequence({self._normalized!r})"


def tokenize(text: Optional[str], case_sensitive: bool = False) -> TermSequence:
    """Split text into normalized terms, in text order."""
    return TermSequence(text, case_sensitive)


def index_terms(text: Optional[str], case_sensitive: bool = False) -> Iterator[str]:
    """Terms worth indexing: single characters are dropped."""
    return (
        term for term in tokenize(text, case_sensitive)
        if len(term) >= MIN_INDEX_TERM_LENGTH
    )


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS


def parse_query(query: Optional[str], case_sensitive: bool = False) -> List[str]:
    """
    Turn a raw query into search terms.

    Short words (two characters or fewer) and stop words are removed.
    Repeated words are kept.

    Args:
        query: Raw query text
        case_sensitive: Keep original casing

    Returns:
        Query terms in query order (empty for a blank query)
    """
    if query is None or not query.strip():
        return []

    return [
        term for term in tokenize(query, case_sensitive)
        if len(term) >= MIN_QUERY_TERM_LENGTH and not is_stop_word(term)
    ]
