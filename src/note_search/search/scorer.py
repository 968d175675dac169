"""
Relevance scoring for search candidates.

Scores are integers used only to order results. The weights below are
fixed; changing them changes result order users rely on.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from note_search.exceptions import ConfigurationError
from note_search.schemas.document import Document
from note_search.search.tokenizer import normalize_tag, normalize_text

TITLE_WEIGHT = 10
EXACT_TITLE_BONUS = 20
TITLE_PREFIX_BONUS = 5
BODY_WEIGHT = 5
TAG_WEIGHT = 8
EXACT_TAG_BONUS = 12
FAVORITE_BONUS = 3
RECENCY_BONUS = 2
BASE_SCORE = 0


class RelevanceScorer:
    """
    Substring-based relevance scoring over title, body and tags.

    Per query term:
    - title contains term: +10 (+20 if the title equals it, +5 if the
      title starts with it)
    - body contains term: +5 plus the number of non-overlapping
      occurrences
    - every tag containing term: +8 (+12 if the tag equals it)

    Once per document: +3 for favorites, +2 if created within the
    recency window. Without query terms only these bonuses count.
    """

    def __init__(
        self,
        case_sensitive: bool = False,
        recency_days: int = 7,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize scorer.

        Args:
            case_sensitive: Must match the index's normalization
            recency_days: Size of the recency window in days
            clock: Source of "now" (defaults to datetime.now)
        """
        if recency_days < 0:
            raise ConfigurationError(f"recency_days must be >= 0, got {recency_days}")

        self.case_sensitive = case_sensitive
        self.recency_window = timedelta(days=recency_days)
        self.clock = clock or datetime.now

    def score(
        self,
        document: Document,
        terms: Sequence[str],
        now: Optional[datetime] = None
    ) -> int:
        """
        Score one document against query terms.

        Args:
            document: Candidate document
            terms: Parsed query terms (may be empty)
            now: Reference time for the recency bonus

        Returns:
            Integer relevance score
        """
        score = BASE_SCORE

        if terms:
            title = normalize_text(document.title, self.case_sensitive)
            body = normalize_text(document.body, self.case_sensitive)
            tags = [normalize_tag(tag, self.case_sensitive) for tag in document.tags]

            for term in terms:
                score += self._title_score(title, term)
                score += self._body_score(body, term)
                score += self._tag_score(tags, term)

        if document.favorite:
            score += FAVORITE_BONUS

        if self.is_recent(document.created_at, now):
            score += RECENCY_BONUS

        return score

    def is_recent(self, created_at: datetime, now: Optional[datetime] = None) -> bool:
        """True if ``created_at`` is strictly inside the recency window."""
        reference = now or self.clock()

        # Compare naive with naive and aware with aware
        if created_at.tzinfo is not None and reference.tzinfo is None:
            reference = reference.astimezone(created_at.tzinfo)
        elif created_at.tzinfo is None and reference.tzinfo is not None:
            reference = reference.astimezone().replace(tzinfo=None)

        return created_at > reference - self.recency_window

    @staticmethod
    def _title_score(title: str, term: str) -> int:
        if term not in title:
            return 0

        score = TITLE_WEIGHT
        if title == term:
            score += EXACT_TITLE_BONUS
        if title.startswith(term):
            score += TITLE_PREFIX_BONUS
        return score

    @staticmethod
    def _body_score(body: str, term: str) -> int:
        if term not in body:
            return 0
        # str.count scans left to right without overlaps
        return BODY_WEIGHT + body.count(term)

    @staticmethod
    def _tag_score(tags: Sequence[str], term: str) -> int:
        score = 0
        for tag in tags:
            if term in tag:
                score += TAG_WEIGHT
                if tag == term:
                    score += EXACT_TAG_BONUS
        return score
