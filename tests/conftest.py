"""
pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest

from note_search.config import Settings
from note_search.schemas.document import Document
from note_search.search.engine import SearchEngine
from note_search.search.inverted_index import InvertedIndex

# Fixed "now" so recency bonuses are predictable
NOW = datetime(2024, 6, 15, 12, 0, 0)
OLD = datetime(2024, 5, 1, 9, 30, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def settings():
    """Settings isolated from the environment and .env files"""
    return Settings(_env_file=None)


@pytest.fixture
def java_doc():
    """Programming entry"""
    return Document(
        id="1",
        title="Java Programming",
        body="Learning Java is fun",
        tags=["programming"],
        created_at=OLD,
    )


@pytest.fixture
def personal_doc():
    """Personal entry"""
    return Document(
        id="2",
        title="Personal Thoughts",
        body="Today was a good day",
        tags=["personal"],
        created_at=OLD,
    )


@pytest.fixture
def sample_documents(java_doc, personal_doc):
    """Small mixed corpus"""
    return [
        java_doc,
        personal_doc,
        Document(
            id="3",
            title="Python notes",
            body="Python and Java both run on servers. Python python python.",
            tags=["programming", "python"],
            created_at=datetime(2024, 6, 10, 8, 0, 0),
            favorite=True,
        ),
        Document(
            id="4",
            title="Holiday",
            body="Went hiking in the mountains",
            tags=["travel", "ok"],
            created_at=datetime(2024, 4, 20, 18, 0, 0),
            favorite=True,
        ),
    ]


@pytest.fixture
def index(sample_documents):
    """Index loaded with the sample corpus"""
    idx = InvertedIndex()
    idx.index_documents(sample_documents)
    return idx


@pytest.fixture
def engine(sample_documents, settings):
    """Engine over the sample corpus with a fixed clock"""
    eng = SearchEngine(settings=settings, clock=lambda: NOW)
    eng.rebuild(sample_documents)
    return eng
