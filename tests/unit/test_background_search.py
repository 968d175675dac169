"""
Unit tests for background search execution.
"""

import threading
from unittest.mock import patch

import pytest

from note_search.exceptions import ConfigurationError, SearchCancelledError
from note_search.schemas.search import SearchRequest
from note_search.search.background import BackgroundSearcher


class TestBackgroundSearcher:
    """Tests for BackgroundSearcher and SearchHandle."""

    def test_result_matches_direct_search(self, engine):
        with BackgroundSearcher(engine, max_workers=2) as searcher:
            handle = searcher.submit(SearchRequest(query="java"))
            results = handle.result(timeout=5)

        assert results == engine.search("java")
        assert handle.done()
        assert not handle.cancelled()

    def test_simple_search(self, engine):
        with BackgroundSearcher(engine) as searcher:
            results = searcher.search("python").result(timeout=5)

        assert [r.document.id for r in results] == ["3"]

    def test_cancelled_result_discarded(self, engine):
        started = threading.Event()
        release = threading.Event()
        original_run = engine.run

        def slow_run(request):
            started.set()
            release.wait(timeout=5)
            return original_run(request)

        with patch.object(engine, "run", side_effect=slow_run):
            with BackgroundSearcher(engine, max_workers=1) as searcher:
                handle = searcher.submit(SearchRequest(query="java"))
                assert started.wait(timeout=5)

                handle.cancel()
                release.set()

                with pytest.raises(SearchCancelledError):
                    handle.result(timeout=5)

        # The evaluation ran to completion without touching the index
        assert engine.stats()["documents"] == 4

    def test_cancel_before_start(self, engine):
        release = threading.Event()
        original_run = engine.run

        def blocking_run(request):
            release.wait(timeout=5)
            return original_run(request)

        with patch.object(engine, "run", side_effect=blocking_run):
            with BackgroundSearcher(engine, max_workers=1) as searcher:
                first = searcher.submit(SearchRequest(query="java"))
                queued = searcher.submit(SearchRequest(query="python"))

                queued.cancel()
                release.set()

                assert len(first.result(timeout=5)) == 2
                with pytest.raises(SearchCancelledError):
                    queued.result(timeout=5)

    def test_search_error_propagates(self, engine):
        with patch.object(engine, "run", side_effect=RuntimeError("boom")):
            with BackgroundSearcher(engine, max_workers=1) as searcher:
                handle = searcher.submit(SearchRequest(query="java"))

                with pytest.raises(RuntimeError, match="boom"):
                    handle.result(timeout=5)

    def test_invalid_worker_count(self, engine):
        with pytest.raises(ConfigurationError):
            BackgroundSearcher(engine, max_workers=0)

    def test_default_workers_from_settings(self, engine):
        searcher = BackgroundSearcher(engine)
        try:
            assert searcher._executor._max_workers == engine.settings.search_workers
        finally:
            searcher.close()
