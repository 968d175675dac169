"""
Background execution of ranked searches.

Searches run on a small thread pool so interactive callers are not
blocked. Cancellation is advisory: a search that already started runs to
completion and its result is discarded.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from loguru import logger

from note_search.exceptions import ConfigurationError, SearchCancelledError
from note_search.schemas.search import ScoredDocument, SearchRequest
from note_search.search.engine import SearchEngine


class SearchHandle:
    """Handle on one submitted search."""

    def __init__(self, request: SearchRequest, future: Future):
        self.request = request
        self._future = future
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Request cancellation; never interrupts a running evaluation."""
        self._cancelled.set()
        if self._future.cancel():
            logger.debug(f"Search cancelled before start: {self.request.describe()}")

    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: Optional[float] = None) -> List[ScoredDocument]:
        """
        Wait for the ranked results.

        Args:
            timeout: Seconds to wait (None waits indefinitely)

        Returns:
            Ranked results

        Raises:
            SearchCancelledError: If the handle was cancelled
            concurrent.futures.TimeoutError: If ``timeout`` elapses
        """
        if self.cancelled():
            raise SearchCancelledError(f"Search cancelled: {self.request.describe()}")

        results = self._future.result(timeout=timeout)

        if self.cancelled():
            raise SearchCancelledError(f"Search cancelled: {self.request.describe()}")
        return results


class BackgroundSearcher:
    """
    Runs SearchRequests against a SearchEngine on worker threads.

    Use as a context manager, or call ``close()`` when done.
    """

    def __init__(self, engine: SearchEngine, max_workers: Optional[int] = None):
        """
        Initialize background searcher.

        Args:
            engine: Engine to run searches on
            max_workers: Worker threads (engine settings if omitted)
        """
        workers = engine.settings.search_workers if max_workers is None else max_workers
        if workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {workers}")

        self.engine = engine
        self._executor = ThreadPoolExecutor(
            max_workers=workers,
            thread_name_prefix="note-search"
        )

    def submit(self, request: SearchRequest) -> SearchHandle:
        """Queue a search and return its handle."""
        logger.debug(f"Submitting search: {request.describe()}")
        future = self._executor.submit(self._run, request)
        handle = SearchHandle(request, future)
        future.add_done_callback(lambda f: self._log_outcome(handle, f))
        return handle

    def search(self, query: str) -> SearchHandle:
        """Submit a simple all-fields search."""
        return self.submit(SearchRequest.simple(query))

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=not wait)

    def __enter__(self) -> "BackgroundSearcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _run(self, request: SearchRequest) -> List[ScoredDocument]:
        return self.engine.run(request)

    @staticmethod
    def _log_outcome(handle: SearchHandle, future: Future) -> None:
        if future.cancelled() or handle.cancelled():
            logger.info(f"Search operation cancelled: '{handle.request.query}'")
            return

        error = future.exception()
        if error is not None:
            logger.error(f"Search failed: {error}")
        else:
            logger.info(
                f"Search completed successfully. Found {len(future.result())} entries"
            )
