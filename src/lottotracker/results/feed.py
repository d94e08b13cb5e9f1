"""Latest-draw feed: fetch, parse and publish on the owner's context."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from threading import Lock

from .fetcher import PAGE_URL, ResultFetcher
from .models import DrawResult
from .parser import ResultParser

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], object]
DrawObserver = Callable[[DrawResult], None]


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


class DrawResultFeed:
    """Owns the published :class:`DrawResult` and refreshes it asynchronously.

    ``dispatch`` is the delivery channel: it receives a zero-argument callable
    and must run it on the context that owns presentation state, e.g.
    ``loop.call_soon_threadsafe``. The default runs it inline on the fetch
    worker thread. Overlapping refreshes are not ordered; whichever completes
    last wins, and an in-flight refresh is never cancelled.
    """

    def __init__(
        self,
        fetcher: ResultFetcher | None = None,
        parser: ResultParser | None = None,
        *,
        dispatch: Dispatch | None = None,
    ) -> None:
        self.fetcher = fetcher or ResultFetcher()
        self.parser = parser or ResultParser()
        self._dispatch = dispatch or _run_inline
        self._lock = Lock()
        self._latest = DrawResult.sentinel()
        self._observers: list[DrawObserver] = []

    @property
    def latest(self) -> DrawResult:
        with self._lock:
            return self._latest

    def subscribe(self, observer: DrawObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def refresh(self, page_url: str = PAGE_URL) -> Future[DrawResult]:
        """Start one fetch; the returned future resolves after publication."""
        published: Future[DrawResult] = Future()
        fetched = self.fetcher.submit(page_url)
        fetched.add_done_callback(lambda done: self._on_fetched(done, published))
        return published

    def close(self) -> None:
        self.fetcher.close()

    def _on_fetched(self, fetched: Future[str], published: Future[DrawResult]) -> None:
        error = fetched.exception()
        if error is not None:
            logger.warning("Results fetch failed: %s", error)
            result = DrawResult.sentinel(str(error) or error.__class__.__name__)
            self._dispatch(lambda: self._publish(result, published))
            return

        raw_text = fetched.result()
        self._dispatch(lambda: self._publish(self.parser.parse(raw_text), published))

    def _publish(self, result: DrawResult, published: Future[DrawResult]) -> None:
        with self._lock:
            self._latest = result
        for observer in list(self._observers):
            try:
                observer(result)
            except Exception:
                logger.exception("Draw result observer %r failed", observer)
        published.set_result(result)
