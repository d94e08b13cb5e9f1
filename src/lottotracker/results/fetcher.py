"""HTTP fetcher for the official Lotto results page."""

from __future__ import annotations

import http.client
import logging
import ssl
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from lottotracker import __version__

PAGE_URL = "https://www.lotto.pl/lotto/wyniki-i-wygrane"
USER_AGENT = f"lottotracker/{__version__}"

logger = logging.getLogger(__name__)


def _create_ssl_context(verify: bool = True) -> ssl.SSLContext:
    """Create SSL context with optional certificate verification."""
    if verify:
        return ssl.create_default_context()
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


class FetchErrorKind(str, Enum):
    NETWORK = "network"
    NO_RESPONSE = "no_response"
    NO_DATA = "no_data"


class FetchError(RuntimeError):
    """Raised when the results page cannot be fetched or decoded."""

    def __init__(self, kind: FetchErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def network(cls, description: str) -> FetchError:
        return cls(FetchErrorKind.NETWORK, description)

    @classmethod
    def no_response(cls) -> FetchError:
        return cls(FetchErrorKind.NO_RESPONSE, "Brak odpowiedzi serwera")

    @classmethod
    def no_data(cls) -> FetchError:
        return cls(FetchErrorKind.NO_DATA, "Brak danych")


class ResultFetcher:
    """Fetch the results page once per call; no retries and no caching."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        verify_ssl: bool = True,
        max_workers: int = 2,
    ) -> None:
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be > 0.")
        if max_workers <= 0:
            raise ValueError("max_workers must be > 0.")
        self.timeout = None if timeout is None else float(timeout)
        self._ssl_context = _create_ssl_context(verify=verify_ssl)
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="result-fetch")

    def fetch(self, page_url: str = PAGE_URL) -> str:
        """Fetch ``page_url`` and return its decoded text, raising :class:`FetchError`."""
        request = Request(
            page_url,
            headers={
                "Accept": "text/html,application/xhtml+xml",
                "User-Agent": USER_AGENT,
            },
        )
        logger.info("Fetching results page %s", page_url)
        try:
            with self._open(request) as response:
                status = getattr(response, "status", None)
                if status is None:
                    raise FetchError.no_response()
                charset = response.headers.get_content_charset() or "utf-8"
                try:
                    raw = response.read()
                except http.client.IncompleteRead as exc:
                    raise FetchError.no_data() from exc
        except HTTPError as exc:
            raise FetchError.network(f"HTTP {exc.code}: {exc.reason}") from exc
        except URLError as exc:
            raise FetchError.network(str(exc.reason)) from exc
        except (TimeoutError, OSError) as exc:
            raise FetchError.network(str(exc) or exc.__class__.__name__) from exc
        except http.client.HTTPException as exc:
            # status line or headers that http.client cannot parse
            logger.warning("Malformed HTTP response from %s: %r", page_url, exc)
            raise FetchError.no_response() from exc

        if not raw:
            raise FetchError.no_data()
        try:
            return raw.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            raise FetchError.no_data() from exc

    def submit(self, page_url: str = PAGE_URL) -> Future[str]:
        """Run :meth:`fetch` on a worker thread; the caller is never blocked."""
        return self._executor.submit(self.fetch, page_url)

    def close(self) -> None:
        self._executor.shutdown(wait=False)

    def _open(self, request: Request):
        if self.timeout is None:
            return urlopen(request, context=self._ssl_context)
        return urlopen(request, timeout=self.timeout, context=self._ssl_context)
