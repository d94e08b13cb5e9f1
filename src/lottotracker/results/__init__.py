"""Official draw result acquisition: fetch, parse, publish."""

from .feed import DrawResultFeed
from .fetcher import PAGE_URL, FetchError, FetchErrorKind, ResultFetcher
from .models import SENTINEL_NUMBERS, DrawResult
from .parser import ResultParser

__all__ = [
    "PAGE_URL",
    "SENTINEL_NUMBERS",
    "DrawResult",
    "DrawResultFeed",
    "FetchError",
    "FetchErrorKind",
    "ResultFetcher",
    "ResultParser",
]
