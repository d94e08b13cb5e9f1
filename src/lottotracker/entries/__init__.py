"""Recorded entries: validation, checked state and the store contract."""

from .record import CheckVariant, EntryRecord, toggle_checked
from .service import EntryService
from .store import EntryNotFoundError, EntryStore, InMemoryEntryStore
from .validator import (
    DuplicateNumbersError,
    EmptyBatchError,
    EntryCandidate,
    EntryValidationError,
    EntryValidator,
    InvalidTokenError,
    OutOfRangeError,
    ValidationOutcome,
    WrongCountError,
    parse_numbers,
)

__all__ = [
    "CheckVariant",
    "DuplicateNumbersError",
    "EmptyBatchError",
    "EntryCandidate",
    "EntryNotFoundError",
    "EntryRecord",
    "EntryService",
    "EntryStore",
    "EntryValidationError",
    "EntryValidator",
    "InMemoryEntryStore",
    "InvalidTokenError",
    "OutOfRangeError",
    "ValidationOutcome",
    "WrongCountError",
    "parse_numbers",
    "toggle_checked",
]
