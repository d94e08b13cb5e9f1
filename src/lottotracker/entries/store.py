"""Store contract for entry records and an in-memory implementation."""

from __future__ import annotations

from collections.abc import Callable
from threading import Lock
from typing import Protocol

from .record import EntryRecord

StoreObserver = Callable[[tuple[EntryRecord, ...]], None]


class EntryNotFoundError(KeyError):
    """Raised when no record with the requested id exists."""


class EntryStore(Protocol):
    """Opaque persistent collection the core inserts into and deletes from."""

    def insert(self, record: EntryRecord) -> None: ...

    def delete(self, record: EntryRecord) -> None: ...

    def delete_all(self) -> None: ...

    def replace(self, record: EntryRecord) -> None: ...

    def get(self, record_id: str) -> EntryRecord: ...

    def records(self) -> tuple[EntryRecord, ...]: ...

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]: ...


class InMemoryEntryStore:
    """Ordered, observable record collection kept in process memory."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._records: list[EntryRecord] = []
        self._observers: list[StoreObserver] = []

    def insert(self, record: EntryRecord) -> None:
        with self._lock:
            if any(existing.id == record.id for existing in self._records):
                raise ValueError(f"Entry {record.id} already stored.")
            self._records.append(record)
        self._notify()

    def delete(self, record: EntryRecord) -> None:
        with self._lock:
            self._records.pop(self._index_of(record.id))
        self._notify()

    def delete_all(self) -> None:
        with self._lock:
            self._records.clear()
        self._notify()

    def replace(self, record: EntryRecord) -> None:
        with self._lock:
            self._records[self._index_of(record.id)] = record
        self._notify()

    def get(self, record_id: str) -> EntryRecord:
        with self._lock:
            return self._records[self._index_of(record_id)]

    def records(self) -> tuple[EntryRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """Register an observer called with the full snapshot after each change."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, record_id: str) -> int:
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                return index
        raise EntryNotFoundError(record_id)

    def _notify(self) -> None:
        with self._lock:
            snapshot = tuple(self._records)
            observers = list(self._observers)
        for observer in observers:
            observer(snapshot)
