"""Entry use-cases: validate-then-insert, toggling and deletion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .record import CheckVariant, EntryRecord, toggle_checked
from .store import EntryStore, InMemoryEntryStore
from .validator import EntryCandidate, EntryValidator, ValidationOutcome

logger = logging.getLogger(__name__)


class EntryService:
    """Adapter the presentation layer calls for every entry action."""

    def __init__(
        self,
        store: EntryStore | None = None,
        validator: EntryValidator | None = None,
    ) -> None:
        self.store = store if store is not None else InMemoryEntryStore()
        self.validator = validator or EntryValidator()

    def list(self) -> tuple[EntryRecord, ...]:
        return self.store.records()

    def add(self, candidates: Iterable[EntryCandidate]) -> ValidationOutcome:
        """Validate a batch and insert its records only when all of them pass."""
        outcome = self.validator.validate(candidates)
        if outcome.ok:
            for record in outcome.records:
                self.store.insert(record)
            logger.info("Stored %d entries", len(outcome.records))
        return outcome

    def toggle(
        self,
        record_id: str,
        index: int,
        variant: CheckVariant | str = CheckVariant.PRIMARY,
    ) -> EntryRecord:
        updated = toggle_checked(self.store.get(record_id), index, variant)
        self.store.replace(updated)
        return updated

    def delete(self, record_id: str) -> None:
        self.store.delete(self.store.get(record_id))

    def delete_at(self, offsets: Sequence[int]) -> None:
        """Delete records by their positions in the current ordered list."""
        current = self.store.records()
        for offset in offsets:
            if not 0 <= offset < len(current):
                raise IndexError(f"offset must be in 0..{len(current) - 1}, got {offset}.")
        doomed = [current[offset] for offset in sorted(set(offsets))]
        for record in doomed:
            self.store.delete(record)

    def delete_all(self) -> None:
        self.store.delete_all()
