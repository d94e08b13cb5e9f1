"""Persisted shape of a recorded Lotto entry and its checked state."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

ENTRY_SIZE = 6
NUMBER_MIN = 1
NUMBER_MAX = 49

_UNCHECKED = (False,) * ENTRY_SIZE


class CheckVariant(str, Enum):
    """Which checked-state sequence a toggle applies to."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


def new_entry_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EntryRecord:
    """One recorded set of six numbers.

    Records are immutable snapshots. A toggle produces a new record with the
    same ``id``; the store replaces the old snapshot by id.
    """

    numbers: tuple[int, ...]
    has_plus: bool = False
    id: str = field(default_factory=new_entry_id)
    created_at: datetime = field(default_factory=utc_now)
    checked: tuple[bool, ...] = _UNCHECKED
    plus_checked: tuple[bool, ...] = _UNCHECKED

    def __post_init__(self) -> None:
        numbers = tuple(int(value) for value in self.numbers)
        if len(numbers) != ENTRY_SIZE:
            raise ValueError(f"Entry must contain {ENTRY_SIZE} numbers.")
        if any(number < NUMBER_MIN or number > NUMBER_MAX for number in numbers):
            raise ValueError(f"Entry numbers must be in range {NUMBER_MIN}~{NUMBER_MAX}.")
        if len(set(numbers)) != ENTRY_SIZE:
            raise ValueError("Entry numbers must be unique.")
        if list(numbers) != sorted(numbers):
            raise ValueError("Entry numbers must be sorted in ascending order.")
        for name in ("checked", "plus_checked"):
            flags = tuple(bool(flag) for flag in getattr(self, name))
            if len(flags) != ENTRY_SIZE:
                raise ValueError(f"{name} must contain {ENTRY_SIZE} flags.")
            object.__setattr__(self, name, flags)
        object.__setattr__(self, "numbers", numbers)
        object.__setattr__(self, "has_plus", bool(self.has_plus))

    @classmethod
    def create(cls, numbers: Sequence[int], has_plus: bool = False) -> EntryRecord:
        """Build a fresh record from already validated numbers."""
        return cls(numbers=tuple(sorted(int(value) for value in numbers)), has_plus=has_plus)

    def as_dict(self) -> dict[str, object]:
        """Convert record to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "numbers": list(self.numbers),
            "has_plus": self.has_plus,
            "checked": list(self.checked),
            "plus_checked": list(self.plus_checked),
        }


def toggle_checked(
    record: EntryRecord,
    index: int,
    variant: CheckVariant | str = CheckVariant.PRIMARY,
) -> EntryRecord:
    """Return a copy of ``record`` with one checked flag flipped."""
    variant = CheckVariant(variant)
    if not 0 <= index < ENTRY_SIZE:
        raise IndexError(f"index must be in 0..{ENTRY_SIZE - 1}, got {index}.")

    name = "checked" if variant is CheckVariant.PRIMARY else "plus_checked"
    flags = list(getattr(record, name))
    flags[index] = not flags[index]
    return replace(record, **{name: tuple(flags)})
