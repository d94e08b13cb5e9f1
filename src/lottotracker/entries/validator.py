"""Validation of user-entered number sets into persist-ready records."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .record import ENTRY_SIZE, NUMBER_MAX, NUMBER_MIN, EntryRecord

logger = logging.getLogger(__name__)

_NUMERIC_TOKEN = re.compile(r"[+-]?[0-9]+")


class EntryValidationError(ValueError):
    """Base class for user-correctable entry validation failures."""

    code = "validation_error"
    default_message = "Nieprawidłowe dane."

    def __init__(self, message: str | None = None, position: int | None = None) -> None:
        self.message = message or self.default_message
        self.position = position
        super().__init__(self.message)


class WrongCountError(EntryValidationError):
    """Raised when a candidate does not hold exactly six numbers."""

    code = "wrong_count"
    default_message = "Wprowadź dokładnie 6 liczb!"


class OutOfRangeError(EntryValidationError):
    """Raised when a number falls outside 1..49."""

    code = "out_of_range"
    default_message = "Liczby muszą być w zakresie 1-49!"


class DuplicateNumbersError(EntryValidationError):
    """Raised when a candidate repeats a number."""

    code = "duplicate_numbers"
    default_message = "Liczby nie mogą się powtarzać!"


class EmptyBatchError(EntryValidationError):
    """Raised when every candidate in a batch was blank."""

    code = "empty_batch"
    default_message = "Nie wprowadzono żadnych liczb."


class InvalidTokenError(EntryValidationError):
    """Raised in strict mode when a token is not an integer."""

    code = "invalid_token"
    default_message = "Dozwolone są tylko liczby całkowite!"


@dataclass(frozen=True)
class EntryCandidate:
    """Raw user input for one ticket line."""

    text: str
    has_plus: bool = False


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one batch: records on success, failure otherwise."""

    records: tuple[EntryRecord, ...] = ()
    failure: EntryValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> None:
        if self.failure is not None:
            raise self.failure


def parse_numbers(text: str, *, strict: bool = False) -> list[int]:
    """Split whitespace-separated text into integers.

    Non-numeric tokens are dropped unless ``strict`` is set, in which case the
    first one raises :class:`InvalidTokenError`.
    """
    numbers: list[int] = []
    for token in text.split():
        if _NUMERIC_TOKEN.fullmatch(token):
            numbers.append(int(token))
        elif strict:
            raise InvalidTokenError(f"Nieprawidłowa wartość: '{token}'")
    return numbers


class EntryValidator:
    """Turn a batch of candidates into records, all or nothing."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def validate(self, candidates: Iterable[EntryCandidate]) -> ValidationOutcome:
        """Validate a batch; a single failing candidate rejects the whole batch."""
        records: list[EntryRecord] = []
        for position, candidate in enumerate(candidates):
            if not candidate.text.strip():
                continue
            try:
                numbers = self.check_numbers(candidate.text)
            except EntryValidationError as exc:
                exc.position = position
                logger.info("Rejected entry batch at position %d: %s", position, exc.code)
                return ValidationOutcome(failure=exc)
            records.append(EntryRecord.create(numbers, has_plus=candidate.has_plus))

        if not records:
            return ValidationOutcome(failure=EmptyBatchError())
        return ValidationOutcome(records=tuple(records))

    def check_numbers(self, text: str) -> list[int]:
        """Return the sorted numbers of one candidate or raise the first failure."""
        numbers = parse_numbers(text, strict=self.strict)
        if len(numbers) != ENTRY_SIZE:
            raise WrongCountError()
        if any(number < NUMBER_MIN or number > NUMBER_MAX for number in numbers):
            raise OutOfRangeError()
        if len(set(numbers)) != ENTRY_SIZE:
            raise DuplicateNumbersError()
        return sorted(numbers)
