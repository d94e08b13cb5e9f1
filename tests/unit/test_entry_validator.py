from __future__ import annotations

import pytest

from lottotracker.entries.validator import (
    DuplicateNumbersError,
    EmptyBatchError,
    EntryCandidate,
    EntryValidator,
    InvalidTokenError,
    OutOfRangeError,
    WrongCountError,
    parse_numbers,
)


def _validate(*texts: str, strict: bool = False):
    return EntryValidator(strict=strict).validate(EntryCandidate(text=text) for text in texts)


def test_reversed_input_is_sorted_ascending():
    outcome = _validate("6 5 4 3 2 1")

    assert outcome.ok
    (record,) = outcome.records
    assert record.numbers == (1, 2, 3, 4, 5, 6)
    assert record.checked == (False,) * 6
    assert record.plus_checked == (False,) * 6


@pytest.mark.parametrize("text", ["1 2 3 4 5", "1 2 3 4 5 6 7", "7", "1 2 3 4 5 6 7 8 9 10 11 12"])
def test_wrong_count_rejected(text):
    outcome = _validate(text)

    assert isinstance(outcome.failure, WrongCountError)
    assert outcome.records == ()


@pytest.mark.parametrize("text", ["1 2 3 4 5 50", "0 2 3 4 5 6", "-1 2 3 4 5 6"])
def test_out_of_range_rejected(text):
    outcome = _validate(text)

    assert isinstance(outcome.failure, OutOfRangeError)
    assert outcome.failure.code == "out_of_range"
    assert outcome.failure.message == "Liczby muszą być w zakresie 1-49!"


def test_duplicate_numbers_rejected():
    outcome = _validate("3 3 10 20 30 40")

    assert isinstance(outcome.failure, DuplicateNumbersError)
    assert outcome.records == ()


def test_blank_candidates_are_skipped():
    outcome = _validate("", "   ", "1 2 3 4 5 6")

    assert outcome.ok
    assert len(outcome.records) == 1


@pytest.mark.parametrize("texts", [(), ("",), ("  ", "\t")])
def test_all_blank_batch_reports_empty_batch(texts):
    outcome = _validate(*texts)

    assert isinstance(outcome.failure, EmptyBatchError)


def test_batch_is_all_or_nothing():
    outcome = _validate("1 2 3 4 5 6", "1 2 3 4 5 50", "7 8 9 10 11 12")

    assert outcome.records == ()
    assert isinstance(outcome.failure, OutOfRangeError)
    assert outcome.failure.position == 1


def test_plus_flag_carried_to_record():
    outcome = EntryValidator().validate(
        [EntryCandidate("10 20 30 40 41 42", has_plus=True), EntryCandidate("1 2 3 4 5 6")]
    )

    assert [record.has_plus for record in outcome.records] == [True, False]
    assert outcome.records[0].id != outcome.records[1].id


def test_permissive_mode_drops_non_numeric_tokens():
    outcome = _validate("1 2 3 four 5 6 7")

    assert outcome.ok
    assert outcome.records[0].numbers == (1, 2, 3, 5, 6, 7)


def test_strict_mode_rejects_non_numeric_tokens():
    outcome = _validate("1 2 3 four 5 6 7", strict=True)

    assert isinstance(outcome.failure, InvalidTokenError)
    assert "four" in outcome.failure.message


def test_parse_numbers_handles_mixed_whitespace_and_signs():
    assert parse_numbers(" 1\t2  +3\n-4 x 5.5 ") == [1, 2, 3, -4]


def test_raise_for_failure_reraises():
    outcome = _validate("1 2 3")

    with pytest.raises(WrongCountError, match="dokładnie 6"):
        outcome.raise_for_failure()
