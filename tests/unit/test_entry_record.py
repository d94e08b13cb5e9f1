from __future__ import annotations

import pytest

from lottotracker.entries.record import CheckVariant, EntryRecord, toggle_checked


def test_create_sorts_and_defaults_flags():
    record = EntryRecord.create([42, 7, 1, 19, 33, 8], has_plus=True)

    assert record.numbers == (1, 7, 8, 19, 33, 42)
    assert record.checked == (False,) * 6
    assert record.plus_checked == (False,) * 6
    assert record.created_at.tzinfo is not None


@pytest.mark.parametrize(
    "numbers",
    [(1, 2, 3, 4, 5), (1, 1, 2, 3, 4, 5), (0, 1, 2, 3, 4, 5), (6, 5, 4, 3, 2, 1)],
)
def test_constructor_enforces_invariants(numbers):
    with pytest.raises(ValueError):
        EntryRecord(numbers=numbers)


def test_toggle_returns_new_snapshot_with_same_id():
    record = EntryRecord.create([1, 2, 3, 4, 5, 6])

    toggled = toggle_checked(record, 2)

    assert toggled.id == record.id
    assert toggled.created_at == record.created_at
    assert toggled.checked == (False, False, True, False, False, False)
    assert record.checked == (False,) * 6


def test_toggle_twice_restores_original():
    record = EntryRecord.create([1, 2, 3, 4, 5, 6], has_plus=True)

    for variant in CheckVariant:
        for index in range(6):
            assert toggle_checked(toggle_checked(record, index, variant), index, variant) == record


def test_toggle_secondary_touches_only_plus_flags():
    record = EntryRecord.create([1, 2, 3, 4, 5, 6], has_plus=True)

    toggled = toggle_checked(record, 5, "secondary")

    assert toggled.checked == (False,) * 6
    assert toggled.plus_checked == (False, False, False, False, False, True)


def test_toggle_secondary_without_plus_is_allowed():
    record = EntryRecord.create([1, 2, 3, 4, 5, 6])

    assert toggle_checked(record, 0, CheckVariant.SECONDARY).plus_checked[0] is True


@pytest.mark.parametrize("index", [-1, 6, 10])
def test_toggle_rejects_out_of_range_index(index):
    record = EntryRecord.create([1, 2, 3, 4, 5, 6])

    with pytest.raises(IndexError):
        toggle_checked(record, index)


def test_as_dict_is_json_friendly():
    record = EntryRecord.create([1, 2, 3, 4, 5, 6])

    payload = record.as_dict()

    assert payload["numbers"] == [1, 2, 3, 4, 5, 6]
    assert payload["checked"] == [False] * 6
    assert isinstance(payload["created_at"], str)
