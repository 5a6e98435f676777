from __future__ import annotations

from helpers import attempt

from fund_velocity.usecases.duplicate_index import DuplicateIndex


def test_earliest_record_is_not_a_duplicate() -> None:
    earlier = attempt("5", "9", "1.00", "2020-01-01T00:00:00Z")
    later = attempt("5", "9", "1.00", "2020-01-03T00:00:00Z")
    index = DuplicateIndex.build([later, earlier])
    assert index.is_duplicate(earlier) is False
    assert index.is_duplicate(later) is True


def test_identical_timestamps_are_not_duplicates() -> None:
    a = attempt("5", "9", "1.00", "2020-01-01T00:00:00Z")
    b = attempt("5", "9", "2.00", "2020-01-01T00:00:00Z")
    index = DuplicateIndex.build([a, b])
    assert index.is_duplicate(a) is False
    assert index.is_duplicate(b) is False


def test_unknown_key_is_not_a_duplicate() -> None:
    index = DuplicateIndex.build([attempt("5", "9", "1.00", "2020-01-01T00:00:00Z")])
    assert index.is_duplicate(attempt("6", "9", "1.00", "2020-01-02T00:00:00Z")) is False
