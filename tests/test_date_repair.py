from __future__ import annotations

from ead_reader.date import DateRange
from ead_reader.date.repair import validate_range


def test_ordered_range_is_returned_as_is(ctx) -> None:
    rng = DateRange(start="1950-01-01T00:00:00Z", end="1960-12-31T00:00:00Z")
    assert validate_range(rng, ctx) is rng
    assert ctx.warnings == []
    assert ctx.logged == []


def test_equal_instants_are_valid(ctx) -> None:
    rng = DateRange(start="1950-01-01T00:00:00Z", end="1950-01-01T00:00:00Z")
    assert validate_range(rng, ctx) is rng


def test_inverted_same_day_range(ctx) -> None:
    rng = DateRange(start="1950-03-04T00:00:00Z", end="1950-03-01T23:59:59Z")
    fixed = validate_range(rng, ctx)
    assert fixed == DateRange(start="1950-03-04T00:00:00Z", end="1950-12-31T23:59:59Z")
    assert fixed.start <= fixed.end
    assert ctx.warnings == ["invalid date range"]


def test_repair_keeps_start_year_digits(ctx) -> None:
    rng = DateRange(start="0950-01-01T00:00:00Z", end="0900-12-31T00:00:00Z")
    assert validate_range(rng, ctx).end == "0950-12-31T23:59:59Z"
