from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Literal

if TYPE_CHECKING:
    from ..context import RecordContext

RuleName = Literal[
    "day_range",
    "month_range",
    "year_range",
    "iso_date",
    "day",
    "month",
    "number_range",
    "year",
]


@dataclass(frozen=True)
class DateRange:
    """A normalized range as a pair of ISO-8601 UTC instants (second precision)."""

    start: str  # e.g. 1950-03-01T00:00:00Z
    end: str


@dataclass(frozen=True)
class RangeRule:
    """One step of the parse cascade.

    `synthesize` turns the regex match into a range. It may return None when the
    matched text cannot be turned into real dates; that ends the cascade.
    """

    name: RuleName
    pattern: re.Pattern[str]
    synthesize: Callable[[re.Match[str], RecordContext], DateRange | None]
