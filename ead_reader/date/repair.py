from __future__ import annotations

from ..context import RecordContext
from .format import END_OF_DAY, INSTANT_RE, instant, instant_key
from .parsers import COMPONENT
from .types import DateRange


def validate_range(rng: DateRange, ctx: RecordContext) -> DateRange:
    """Return rng, or a repaired copy if it runs backwards.

    An inverted range keeps its start and is cut off at the end of the start year.
    The problem is logged and recorded as "invalid date range" on the record.
    """

    start_key = instant_key(rng.start)
    if start_key <= instant_key(rng.end):
        return rng

    ctx.log(COMPONENT, f"Invalid date range {rng.start} - {rng.end}, record {ctx.describe()}")
    ctx.record_warning("invalid date range")
    year = INSTANT_RE.match(rng.start)[1]
    return DateRange(start=rng.start, end=instant(year, 12, 31, END_OF_DAY))
