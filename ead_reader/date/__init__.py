"""Date-range parsing for finding-aid unit dates.

Free text goes through an ordered cascade of patterns (`parsers`) and the
resulting range is checked for chronology (`repair`). Problems are downgraded to
record warnings; nothing here raises for bad input.
"""

from __future__ import annotations

from ..context import RecordContext
from .format import date_range_to_str, extract_year, year_range_label
from .parsers import RULES, parse_range
from .repair import validate_range
from .types import DateRange, RangeRule


def parse_date_range(text: str | None, ctx: RecordContext) -> DateRange | None:
    """Parse and validate a unitdate; the returned range always has start <= end."""
    rng = parse_range(text, ctx)
    if rng is None:
        return None
    return validate_range(rng, ctx)
