from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from .types import DateRange

START_OF_DAY = "00:00:00"
END_OF_DAY = "23:59:59"

INSTANT_RE = re.compile(r"^(-?\d+)-(\d\d)-(\d\d)T(\d\d):(\d\d):(\d\d)Z$")
YEAR_RE = re.compile(r"(-?\d{4})")

# Year placeholders used by upstream data: unknown start / open-ended end.
UNKNOWN_START_YEAR = "-9999"
OPEN_END_YEAR = "9999"


def instant(year: str | int, month: str | int, day: str | int, time: str = START_OF_DAY) -> str:
    """Format an ISO-8601 UTC instant. Month and day are zero-padded; the year is kept as given."""
    return f"{year}-{int(month):02d}-{int(day):02d}T{time}Z"


def last_day_of_month(year: int, month: int) -> date:
    """Return the last calendar day of year-month.

    Raises ValueError for months outside 1-12 or years datetime cannot represent.
    """
    first = date(year, month, 1)
    if first.month == 12:
        return first.replace(day=31)
    return first.replace(month=first.month + 1) - timedelta(days=1)


def instant_key(value: str) -> tuple[int, ...]:
    """Sort key for an instant produced by the parser.

    Compares field by field as integers, so years of differing digit counts order correctly.
    """
    m = INSTANT_RE.match(value)
    if not m:
        raise ValueError(f"Not an ISO-8601 UTC instant: {value!r}")
    return tuple(int(g) for g in m.groups())


def extract_year(value: str) -> str:
    m = YEAR_RE.search(value)
    return m.group(1) if m else value


def validate_iso8601(value: str) -> str | None:
    """Return value if it names a real calendar timestamp, else None."""
    try:
        datetime.strptime(value, "%Y-%m-%dT%H:%M:%SZ")
    except ValueError:
        return None
    return value


def date_range_to_str(rng: DateRange | None) -> str:
    """Render a range as a Solr DateRangeField value."""
    if rng is None:
        return ""
    start = rng.start.split("T", 1)[0]
    end = rng.end.split("T", 1)[0]
    if start == end:
        return start
    return f"[{start} TO {end}]"


def year_range_label(rng: DateRange | None) -> str:
    """Build the "1950-1960" style label shown after titles.

    - an unknown start year (-9999) is left out: "-1960"
    - an end year equal to the start year is left out: "1950"
    - an open end year (9999) leaves a trailing dash: "1950-"
    """
    if rng is None:
        return ""
    start_year = extract_year(rng.start)
    end_year = extract_year(rng.end)

    label = ""
    if start_year != UNKNOWN_START_YEAR:
        label = start_year
    if end_year != start_year:
        label += "-"
        if end_year != OPEN_END_YEAR:
            label += end_year
    return label


def append_year_range(title: str, label: str) -> str:
    if not label:
        return title
    if title.endswith(label) or title.endswith(f"({label})"):
        return title
    return f"{title} ({label})"
