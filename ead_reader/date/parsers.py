from __future__ import annotations

import re

from ..context import RecordContext
from .format import END_OF_DAY, START_OF_DAY, instant, last_day_of_month
from .types import DateRange, RangeRule

COMPONENT = "Ead"

# Range halves are joined by a dash with at most one space on either side.
DASH = r" ?- ?"

# Inside dotted dates any single character separates the parts ("1.3.1950", "1/3/1950").
DAY_DATE = r"(?P<{p}day>\d\d?).(?P<{p}month>\d\d?).(?P<{p}year>\d\d\d\d)"
MONTH_DATE = r"(?P<{p}month>\d\d?).(?P<{p}year>\d\d\d\d)"

DAY_RANGE_RE = re.compile(DAY_DATE.format(p="s_") + DASH + DAY_DATE.format(p="e_"), re.ASCII)
MONTH_RANGE_RE = re.compile(MONTH_DATE.format(p="s_") + DASH + MONTH_DATE.format(p="e_"), re.ASCII)
YEAR_RANGE_RE = re.compile(r"(?P<s_year>\d\d\d\d)" + DASH + r"(?P<e_year>\d\d\d\d)", re.ASCII)
ISO_DATE_RE = re.compile(r"(?P<year>\d\d\d\d)-(?P<month>\d\d?)-(?P<day>\d\d?)", re.ASCII)
DAY_RE = re.compile(DAY_DATE.format(p=""), re.ASCII)
MONTH_RE = re.compile(r"(?P<month>\d\d?)\.(?P<year>\d\d\d\d)", re.ASCII)
NUMBER_RANGE_RE = re.compile(r"(?P<s_year>\d+)" + DASH + r"(?P<e_year>\d+)", re.ASCII)
YEAR_RE = re.compile(r"(?P<year>\d\d\d\d)", re.ASCII)


def _end_of_month(year: str, month: str, ctx: RecordContext) -> str | None:
    """Last instant of year-month, or None (with a recorded warning) if it is not a real month."""
    first = instant(year, month, 1).split("T", 1)[0]
    try:
        d = last_day_of_month(int(year), int(month))
    except ValueError:
        ctx.log(COMPONENT, f"Failed to parse date {first}, record {ctx.describe()}")
        ctx.record_warning("invalid end date")
        return None
    return instant(year, month, d.day, END_OF_DAY)


def _day_range(m: re.Match[str], ctx: RecordContext) -> DateRange:
    return DateRange(
        start=instant(m["s_year"], m["s_month"], m["s_day"]),
        end=instant(m["e_year"], m["e_month"], m["e_day"], END_OF_DAY),
    )


def _month_range(m: re.Match[str], ctx: RecordContext) -> DateRange | None:
    end = _end_of_month(m["e_year"], m["e_month"], ctx)
    if end is None:
        return None
    return DateRange(start=instant(m["s_year"], m["s_month"], 1), end=end)


def _year_range(m: re.Match[str], ctx: RecordContext) -> DateRange:
    # Year ranges end at midnight of Dec 31, not at the end of that day.
    # Downstream sort/search data relies on this boundary; keep it.
    return DateRange(
        start=instant(m["s_year"], 1, 1),
        end=instant(m["e_year"], 12, 31, START_OF_DAY),
    )


def _single_day(m: re.Match[str], ctx: RecordContext) -> DateRange:
    return DateRange(
        start=instant(m["year"], m["month"], m["day"]),
        end=instant(m["year"], m["month"], m["day"], END_OF_DAY),
    )


def _month(m: re.Match[str], ctx: RecordContext) -> DateRange | None:
    end = _end_of_month(m["year"], m["month"], ctx)
    if end is None:
        return None
    return DateRange(start=instant(m["year"], m["month"], 1), end=end)


def _year(m: re.Match[str], ctx: RecordContext) -> DateRange:
    return DateRange(
        start=instant(m["year"], 1, 1),
        end=instant(m["year"], 12, 31, END_OF_DAY),
    )


# Strictest first: looser patterns (bare numbers, lone years) also match inside stricter ones.
RULES: tuple[RangeRule, ...] = (
    RangeRule("day_range", DAY_RANGE_RE, _day_range),
    RangeRule("month_range", MONTH_RANGE_RE, _month_range),
    RangeRule("year_range", YEAR_RANGE_RE, _year_range),
    RangeRule("iso_date", ISO_DATE_RE, _single_day),
    RangeRule("day", DAY_RE, _single_day),
    RangeRule("month", MONTH_RE, _month),
    RangeRule("number_range", NUMBER_RANGE_RE, _year_range),
    RangeRule("year", YEAR_RE, _year),
)


def match_rule(text: str) -> tuple[RangeRule, re.Match[str]] | None:
    """Return the first rule whose pattern occurs in text, with its match."""
    for rule in RULES:
        m = rule.pattern.search(text)
        if m:
            return rule, m
    return None


def parse_range(text: str | None, ctx: RecordContext) -> DateRange | None:
    """Parse a free-text unitdate into a range (unvalidated).

    Returns None for empty input, a lone "-", text with no recognizable date, and
    month dates that do not exist (the latter also recorded as "invalid end date").
    """

    if not text or text == "-":
        return None

    hit = match_rule(text)
    if not hit:
        return None
    rule, m = hit
    return rule.synthesize(m, ctx)
