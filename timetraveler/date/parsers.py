from __future__ import annotations

import logging
import re
from datetime import date

from .errors import (
    DayOutOfRangeError,
    DuplicateInListError,
    EmptyInputError,
    EmptyListError,
    InvalidCalendarDateError,
    InvalidListMemberError,
    InvalidRangeError,
    MonthOutOfRangeError,
    UnknownMonthNameError,
    UnrecognizedFormatError,
    YearOutOfRangeError,
)
from .types import (
    MAX_RANGE_YEARS,
    MAX_YEAR,
    MIN_YEAR,
    DateInput,
    FullDate,
    Year,
    YearList,
    YearMonth,
    YearRange,
)

logger = logging.getLogger(__name__)

# Patterns run against stripped input with fullmatch(); ASCII keeps \d to 0-9.
YEAR_RE = re.compile(r"(?P<year>\d{4})", re.ASCII)
RANGE_RE = re.compile(r"(?P<start>\d{4})\s*-\s*(?P<end>\d{4})", re.ASCII)
FULL_DATE_RE = re.compile(r"(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})", re.ASCII)
YEAR_MONTH_RE = re.compile(r"(?P<year>\d{4})-(?P<month>\d{1,2})", re.ASCII)
MONTH_NAME_YEAR_RE = re.compile(r"(?P<month>[A-Za-z]{3,9})\s+(?P<year>\d{4})", re.ASCII)

MONTHS = {
    "january": 1,
    "jan": 1,
    "february": 2,
    "feb": 2,
    "march": 3,
    "mar": 3,
    "april": 4,
    "apr": 4,
    "may": 5,
    "june": 6,
    "jun": 6,
    "july": 7,
    "jul": 7,
    "august": 8,
    "aug": 8,
    "september": 9,
    "sept": 9,
    "sep": 9,
    "october": 10,
    "oct": 10,
    "november": 11,
    "nov": 11,
    "december": 12,
    "dec": 12,
}


def _check_year(year: int, field: str = "year") -> int:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise YearOutOfRangeError(year, field=field)
    return year


def _check_month(month: int) -> int:
    if month < 1 or month > 12:
        raise MonthOutOfRangeError(month, field="month")
    return month


def _check_day(day: int) -> int:
    if day < 1 or day > 31:
        raise DayOutOfRangeError(day, field="day")
    return day


def month_name_to_int(tok: str) -> int:
    """Resolve an English month name or abbreviation (case-insensitive)."""
    num = MONTHS.get(tok.strip().lower())
    if num is None:
        raise UnknownMonthNameError(tok)
    return num


def _parse_list(text: str) -> YearList:
    years: list[int] = []
    seen: set[int] = set()

    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        m = YEAR_RE.fullmatch(part)
        if not m:
            raise InvalidListMemberError(part)
        y = _check_year(int(m.group("year")))
        if y in seen:
            raise DuplicateInListError(y)
        seen.add(y)
        years.append(y)

    if not years:
        raise EmptyListError()
    return YearList(years=tuple(years))


def _parse_range(m: re.Match[str]) -> YearRange:
    start = _check_year(int(m.group("start")), field="start")
    end = _check_year(int(m.group("end")), field="end")
    if start > end:
        raise InvalidRangeError(InvalidRangeError.START_AFTER_END, start, end)
    if end - start + 1 > MAX_RANGE_YEARS:
        raise InvalidRangeError(InvalidRangeError.TOO_LARGE, start, end, max_span=MAX_RANGE_YEARS)
    return YearRange(start=start, end=end)


def _parse_full_date(m: re.Match[str]) -> FullDate:
    y = _check_year(int(m.group("year")))
    mo = _check_month(int(m.group("month")))
    da = _check_day(int(m.group("day")))
    try:
        d = date(y, mo, da)
    except ValueError:
        raise InvalidCalendarDateError(y, mo, da) from None
    return FullDate(date=d)


def parse_date_input(text: str) -> DateInput:
    """Classify and validate a typed date expression.

    Accepted shapes, tried in this order because they overlap lexically:
    list ("1990,1992"), range ("1990-1995"), full date ("1990-01-01"),
    year-month ("1990-01" / "Jan 1990"), single year ("1990").

    Raises a DateParseError subclass describing the first problem found.
    """

    s = (text or "").strip()
    if not s:
        raise EmptyInputError()

    # A comma only ever means a list, so nothing else gets a chance to match.
    if "," in s:
        lst = _parse_list(s)
        logger.debug("parsed %r as year list %s", s, lst.years)
        return lst

    m = RANGE_RE.fullmatch(s)
    if m:
        rng = _parse_range(m)
        logger.debug("parsed %r as year range %d-%d", s, rng.start, rng.end)
        return rng

    m = FULL_DATE_RE.fullmatch(s)
    if m:
        full = _parse_full_date(m)
        logger.debug("parsed %r as full date %s", s, full.date.isoformat())
        return full

    m = YEAR_MONTH_RE.fullmatch(s)
    if m:
        ym = YearMonth(year=_check_year(int(m.group("year"))), month=_check_month(int(m.group("month"))))
        logger.debug("parsed %r as year-month %d-%02d", s, ym.year, ym.month)
        return ym

    m = MONTH_NAME_YEAR_RE.fullmatch(s)
    if m:
        mo = month_name_to_int(m.group("month"))
        ym = YearMonth(year=_check_year(int(m.group("year"))), month=mo)
        logger.debug("parsed %r as year-month %d-%02d", s, ym.year, ym.month)
        return ym

    m = YEAR_RE.fullmatch(s)
    if m:
        y = Year(year=_check_year(int(m.group("year"))))
        logger.debug("parsed %r as year %d", s, y.year)
        return y

    raise UnrecognizedFormatError(s)
