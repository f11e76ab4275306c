from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable

from .calendar import days_in_month, days_in_year
from .errors import MonthOutOfRangeError, TimestampGenerationError
from .types import (
    MONTH_COMMIT_COUNT,
    YEAR_COMMIT_COUNT,
    DateInput,
    FullDate,
    TimestampConfig,
    Year,
    YearList,
    YearMonth,
    YearRange,
)

logger = logging.getLogger(__name__)


def _at_hour(d: date, hour: int) -> datetime:
    hour = min(int(hour), 23)
    try:
        return datetime(d.year, d.month, d.day, hour, 0, 0, tzinfo=timezone.utc)
    except ValueError as e:
        raise TimestampGenerationError(f"Cannot build timestamp {d.isoformat()} {hour:02d}:00:00: {e}") from e


def _year_timestamps(year: int, config: TimestampConfig) -> list[datetime]:
    """Spread YEAR_COMMIT_COUNT commits evenly through the year.

    Days are Jan 1 + (D // 5) * (i + 1); with distribution the hours walk
    9, 12, 15, 18.
    """

    total = days_in_year(year)
    try:
        jan1 = date(year, 1, 1)
    except ValueError as e:
        raise TimestampGenerationError(f"Invalid year: {year}") from e

    out: list[datetime] = []
    for i in range(YEAR_COMMIT_COUNT):
        offset = min(total // (YEAR_COMMIT_COUNT + 1) * (i + 1), total - 1)
        hour = 9 + (i * 3) % 13 if config.distribute_times else config.default_hour
        out.append(_at_hour(jan1 + timedelta(days=offset), hour))

    if config.chronological_order:
        out.sort()
    return out


def _month_timestamps(year: int, month: int, config: TimestampConfig) -> list[datetime]:
    try:
        total = days_in_month(year, month)
    except MonthOutOfRangeError as e:
        raise TimestampGenerationError(f"Invalid month: {year}-{month}") from e

    out: list[datetime] = []
    for i in range(MONTH_COMMIT_COUNT):
        day = max(1, total // (MONTH_COMMIT_COUNT + 1) * (i + 1))
        hour = config.default_hour + (i * 2) % 8 if config.distribute_times else config.default_hour
        try:
            d = date(year, month, day)
        except ValueError as e:
            raise TimestampGenerationError(f"Invalid date: {year}-{month:02d}-{day:02d}") from e
        out.append(_at_hour(d, hour))
    return out


def _years_timestamps(years: Iterable[int], config: TimestampConfig) -> list[datetime]:
    out: list[datetime] = []
    for y in years:
        out.extend(_year_timestamps(y, config))
    return out


def generate_timestamps(date_input: DateInput, config: TimestampConfig | None = None) -> list[datetime]:
    """Expand a parsed date into UTC commit timestamps.

    Deterministic: the same (date_input, config) always yields the same list.
    - Year: 4 timestamps spread over the year.
    - YearMonth: 2 timestamps inside the month.
    - FullDate: 1 timestamp at config.default_hour.
    - YearRange / YearList: the Year rule per year (range ascending, list in typed order).

    With config.chronological_order the result is sorted ascending; otherwise
    generation order is kept.
    """

    config = config or TimestampConfig()

    if isinstance(date_input, Year):
        out = _year_timestamps(date_input.year, config)
    elif isinstance(date_input, YearMonth):
        out = _month_timestamps(date_input.year, date_input.month, config)
    elif isinstance(date_input, FullDate):
        out = [_at_hour(date_input.date, config.default_hour)]
    elif isinstance(date_input, YearRange):
        out = _years_timestamps(date_input.years, config)
    elif isinstance(date_input, YearList):
        out = _years_timestamps(date_input.years, config)
    else:
        raise TypeError(f"Unsupported date input: {date_input!r}")

    if config.chronological_order:
        out.sort()

    logger.debug("generated %d timestamp(s) for %r", len(out), date_input)
    return out
