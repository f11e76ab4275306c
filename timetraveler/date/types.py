from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

# Plausible commit years; git timestamps before the epoch are not portable.
MIN_YEAR = 1970
MAX_YEAR = 2030

MAX_RANGE_YEARS = 50

YEAR_COMMIT_COUNT = 4
MONTH_COMMIT_COUNT = 2


@dataclass(frozen=True)
class Year:
    """A single year, e.g. "1990"."""

    year: int


@dataclass(frozen=True)
class YearMonth:
    """A year and month without a day, e.g. "1990-01" or "Jan 1990"."""

    year: int
    month: int


@dataclass(frozen=True)
class FullDate:
    """A calendar-checked date, e.g. "1990-01-01"."""

    date: date


@dataclass(frozen=True)
class YearRange:
    """Inclusive span of years, e.g. "1990-1995"."""

    start: int
    end: int

    @property
    def years(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class YearList:
    """Comma-separated years in the order they were typed, e.g. "1995,1990"."""

    years: tuple[int, ...]


# Closed set: every consumer dispatches over exactly these five shapes.
DateInput = Union[Year, YearMonth, FullDate, YearRange, YearList]


@dataclass(frozen=True)
class TimestampConfig:
    """Controls how a parsed date expands into commit timestamps.

    - default_hour: hour used when distribution is off (and as the base for months / full dates).
    - distribute_times: spread commits over several hours of the day.
    - chronological_order: sort the final sequence ascending.
    """

    default_hour: int = 18
    distribute_times: bool = True
    chronological_order: bool = True

    def __post_init__(self) -> None:
        h = self.default_hour
        if isinstance(h, bool) or not isinstance(h, int):
            raise ValueError(f"default_hour must be an int, got {h!r}")
        if not 0 <= h <= 23:
            raise ValueError(f"default_hour must be between 0 and 23, got {self.default_hour}")
