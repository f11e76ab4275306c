from __future__ import annotations

from .types import MAX_YEAR, MIN_YEAR

SUPPORTED_FORMATS: tuple[str, ...] = (
    "Single year: 1990",
    "Year-month: 1990-01 or Jan 1990",
    "Full date: 1990-01-01",
    "Year range: 1990-1995",
    "Year list: 1990,1992,1994",
)


class DateParseError(ValueError):
    """Base class for rejected date input.

    Every subclass keeps the offending pieces as attributes so callers can
    render their own message instead of parsing str(err).
    """

    kind = "date_parse_error"


class EmptyInputError(DateParseError):
    kind = "empty_input"

    def __init__(self) -> None:
        super().__init__("Date input cannot be empty")


class UnrecognizedFormatError(DateParseError):
    kind = "unrecognized_format"

    def __init__(self, value: str) -> None:
        self.value = value
        self.supported_formats = SUPPORTED_FORMATS
        lines = [f"Invalid date format: '{value}'", "", "Supported formats:"]
        lines += [f"  - {f}" for f in SUPPORTED_FORMATS]
        super().__init__("\n".join(lines))


class _BoundError(DateParseError):
    label = "Value"
    min: int
    max: int

    def __init__(self, value: int, *, field: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"{self.label} {value} is out of range ({field})\n"
            f"{self.label}s must be between {self.min} and {self.max}"
        )


class YearOutOfRangeError(_BoundError):
    kind = "year_out_of_range"
    label = "Year"
    min = MIN_YEAR
    max = MAX_YEAR


class MonthOutOfRangeError(_BoundError):
    kind = "month_out_of_range"
    label = "Month"
    min = 1
    max = 12


class DayOutOfRangeError(_BoundError):
    kind = "day_out_of_range"
    label = "Day"
    min = 1
    max = 31


class InvalidCalendarDateError(DateParseError):
    kind = "invalid_calendar_date"

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(
            f"Invalid date: {year}-{month:02d}-{day:02d}\n"
            "Please check that the day is valid for the given month and year."
        )


class InvalidRangeError(DateParseError):
    """Year range in the wrong order or wider than allowed.

    reason is "start_after_end" or "too_large".
    """

    kind = "invalid_range"

    START_AFTER_END = "start_after_end"
    TOO_LARGE = "too_large"

    def __init__(self, reason: str, start: int, end: int, *, max_span: int | None = None) -> None:
        self.reason = reason
        self.start = start
        self.end = end
        self.span = end - start + 1
        self.max_span = max_span
        if reason == self.TOO_LARGE:
            msg = (
                f"Year range too large: {self.span} years ({start}-{end})\n"
                f"Maximum supported range is {max_span} years"
            )
        else:
            msg = (
                f"Invalid year range: {start}-{end}\n"
                "Start year must be less than or equal to end year"
            )
        super().__init__(msg)


class DuplicateInListError(DateParseError):
    kind = "duplicate_in_list"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Duplicate year in list: {value}")


class EmptyListError(DateParseError):
    kind = "empty_list"

    def __init__(self) -> None:
        super().__init__("No valid years found in list")


class InvalidListMemberError(DateParseError):
    kind = "invalid_list_member"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid year format in list: '{value}'\n"
            "Each item in a comma-separated list must be a 4-digit year (e.g., 1990,1992,1994)"
        )


class UnknownMonthNameError(DateParseError):
    kind = "unknown_month_name"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid month name: '{value}'\n"
            "Supported month names: Jan, Feb, Mar, Apr, May, Jun, Jul, Aug, Sep, Oct, Nov, Dec\n"
            "(Full names like January, February, etc. are also supported)"
        )


class TimestampGenerationError(RuntimeError):
    """A validated date could not be turned into a timestamp (internal invariant broken)."""
