"""Date expressions -> commit timestamps.

Two pure stages: parse_date_input() turns typed text ("1990", "Jan 1990",
"1990-1995", "1990,1994", ...) into one of the DateInput shapes, and
generate_timestamps() expands that shape into UTC datetimes.
"""

from .calendar import days_in_month, days_in_year, is_leap_year
from .errors import DateParseError, TimestampGenerationError
from .parsers import parse_date_input
from .timestamps import generate_timestamps
from .types import DateInput, FullDate, TimestampConfig, Year, YearList, YearMonth, YearRange
