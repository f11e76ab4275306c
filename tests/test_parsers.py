from __future__ import annotations

from datetime import date

import pytest

from timetraveler.date.errors import (
    SUPPORTED_FORMATS,
    DateParseError,
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
from timetraveler.date.parsers import month_name_to_int, parse_date_input
from timetraveler.date.types import FullDate, Year, YearList, YearMonth, YearRange


def test_every_year_in_window_parses() -> None:
    for y in range(1970, 2031):
        assert parse_date_input(str(y)) == Year(y)


@pytest.mark.parametrize("text", ["1969", "2031", "1000", "9999"])
def test_year_out_of_window(text: str) -> None:
    with pytest.raises(YearOutOfRangeError) as ei:
        parse_date_input(text)
    assert ei.value.value == int(text)
    assert ei.value.field == "year"
    assert "out of range" in str(ei.value)


def test_year_whitespace_is_trimmed() -> None:
    assert parse_date_input(" 2000 ") == Year(2000)
    assert parse_date_input("\t1990\n") == Year(1990)


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_empty_input(text: str) -> None:
    with pytest.raises(EmptyInputError):
        parse_date_input(text)


def test_year_month_shapes_agree() -> None:
    want = YearMonth(1990, 1)
    assert parse_date_input("Jan 1990") == want
    assert parse_date_input("january 1990") == want
    assert parse_date_input("JANUARY 1990") == want
    assert parse_date_input("1990-01") == want
    assert parse_date_input("1990-1") == want


def test_month_names() -> None:
    assert parse_date_input("Dec 2000") == YearMonth(2000, 12)
    assert parse_date_input("Sept 1995") == YearMonth(1995, 9)
    assert parse_date_input("may 1980") == YearMonth(1980, 5)
    assert month_name_to_int("October") == 10


def test_unknown_month_name() -> None:
    with pytest.raises(UnknownMonthNameError) as ei:
        parse_date_input("Xyz 1990")
    assert ei.value.value == "Xyz"


def test_month_name_year_still_bounded() -> None:
    with pytest.raises(YearOutOfRangeError):
        parse_date_input("Jan 1960")


@pytest.mark.parametrize("text, bad", [("1990-13", 13), ("1990-00", 0), ("1990-13-01", 13)])
def test_month_out_of_range(text: str, bad: int) -> None:
    with pytest.raises(MonthOutOfRangeError) as ei:
        parse_date_input(text)
    assert ei.value.value == bad
    assert ei.value.field == "month"


def test_full_date() -> None:
    assert parse_date_input("1990-01-01") == FullDate(date(1990, 1, 1))
    assert parse_date_input("2000-2-29") == FullDate(date(2000, 2, 29))


def test_day_out_of_generic_bounds() -> None:
    with pytest.raises(DayOutOfRangeError) as ei:
        parse_date_input("1990-01-32")
    assert ei.value.value == 32


@pytest.mark.parametrize("text", ["1990-02-30", "1990-02-29", "1990-04-31"])
def test_invalid_calendar_date(text: str) -> None:
    with pytest.raises(InvalidCalendarDateError) as ei:
        parse_date_input(text)
    assert (ei.value.year, ei.value.month) == tuple(int(x) for x in text.split("-")[:2])


def test_range() -> None:
    assert parse_date_input("1990-1995") == YearRange(1990, 1995)
    assert parse_date_input(" 2000 - 2005 ") == YearRange(2000, 2005)
    assert parse_date_input("1990-1990") == YearRange(1990, 1990)
    assert parse_date_input("1970-2019") == YearRange(1970, 2019)  # exactly 50 years


def test_range_start_after_end() -> None:
    with pytest.raises(InvalidRangeError) as ei:
        parse_date_input("1995-1990")
    assert ei.value.reason == InvalidRangeError.START_AFTER_END
    assert (ei.value.start, ei.value.end) == (1995, 1990)


def test_range_too_large() -> None:
    with pytest.raises(InvalidRangeError) as ei:
        parse_date_input("1970-2025")
    assert ei.value.reason == InvalidRangeError.TOO_LARGE
    assert ei.value.span == 56
    assert ei.value.max_span == 50


def test_range_end_out_of_window() -> None:
    with pytest.raises(YearOutOfRangeError) as ei:
        parse_date_input("1990-2031")
    assert ei.value.field == "end"


def test_list_keeps_typed_order() -> None:
    assert parse_date_input("1990,1992,1994") == YearList((1990, 1992, 1994))
    assert parse_date_input(" 1995 , 1990 ") == YearList((1995, 1990))
    assert parse_date_input("1990,,1992,") == YearList((1990, 1992))
    assert parse_date_input("1990,") == YearList((1990,))


def test_list_duplicate() -> None:
    with pytest.raises(DuplicateInListError) as ei:
        parse_date_input("1990,1990")
    assert ei.value.value == 1990


@pytest.mark.parametrize("text", [",", " , , "])
def test_list_empty(text: str) -> None:
    with pytest.raises(EmptyListError):
        parse_date_input(text)


@pytest.mark.parametrize("text, member", [("1990,abc", "abc"), ("1990,1990-01", "1990-01"), ("90,1991", "90")])
def test_list_invalid_member(text: str, member: str) -> None:
    with pytest.raises(InvalidListMemberError) as ei:
        parse_date_input(text)
    assert ei.value.value == member


def test_list_member_out_of_window() -> None:
    with pytest.raises(YearOutOfRangeError):
        parse_date_input("1990,1969")


@pytest.mark.parametrize("text", ["invalid", "abc", "19900", "1990/01/01", "1990-01-01-01", "Jan-1990", "١٩٩٠"])
def test_unrecognized_format_lists_supported_shapes(text: str) -> None:
    with pytest.raises(UnrecognizedFormatError) as ei:
        parse_date_input(text)
    err = ei.value
    assert err.supported_formats == SUPPORTED_FORMATS
    assert len(err.supported_formats) == 5
    assert "Supported formats" in str(err)
    for shape in SUPPORTED_FORMATS:
        assert shape in str(err)


def test_errors_are_value_errors_with_kind() -> None:
    with pytest.raises(ValueError) as ei:
        parse_date_input("1995-1990")
    assert isinstance(ei.value, DateParseError)
    assert ei.value.kind == "invalid_range"
