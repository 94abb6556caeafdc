# tests/test_layout.py

import pytest

from civcal import EpochDate, ParseError

JUNE_15TH_2017 = EpochDate.from_fields(2017, 6, 15)


@pytest.mark.parametrize(
    "layout,text",
    [
        ("2006-01-02", "2017-06-15"),
        ("02.01.2006", "15.06.2017"),
        ("20060102", "20170615"),
        ("1/2/2006", "6/15/2017"),
        ("Jan 2, 2006", "Jun 15, 2017"),
        ("January _2 2006", "June 15 2017"),
        ("Monday, 02-Jan-06", "Thursday, 15-Jun-17"),
        ("Mon Jan _2 15:04:05 MST 2006", "Thu Jun 15 23:59:59 CEST 2017"),
        ("2006-01-02 15:04:05", "2017-06-15 23:59:59"),
        ("2006-01-02T15:04:05Z07:00", "2017-06-15T10:00:00+02:00"),
        ("2006-01-02T15:04:05.000Z07:00", "2017-06-15T10:00:00.123Z"),
        ("2006-01-02 3:04PM", "2017-06-15 11:45PM"),
        ("2006-002", "2017-166"),
    ],
)
def test_parse(layout, text):
    assert EpochDate.parse(layout, text) == JUNE_15TH_2017


def test_month_names_are_case_insensitive():
    assert EpochDate.parse("Jan 2 2006", "JUN 15 2017") == JUNE_15TH_2017


def test_lowercase_month_word_is_literal():
    # "january" is not a token, so the month falls back to January.
    assert EpochDate.parse("january 2 2006", "january 15 2017") == EpochDate.from_fields(2017, 1, 15)
    with pytest.raises(ParseError):
        EpochDate.parse("january 2 2006", "june 15 2017")


def test_space_padded_day():
    assert EpochDate.parse("Jan _2 2006", "Jun  5 2017") == EpochDate.from_fields(2017, 6, 5)


def test_two_digit_years():
    assert EpochDate.parse("06-01-02", "69-01-01").year == 1969
    assert EpochDate.parse("06-01-02", "68-01-01").year == 2068


def test_missing_fields_default():
    assert EpochDate.parse("01-02", "06-15").fields() == (0, 6, 15)
    assert EpochDate.parse("2006", "2017").fields() == (2017, 1, 1)


def test_negative_and_long_years():
    d = EpochDate.from_fields(-44, 3, 15)
    assert EpochDate.parse("2006-01-02", str(d)) == d
    assert EpochDate.parse("2006-01-02", "12345-01-01").fields() == (12345, 1, 1)


@pytest.mark.parametrize(
    "layout,text",
    [
        ("2006-01-02", "2017-13-01"),
        ("2006-01-02", "2017-00-10"),
        ("2006-01-02", "2017-02-29"),
        ("2006-01-02", "2017-06-31"),
        ("2006-01-02", "2017/06/15"),
        ("2006-01-02", "2017-06-15x"),
        ("2006-01-02", ""),
        ("2006-01-02 15:04", "2017-06-15 24:00"),
        ("2006-01-02 15:04", "2017-06-15 12:60"),
        ("2006-002", "2017-366"),
        ("2006-01-02 002", "2017-06-15 167"),
        ("Jan 2 2006", "Foo 15 2017"),
        ("2006-01-02", "２０１７-０６-１５"),
        ("2006-01-02", "٢٠١٧-٠٦-١٥"),
        ("002", "１６６"),
    ],
)
def test_parse_errors(layout, text):
    with pytest.raises(ParseError) as info:
        EpochDate.parse(layout, text)
    assert info.value.text == text
    assert info.value.layout == layout
    assert isinstance(info.value, ValueError)


def test_leap_day_parses_in_leap_year():
    assert EpochDate.parse("2006-01-02", "2016-02-29").fields() == (2016, 2, 29)
    assert EpochDate.parse("2006-002", "2016-366").fields() == (2016, 12, 31)


@pytest.mark.parametrize(
    "layout,expected",
    [
        ("2006-01-02", "2017-06-15"),
        ("02/01/06", "15/06/17"),
        ("Monday, January 2, 2006", "Thursday, June 15, 2017"),
        ("Mon Jan _2", "Thu Jun 15"),
        ("2006-01-02 15:04:05", "2017-06-15 00:00:00"),
        ("2006-01-02T15:04:05Z07:00", "2017-06-15T00:00:00Z"),
        ("3:04PM", "12:00AM"),
        ("2006-002", "2017-166"),
        ("Month 01", "Month 06"),
        ("_2006", "_2017"),
    ],
)
def test_format(layout, expected):
    assert JUNE_15TH_2017.format(layout) == expected


def test_format_space_pad():
    assert EpochDate.from_fields(2017, 6, 5).format("Jan _2") == "Jun  5"
