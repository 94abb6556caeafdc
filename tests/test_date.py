# tests/test_date.py

from datetime import date, datetime, timedelta, timezone

import pytest

from civcal import ConstructionError, EpochDate, IsoWeek, Weekday
from civcal.core.time import MAX_DAY, MIN_DAY

THURSDAY_JUNE_15TH_2017 = EpochDate(736494)


def D(y, m, d):
    return EpochDate.from_fields(y, m, d)


def test_from_fields():
    assert D(2017, 6, 15) == THURSDAY_JUNE_15TH_2017
    assert THURSDAY_JUNE_15TH_2017.fields() == (2017, 6, 15)
    d = THURSDAY_JUNE_15TH_2017
    assert (d.year, d.month, d.day) == (2017, 6, 15)
    assert int(d) == 736494


def test_constructor_rejects_non_int():
    with pytest.raises(TypeError):
        EpochDate(1.5)
    with pytest.raises(TypeError):
        EpochDate(True)


def test_out_of_range():
    EpochDate(MAX_DAY)
    EpochDate(MIN_DAY)
    with pytest.raises(ConstructionError):
        EpochDate(MAX_DAY + 1)
    with pytest.raises(ConstructionError):
        EpochDate(MAX_DAY) + 1
    with pytest.raises(ConstructionError):
        EpochDate(MIN_DAY).add(days=-1)
    with pytest.raises(ConstructionError):
        D(2017, 13, 1)


def test_weekday():
    assert THURSDAY_JUNE_15TH_2017.weekday() == Weekday.THURSDAY
    assert EpochDate(0).weekday() == Weekday.MONDAY
    assert EpochDate(-1).weekday() == Weekday.SUNDAY
    assert THURSDAY_JUNE_15TH_2017.is_weekday(Weekday.THURSDAY)
    assert str(Weekday.THURSDAY) == "Thursday"
    assert THURSDAY_JUNE_15TH_2017.iso_week() == IsoWeek(2017, 24)


def test_ordering_and_difference():
    a = D(2017, 1, 1)
    b = D(2017, 6, 15)
    assert a < b and b > a
    assert a.before(b) and b.after(a)
    assert not a.after(b)
    assert a.compare(b) == -1 and b.compare(a) == 1 and a.compare(a) == 0
    assert b.sub(a) == 165
    assert a.sub(b) == -165
    assert b - a == 165
    assert a + 165 == b
    assert 165 + a == b
    assert b - 165 == a
    assert sorted([b, a]) == [a, b]
    assert len({a, D(2017, 1, 1)}) == 1


@pytest.mark.parametrize(
    "start,delta,expected",
    [
        ((2017, 1, 31), (0, 1, 0), (2017, 3, 3)),
        ((2016, 1, 31), (0, 1, 0), (2016, 3, 2)),
        ((2017, 1, 31), (0, 1, 1), (2017, 3, 4)),
        ((2017, 3, 31), (0, -1, 0), (2017, 3, 3)),
        ((2017, 12, 15), (0, 1, 0), (2018, 1, 15)),
        ((2017, 12, 15), (0, -12, 0), (2016, 12, 15)),
        ((2017, 1, 10), (0, 13, 0), (2018, 2, 10)),
        ((2016, 2, 29), (1, 0, 0), (2017, 3, 1)),
        ((2017, 1, 1), (0, 0, -1), (2016, 12, 31)),
        ((2017, 6, 15), (-2017, 0, 0), (0, 6, 15)),
        ((2017, 6, 15), (1, 2, 3), (2018, 8, 18)),
    ],
)
def test_add(start, delta, expected):
    assert D(*start).add(*delta) == D(*expected)


def test_add_is_immutable():
    d = D(2017, 6, 15)
    d.add(days=10)
    assert d == D(2017, 6, 15)
    with pytest.raises(Exception):
        d.days = 3


def test_previous_or_same_weekday():
    d = THURSDAY_JUNE_15TH_2017
    assert d.previous_or_same_weekday(Weekday.THURSDAY) == d
    assert d.previous_or_same_weekday(Weekday.MONDAY) == D(2017, 6, 12)
    assert d.previous_or_same_weekday(Weekday.FRIDAY) == D(2017, 6, 9)
    assert d.previous_or_same_weekday(Weekday.SUNDAY) == D(2017, 6, 11)


def test_previous_weekday_steps_back_at_least_one_day():
    d = THURSDAY_JUNE_15TH_2017
    assert d.previous_weekday(Weekday.THURSDAY) == D(2017, 6, 8)
    assert d.previous_weekday(Weekday.WEDNESDAY) == D(2017, 6, 14)
    assert d.previous_weekday(Weekday.FRIDAY) == D(2017, 6, 9)
    for target in Weekday:
        prev = d.previous_weekday(target)
        assert 1 <= d - prev <= 7
        assert prev.weekday() == target


def test_today_uses_injected_clock():
    assert EpochDate.today(lambda: datetime(2017, 6, 15, 23, 59)) == THURSDAY_JUNE_15TH_2017
    assert EpochDate.today(lambda: date(2017, 6, 15)) == THURSDAY_JUNE_15TH_2017
    cet = timezone(timedelta(hours=2))
    assert EpochDate.today(lambda: datetime(2017, 6, 14, 22, 30, tzinfo=timezone.utc).astimezone(cet)) == THURSDAY_JUNE_15TH_2017


def test_text_and_json():
    assert str(THURSDAY_JUNE_15TH_2017) == "2017-06-15"
    assert THURSDAY_JUNE_15TH_2017.to_json() == '"2017-06-15"'
    assert str(D(5, 1, 2)) == "0005-01-02"
    assert str(D(-1, 1, 1)) == "-0001-01-01"


def test_stdlib_interop():
    d = THURSDAY_JUNE_15TH_2017
    assert d.to_date() == date(2017, 6, 15)
    assert EpochDate.from_date(date(2017, 6, 15)) == d
    assert EpochDate.from_datetime(datetime(2017, 6, 15, 12)) == d
    assert d.to_datetime(8, 30) == datetime(2017, 6, 15, 8, 30)
    with pytest.raises(ConstructionError):
        D(0, 1, 1).to_date()


def test_unix():
    assert D(1970, 1, 1).unix() == 0
    assert D(1970, 1, 2).unix() == 86400
    assert D(1970, 1, 2).unix(timezone(timedelta(hours=1))) == 86400 - 3600
