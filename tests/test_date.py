import time
from datetime import datetime, timezone

import pytest

from nodeish import date
from nodeish.date import Date


def test_now_is_close_to_clock():
    assert abs(date.now() / 1000 - time.time()) < 2
    assert date.now() % 1000 == 0


def test_module_fields_match_utc_clock():
    current = datetime.now(timezone.utc)
    assert date.year(True) == current.year
    assert date.month(True) == current.month - 1
    assert date.day(True) == date.monthday(True) == current.day
    assert date.weekday(True) == current.isoweekday() % 7
    assert date.yearday(True) == current.timetuple().tm_yday - 1


def test_fulltime_ends_with_newline():
    assert date.fulltime().endswith("\n")


def test_epoch_in_utc():
    d = Date(0, utc=True)
    assert d.year() == 1970
    assert d.month() == 0
    assert d.day() == 1
    assert d.yearday() == 0
    assert (d.hour(), d.minute(), d.second()) == (0, 0, 0)
    assert d.weekday() == datetime.fromtimestamp(0, timezone.utc).isoweekday() % 7


def test_stamp_is_in_milliseconds():
    assert Date(1234, utc=True).stamp() == 1234000


def test_fields_round_trip_utc():
    d = Date(2024, 1, 20, 12, 30, 45, utc=True)
    assert (d.year(), d.month(), d.day(), d.hour(), d.minute(), d.second()) == (2024, 1, 20, 12, 30, 45)
    again = Date(d.stamp() // 1000, utc=True)
    assert again.stamp() == d.stamp()
    assert again.day() == 20


def test_fields_round_trip_local():
    d = Date(2021, 5, 10, 8, 15, 0)
    assert (d.year(), d.month(), d.day(), d.hour(), d.minute()) == (2021, 5, 10, 8, 15)
    assert time.localtime(d.stamp() // 1000).tm_year == 2021


def test_setters_change_single_fields():
    d = Date(2020, 3, 15, 10, 20, 30, utc=True)
    d.set_year(2022)
    d.set_hour(5)
    d.set_minute(6)
    d.set_second(7)
    assert (d.year(), d.month(), d.day()) == (2022, 3, 15)
    assert (d.hour(), d.minute(), d.second()) == (5, 6, 7)


def test_day_overflow_rolls_into_next_month():
    d = Date(2023, 0, 15, utc=True)
    d.set_day(32)
    assert d.month() == 1
    assert d.day() == 1


def test_month_overflow_rolls_into_next_year():
    d = Date(2023, 4, 10, utc=True)
    d.set_month(12)
    assert d.year() == 2024
    assert d.month() == 0


def test_too_many_fields_rejected():
    with pytest.raises(TypeError):
        Date(2020, 1, 1, 1, 1, 1, 1, utc=True)