"""Current date and time fields, and a mutable date value.

Months, week days and year days are counted from zero; week days start on
Sunday.  Years are calendar years.
"""

from __future__ import annotations

import datetime as _dt
import time

_FIELDS = ("year", "month", "day", "hour", "minute", "second")
_EPOCH_ORDINAL = _dt.date(1970, 1, 1).toordinal()


def _struct(stamp: float, utc: bool) -> time.struct_time:
    return time.gmtime(stamp) if utc else time.localtime(stamp)


def _now(utc: bool) -> time.struct_time:
    return _struct(time.time(), utc)


def now() -> int:
    """Milliseconds since the epoch, at whole-second resolution."""
    return int(time.time()) * 1000


def year(utc: bool = False) -> int:
    return _now(utc).tm_year


def month(utc: bool = False) -> int:
    return _now(utc).tm_mon - 1


def day(utc: bool = False) -> int:
    return _now(utc).tm_mday


def hour(utc: bool = False) -> int:
    return _now(utc).tm_hour


def minute(utc: bool = False) -> int:
    return _now(utc).tm_min


def second(utc: bool = False) -> int:
    return _now(utc).tm_sec


def weekday(utc: bool = False) -> int:
    return (_now(utc).tm_wday + 1) % 7


def monthday(utc: bool = False) -> int:
    return _now(utc).tm_mday


def yearday(utc: bool = False) -> int:
    return _now(utc).tm_yday - 1


def fulltime() -> str:
    """The current local time in ``ctime`` form, newline included."""
    return time.ctime() + "\n"


class Date:
    """A point in time, read and changed field by field.

    ``Date()`` is now, ``Date(stamp)`` is a Unix time in seconds, and
    ``Date(year, month, day, hour, minute, second)`` (any leading part of it)
    replaces those fields of the current time.  Out-of-range fields roll over.
    """

    def __init__(self, *args: int, utc: bool = False) -> None:
        self._stamp = int(time.time())
        self._utc = utc
        self.set_time(*args, utc=utc)

    def __repr__(self) -> str:
        return f"Date({self._stamp}, utc={self._utc!r})"

    def set_time(self, *args: int, utc: bool = False) -> None:
        if len(args) > len(_FIELDS):
            raise TypeError(f"set_time() takes at most {len(_FIELDS)} fields")
        self._utc = utc
        if len(args) == 1:
            self._stamp = int(args[0])
        elif args:
            fields = self._fields()
            fields.update(zip(_FIELDS, args))
            self._stamp = self._compose(fields)

    def _fields(self) -> dict[str, int]:
        st = _struct(self._stamp, self._utc)
        return {
            "year": st.tm_year,
            "month": st.tm_mon - 1,
            "day": st.tm_mday,
            "hour": st.tm_hour,
            "minute": st.tm_min,
            "second": st.tm_sec,
        }

    def _compose(self, fields: dict[str, int]) -> int:
        years, mon = divmod(fields["month"], 12)
        yr = fields["year"] + years
        if self._utc:
            days = _dt.date(yr, mon + 1, 1).toordinal() - _EPOCH_ORDINAL + fields["day"] - 1
            return ((days * 24 + fields["hour"]) * 60 + fields["minute"]) * 60 + fields["second"]
        return int(
            time.mktime(
                (yr, mon + 1, fields["day"], fields["hour"], fields["minute"], fields["second"], 0, 0, -1)
            )
        )

    def _set(self, name: str, value: int) -> None:
        fields = self._fields()
        fields[name] = value
        self._stamp = self._compose(fields)

    def set_year(self, year: int) -> None:
        self._set("year", year)

    def set_month(self, month: int) -> None:
        self._set("month", month)

    def set_day(self, day: int) -> None:
        self._set("day", day)

    def set_hour(self, hour: int) -> None:
        self._set("hour", hour)

    def set_minute(self, minute: int) -> None:
        self._set("minute", minute)

    def set_second(self, second: int) -> None:
        self._set("second", second)

    def fulltime(self) -> str:
        return time.ctime(self._stamp) + "\n"

    def year(self) -> int:
        return _struct(self._stamp, self._utc).tm_year

    def month(self) -> int:
        return _struct(self._stamp, self._utc).tm_mon - 1

    def day(self) -> int:
        return _struct(self._stamp, self._utc).tm_mday

    def monthday(self) -> int:
        return _struct(self._stamp, self._utc).tm_mday

    def weekday(self) -> int:
        return (_struct(self._stamp, self._utc).tm_wday + 1) % 7

    def yearday(self) -> int:
        return _struct(self._stamp, self._utc).tm_yday - 1

    def hour(self) -> int:
        return _struct(self._stamp, self._utc).tm_hour

    def minute(self) -> int:
        return _struct(self._stamp, self._utc).tm_min

    def second(self) -> int:
        return _struct(self._stamp, self._utc).tm_sec

    def stamp(self) -> int:
        """Milliseconds since the epoch."""
        return self._stamp * 1000