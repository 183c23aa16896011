from __future__ import annotations

import datetime as dt
from enum import IntEnum
from typing import Optional


class Weekday(IntEnum):
    """Day of the week, numbered like ``datetime.date.weekday()`` (Monday = 0)."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @classmethod
    def of(cls, date: dt.date) -> Weekday:
        return cls(date.weekday())

    @property
    def abbr(self) -> str:
        return _NAMES[self][:3].capitalize()

    @property
    def full_name(self) -> str:
        return _NAMES[self].capitalize()


_NAMES: dict[Weekday, str] = {
    Weekday.MON: "monday",
    Weekday.TUE: "tuesday",
    Weekday.WED: "wednesday",
    Weekday.THU: "thursday",
    Weekday.FRI: "friday",
    Weekday.SAT: "saturday",
    Weekday.SUN: "sunday",
}

# full name and 3-letter abbreviation for every weekday
_TOKENS: dict[str, Weekday] = {
    **{name: day for day, name in _NAMES.items()},
    **{name[:3]: day for day, name in _NAMES.items()},
}


def parse_weekday(text: str) -> Optional[Weekday]:
    """
    Map an English weekday name to a :class:`Weekday`.

    Matching is case-insensitive and accepts the full name ("Monday") or the
    three-letter abbreviation ("mon").  Anything else, including the empty
    string, yields ``None``.  Surrounding whitespace is not stripped.
    """
    return _TOKENS.get(text.lower())
