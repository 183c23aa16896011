# src/workdays/__init__.py
"""
workdays
~~~~~~~~

Business-day arithmetic over a configurable work calendar.  A WorkCalendar
holds the weekdays that are worked and a set of holiday dates; it can find
the date a run of work days ends on and count the work days in a range.

Basic usage::

    import datetime as dt
    from workdays import WorkCalendar

    cal = WorkCalendar()                            # Mon–Fri
    cal.add_holiday(dt.date(2023, 8, 23))
    end, span = cal.compute_end_date(dt.date(2023, 8, 21), 5)
    # → date(2023, 8, 28), timedelta(days=7)

Calendars can also be read from JSON or YAML::

    from workdays import parse

    cal = parse('''
    work_days: [Mon, Wed, Fri]
    holidays: [2023-12-25]
    ''')

Public API
----------
WorkCalendar         The main class.
Weekday              Day-of-week enum (Monday = 0).
parse_weekday        Weekday name → Weekday, or None.
parse / loads        JSON or YAML text → WorkCalendar.
dumps                WorkCalendar → JSON or YAML text.
WorkCalendarConfig   Intermediate form of a calendar document.
CalendarError        Base exception for all calendar-related errors.
"""

from __future__ import annotations

import logging

from workdays._exceptions import (
    CalendarError,
    EmptyConfigurationError,
    InvalidArgumentError,
    MalformedConfigurationError,
    NoValidWorkDaysError,
)
from workdays.calendar import WorkCalendar
from workdays.config import WorkCalendarConfig, dumps, loads, parse
from workdays.weekday import Weekday, parse_weekday

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "WorkCalendar",
    "WorkCalendarConfig",
    "Weekday",
    "parse_weekday",
    "parse",
    "loads",
    "dumps",
    "CalendarError",
    "InvalidArgumentError",
    "EmptyConfigurationError",
    "NoValidWorkDaysError",
    "MalformedConfigurationError",
]
