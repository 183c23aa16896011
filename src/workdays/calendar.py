from __future__ import annotations

import datetime as dt
import logging
import numbers
from typing import Iterable, Optional

import numpy as np

from ._exceptions import EmptyConfigurationError, InvalidArgumentError, NoValidWorkDaysError
from .weekday import Weekday, parse_weekday

logger = logging.getLogger(__name__)

_ONE_DAY = dt.timedelta(days=1)

DEFAULT_WORK_DAYS: frozenset[Weekday] = frozenset(
    [Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI]
)


class WorkCalendar:
    """
    Set of work weekdays plus a set of holiday dates.

    A date is worked when its weekday is a work day and the date is not a
    holiday.  Both date algorithms walk the calendar one day at a time.
    """

    def __init__(
        self,
        work_days: Optional[Iterable[Weekday]] = None,
        holidays: Optional[Iterable[dt.date]] = None,
    ) -> None:
        self._work_days: set[Weekday] = (
            set(DEFAULT_WORK_DAYS) if work_days is None
            else {Weekday(d) for d in work_days}
        )
        self._holidays: set[dt.date] = set(holidays) if holidays is not None else set()

    # ── work days ────────────────────────────────────────────────────────

    def add_work_day(self, day: Weekday) -> None:
        self._work_days.add(Weekday(day))

    def remove_work_day(self, day: Weekday) -> None:
        self._work_days.discard(Weekday(day))

    def set_work_days(self, days: str, sep: str = ",") -> None:
        """
        Replace all work days with the names listed in ``days``.

        Names are case-insensitive full names or abbreviations, e.g.
        ``"mon,Tue, wednesday"``.  Unrecognised names are skipped; if none
        is recognised the current work days are kept and
        :class:`NoValidWorkDaysError` is raised.
        """
        parsed: set[Weekday] = set()
        for item in days.split(sep):
            day = parse_weekday(item.strip())
            if day is None:
                logger.debug("Skipping unrecognised weekday name %r", item)
                continue
            parsed.add(day)

        if not parsed:
            raise NoValidWorkDaysError(f"No valid work days in {days!r}.")
        self._work_days = parsed

    def is_work_day(self, day: Weekday) -> bool:
        return day in self._work_days

    # ── holidays ─────────────────────────────────────────────────────────

    def add_holiday(self, date: dt.date) -> None:
        self._holidays.add(date)

    def add_holidays(self, dates: Iterable[dt.date]) -> None:
        self._holidays.update(dates)

    def remove_holiday(self, date: dt.date) -> None:
        self._holidays.discard(date)

    def is_holiday(self, date: dt.date) -> bool:
        return date in self._holidays

    def is_worked(self, date: dt.date) -> bool:
        return date.weekday() in self._work_days and date not in self._holidays

    # ── date arithmetic ──────────────────────────────────────────────────

    def compute_end_date(
        self, start_date: dt.date, days_worked: int
    ) -> tuple[dt.date, dt.timedelta]:
        """
        Date on which ``days_worked`` work days are complete, and the calendar
        span from ``start_date`` to that date.

        ``start_date`` counts as the first work day when it is worked, so five
        work days from a Monday end on the Friday, four days later.  Zero work
        days always returns ``(start_date, timedelta(0))``.

        The walk has no upper bound: a calendar whose holidays cover every
        future work day never returns.
        """
        if not isinstance(days_worked, numbers.Integral):
            raise InvalidArgumentError(
                f"days_worked must be an integer; got {days_worked!r}."
            )
        if days_worked < 0:
            raise InvalidArgumentError(
                f"days_worked must be non-negative; got {days_worked}."
            )
        if not self._work_days:
            raise EmptyConfigurationError("No work days defined.")

        current = start_date
        remaining = days_worked

        if self.is_worked(current):
            remaining -= 1

        while remaining > 0:
            current += _ONE_DAY
            if self.is_worked(current):
                remaining -= 1

        return current, current - start_date

    def work_days_between(self, start_date: dt.date, end_date: dt.date) -> int:
        """Number of worked dates in ``[start_date, end_date]``; 0 if the range is reversed."""
        count = 0
        for ordinal in range(start_date.toordinal(), end_date.toordinal() + 1):
            if self.is_worked(dt.date.fromordinal(ordinal)):
                count += 1
        return count

    # ── numpy interop ────────────────────────────────────────────────────

    @property
    def weekmask(self) -> np.ndarray:
        """Boolean work-day mask, Monday first."""
        mask = np.zeros(7, dtype=bool)
        mask[[int(d) for d in self._work_days]] = True
        return mask

    def busdaycalendar(self) -> np.busdaycalendar:
        """
        Equivalent :class:`numpy.busdaycalendar`, for use with
        ``np.busday_count`` / ``np.busday_offset``.

        NumPy counts half-open ranges, so
        ``np.busday_count(a, b + 1 day, busdaycal=cal.busdaycalendar())``
        equals ``cal.work_days_between(a, b)``.
        """
        if not self._work_days:
            raise EmptyConfigurationError("No work days defined.")
        holidays = np.array(sorted(self._holidays), dtype="datetime64[D]")
        return np.busdaycalendar(weekmask=self.weekmask, holidays=holidays)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def work_days(self) -> frozenset[Weekday]:
        return frozenset(self._work_days)

    @property
    def holidays(self) -> frozenset[dt.date]:
        return frozenset(self._holidays)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkCalendar):
            return NotImplemented
        return self._work_days == other._work_days and self._holidays == other._holidays

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        days = ",".join(d.abbr for d in sorted(self._work_days))
        return (
            f"WorkCalendar(work_days={days!r}, "
            f"holidays={len(self._holidays)})"
        )
