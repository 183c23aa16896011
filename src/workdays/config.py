"""
Loading and dumping work calendars as JSON or YAML.

Both notations share one schema; either key may be omitted::

    work_days: [Monday, Wednesday, Friday]
    holidays: [2023-12-25, 2024-01-01]

Unrecognised weekday names and invalid dates are dropped rather than
rejected.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import yaml

from ._exceptions import MalformedConfigurationError
from .calendar import WorkCalendar
from .weekday import parse_weekday

logger = logging.getLogger(__name__)

_FIELDS = ("work_days", "holidays")


class _Loader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as text, so bad list items can be dropped."""


for _tag in ("bool", "int", "float", "timestamp"):
    _Loader.add_constructor(
        f"tag:yaml.org,2002:{_tag}", lambda loader, node: loader.construct_scalar(node)
    )


def _parse_date(text: str) -> Optional[dt.date]:
    # strict YYYY-MM-DD, calendar-checked
    try:
        return dt.datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def _string_list(key: str, value: Any) -> Optional[list[str]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedConfigurationError(
            f"{key!r} must be a list; got {type(value).__name__}."
        )
    items: list[str] = []
    for item in value:
        # dates from a caller-supplied mapping
        if isinstance(item, dt.date) and not isinstance(item, dt.datetime):
            item = item.isoformat()
        if not isinstance(item, str):
            raise MalformedConfigurationError(
                f"{key!r} entries must be strings; got {item!r}."
            )
        items.append(item)
    return items


@dataclass
class WorkCalendarConfig:
    """Deserialised calendar document, before names and dates are parsed."""

    work_days: Optional[list[str]] = None
    holidays: Optional[list[str]] = None

    @classmethod
    def from_mapping(cls, obj: Any) -> WorkCalendarConfig:
        if obj is None:
            obj = {}
        if not isinstance(obj, Mapping):
            raise MalformedConfigurationError(
                f"Calendar configuration must be a mapping; got {type(obj).__name__}."
            )
        return cls(**{key: _string_list(key, obj.get(key)) for key in _FIELDS})

    @classmethod
    def from_calendar(cls, calendar: WorkCalendar) -> WorkCalendarConfig:
        return cls(
            work_days=[d.full_name for d in sorted(calendar.work_days)],
            holidays=[d.isoformat() for d in sorted(calendar.holidays)],
        )

    def to_calendar(self) -> WorkCalendar:
        """
        Build a calendar, starting from the Monday-Friday default.

        A ``work_days`` list in which nothing parses yields a calendar with
        no work days at all.
        """
        calendar = WorkCalendar()

        if self.work_days is not None:
            days = []
            for name in self.work_days:
                day = parse_weekday(name)
                if day is None:
                    logger.debug("Dropping unrecognised weekday name %r", name)
                else:
                    days.append(day)
            calendar = WorkCalendar(work_days=days)

        if self.holidays is not None:
            for text in self.holidays:
                date = _parse_date(text)
                if date is None:
                    logger.debug("Dropping invalid holiday date %r", text)
                else:
                    calendar.add_holiday(date)

        return calendar

    def to_dict(self) -> dict[str, list[str]]:
        fields = {"work_days": self.work_days, "holidays": self.holidays}
        return {key: value for key, value in fields.items() if value is not None}


def parse(text: str) -> WorkCalendar:
    """
    Build a :class:`WorkCalendar` from JSON or YAML text.

    Text whose first non-blank character is ``{`` is read as JSON, anything
    else as YAML.  Raises :class:`MalformedConfigurationError` when the text
    cannot be decoded or does not have the expected shape.
    """
    if text.lstrip().startswith("{"):
        logger.debug("Reading calendar configuration as JSON")
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedConfigurationError(f"Invalid JSON: {exc}") from exc
    else:
        logger.debug("Reading calendar configuration as YAML")
        try:
            obj = yaml.load(text, Loader=_Loader)
        except yaml.YAMLError as exc:
            raise MalformedConfigurationError(f"Invalid YAML: {exc}") from exc

    return WorkCalendarConfig.from_mapping(obj).to_calendar()


loads = parse


def dumps(calendar: WorkCalendar, fmt: str = "yaml") -> str:
    data = WorkCalendarConfig.from_calendar(calendar).to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    raise ValueError(f"Unknown format {fmt!r}; expected 'yaml' or 'json'.")
