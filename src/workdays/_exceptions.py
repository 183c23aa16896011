class CalendarError(Exception):
    """Base class for all work-calendar errors."""


class InvalidArgumentError(CalendarError, ValueError):
    """A numeric argument is out of range (e.g. a negative day count)."""


class EmptyConfigurationError(CalendarError):
    """The calendar has no work days, so no work day can ever be consumed."""


class NoValidWorkDaysError(CalendarError, ValueError):
    """None of the supplied weekday names could be parsed."""


class MalformedConfigurationError(CalendarError, ValueError):
    """Configuration text is neither valid JSON nor valid YAML, or has the wrong shape."""
