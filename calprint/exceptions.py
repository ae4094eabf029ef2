"""Exception hierarchy for calendar printing."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class ConfigError(CalendarError):
    """Calendar configuration is invalid."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file could not be read or has the wrong structure."""

    pass


class UnknownHighlightError(ConfigError):
    """A date entry references a highlight that is not defined."""

    pass


class DuplicateDateError(ConfigError):
    """The same date appears more than once."""

    pass


class WeekdayMismatchError(ConfigError):
    """A date entry's weekday label disagrees with the actual weekday."""

    pass


class MalformedDateError(ConfigError):
    """A date token could not be parsed."""

    pass


class InvalidRangeError(CalendarError):
    """Range end precedes range start."""

    pass


class RenderError(CalendarError):
    """Error while writing the output document."""

    pass
