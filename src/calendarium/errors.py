class CalendarError(Exception):
    """Base error."""


class OutOfRangeDate(CalendarError, ValueError):
    """Raised for a date outside the queried liturgical year or before the
    calendar system became effective.
    """


class InvalidArguments(CalendarError, TypeError):
    """Raised when a date cannot be built from the given arguments."""


class FrozenSanctoraleError(CalendarError):
    """Raised on an attempt to modify a frozen sanctorale."""


class FrozenTemporaleError(CalendarError):
    """Raised on an attempt to modify a frozen temporale."""
