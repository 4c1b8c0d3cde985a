"""Exception hierarchy for timecard population."""


class TimecardError(Exception):
    """Base class for errors raised while building a timecard workbook."""


class DateParseError(TimecardError, ValueError):
    """Raised when a date string matches none of the accepted formats."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"bad date: {text!r}")


class InsufficientRowsError(TimecardError):
    """Raised when a request carries fewer rows than a full week."""

    def __init__(self, count: int, required: int = 7) -> None:
        self.count = count
        self.required = required
        super().__init__(f"need at least {required} rows (Sun..Sat), got {count}")


class TemplateLoadError(TimecardError):
    """Raised when the template workbook cannot be read or is unusable."""


class SerializationError(TimecardError):
    """Raised when the populated workbook cannot be written to bytes."""


class ConfigurationError(TimecardError):
    """Raised when configuration loading encounters issues."""
