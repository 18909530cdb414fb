"""Exception hierarchy for ISO-8601 duration parsing and formatting."""


class DurationError(ValueError):
    """Base exception for duration errors.

    Carries the offending input text so callers can report it verbatim.
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(f"{message}: {text!r}")
        self.message: str = message
        self.text: str = text


class InvalidFormatError(DurationError):
    """Raised when the text does not follow the duration grammar."""


class MissingUnitError(DurationError):
    """Raised when a number is not followed by a unit letter."""


class UnknownUnitError(DurationError):
    """Raised when a unit letter is not valid in its section."""

    def __init__(self, message: str, text: str, unit: str) -> None:
        super().__init__(message, text)
        self.unit: str = unit


class DurationOverflowError(DurationError):
    """Raised when a magnitude exceeds the signed 64-bit nanosecond range."""


class LeadingIntOverflowError(DurationOverflowError):
    """Raised when a single digit run overflows before any unit scaling."""
