"""Canonical week conversion error types.

Every failure raised by the week conversion layers uses one of these types.
Missing values are never errors; they propagate to missing output.

Standard error codes:
- EMPTY_INPUT: An argument has zero length, the whole batch is rejected
- INVALID_WEEKDAY: A day or week start is outside 1-7 or an unknown name
- OVERFLOW: A computed date falls outside the representable range
- INVALID_INPUT: A year, week or day is not an integral number
"""


class WeekDateError(ValueError):
    """Base class for week conversion errors.

    Attributes:
        code: Error code (e.g., "EMPTY_INPUT", "INVALID_WEEKDAY", "OVERFLOW")
        details: List of error detail strings
    """

    code = "WEEKDATE_ERROR"

    def __init__(self, details: list[str]):
        self.details = details
        super().__init__(f"{self.code}: {'; '.join(details)}")


class EmptyInputError(WeekDateError):
    """Raised when any argument of a batch has zero length."""

    code = "EMPTY_INPUT"


class InvalidWeekdayError(WeekDateError):
    """Raised when a weekday cannot be resolved to an index in 1-7."""

    code = "INVALID_WEEKDAY"


class WeekOverflowError(WeekDateError, OverflowError):
    """Raised when date arithmetic leaves the representable range."""

    code = "OVERFLOW"


class InvalidInputError(WeekDateError):
    """Raised when a year, week or day is not an integral number."""

    code = "INVALID_INPUT"
