"""Exception hierarchy for ISO 8601 duration conversion."""


class DurationCodecError(Exception):
    """Base exception for ISO 8601 duration conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention).
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidDurationError(DurationCodecError):
    """Raised when a string is not a well-formed ISO 8601 duration."""


class CalendarUnitError(DurationCodecError):
    """Raised when a duration carries year or month components."""


class DurationRangeError(DurationCodecError):
    """Raised when a decoded duration does not fit the Duration range."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_DURATION = "invalid ISO 8601 duration"
ERR_MSG_DURATION_TOO_LONG = "duration string too long"
ERR_MSG_CALENDAR_UNITS = "years and months must be zero"
ERR_MSG_OUT_OF_RANGE = "duration out of range"
