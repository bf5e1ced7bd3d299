"""Exception hierarchy for the date/time service."""


class TimeServiceError(Exception):
    """Base exception for date/time service errors.

    Provides dual messaging: a user-facing message and internal details
    for logging.
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


class CallerError(TimeServiceError):
    """Raised when the caller supplies a missing or malformed argument."""


class MissingFieldError(CallerError):
    """Raised when a required calendar field is absent or not numeric."""

    def __init__(self, field: str, internal_details: str = "") -> None:
        super().__init__(ERR_MSG_MISSING_FIELD.format(field=field), internal_details)
        self.field = field


class InvalidArgumentError(CallerError):
    """Raised when an argument has the wrong type or an unusable value."""


# User-facing error message constants
ERR_MSG_MISSING_FIELD = "field '{field}' missing in date table"
ERR_MSG_INVALID_TIMESTAMP = "number expected for timestamp"
ERR_MSG_NON_FINITE_TIMESTAMP = "timestamp must be finite"
ERR_MSG_INVALID_RECORD = "table expected for date record"
ERR_MSG_PATTERN_TYPE = "string expected for format pattern"
