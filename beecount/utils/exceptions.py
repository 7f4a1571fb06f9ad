"""Custom exception hierarchy for the application."""


class BeecountError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, is_retryable: bool = False) -> None:
        """Initialize exception.

        Args:
            message: Error message
            is_retryable: Whether the operation can be retried
        """
        super().__init__(message)
        self.message = message
        self.is_retryable = is_retryable


class ConfigurationError(BeecountError):
    """Configuration or environment setup error."""

    pass


class BeeminderAPIError(BeecountError):
    """Beeminder datapoint submission error."""

    def __init__(
        self, message: str, status_code: int | None = None, is_retryable: bool = False
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status returned by Beeminder, None for transport failures
            is_retryable: Whether the submission can be retried
        """
        super().__init__(message, is_retryable=is_retryable)
        self.status_code = status_code


class ValidationError(BeecountError):
    """Input validation error."""

    pass
