"""Errors raised by rest-headers.

The header injectors never raise; these errors only come out of the
settings layer and the framework adapters.
"""


class RestHeadersError(Exception):
    """Base exception for all rest-headers errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize rest-headers error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class HeaderConfigurationError(RestHeadersError):
    """Raised when header settings or a middleware chain cannot be built."""

    def __init__(self, field: str, message: str) -> None:
        """
        Initialize header configuration error.

        Args:
            field: Setting or argument that could not be used
            message: Error message
        """
        super().__init__(f"{field}: {message}")
        self.field = field
        self.detail = message
