"""API exceptions."""

from typing import Any, Optional


class APIError(Exception):
    """Base exception for source and destination API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
    ):
        """Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code
            response_data: Response data from API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class FetchError(APIError):
    """Listing or identity lookup failed (bad status or network error)."""

    pass


class DecodeError(APIError):
    """Response body could not be decoded into the expected shape."""

    pass


class MigrateError(APIError):
    """Migration request was not accepted by the destination."""

    pass
