from typing import Optional


class UpstreamError(Exception):
    """Base class for failures talking to the train data service."""


class UpstreamNetworkError(UpstreamError):
    """No response was received (connect failure, timeout, dropped connection)."""


class UpstreamStatusError(UpstreamError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Train data service returned {status_code}: {message or 'Unknown error'}")


class UpstreamFormatError(UpstreamError):
    """A 2xx response whose body does not have the expected shape."""


class SuggestionQueryError(Exception):
    """The station suggestion query failed inside the database."""
