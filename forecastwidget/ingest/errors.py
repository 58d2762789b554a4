"""Fetch failure taxonomy.

Every failure the forecast fetcher can report is a FetchError; the widget
collapses them into one user-facing message built from `reason`.
"""


class FetchError(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TransportError(FetchError):
    """The network call could not complete."""


class HttpStatusError(FetchError):
    """The provider answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    """The response body is not the expected JSON structure."""


class EmptyDataError(FetchError):
    """The response parsed but carries no forecast entries."""

    def __init__(self, reason: str = "No weather data available for this location"):
        super().__init__(reason)
