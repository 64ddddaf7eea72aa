"""Custom exceptions for feedfan.

Provides a structured exception hierarchy for the aggregation engine.
Only NoSourcesProvided ever reaches the caller of the aggregator; the
others are raised by the per-source stages and absorbed by the fetch task.
"""


class FeedFanError(Exception):
    """Base exception class for all feedfan errors."""

    pass


class NoSourcesProvided(FeedFanError):
    """Raised when the aggregator is called with an empty URL list."""

    def __init__(self, message: str = "Urls list is empty"):
        super().__init__(message)


class FetchError(FeedFanError):
    """Raised when retrieving a feed fails or returns a non-2xx status.

    Attributes:
        source_url: The URL of the feed source that failed.
        status_code: HTTP status code, if a response was received.
    """

    def __init__(self, source_url: str, message: str, status_code: int | None = None):
        self.source_url = source_url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {source_url}: {message}")


class MalformedDocument(FeedFanError):
    """Raised when a payload is not a recognizable feed structure.

    Attributes:
        source_url: The URL of the feed source with the broken payload.
    """

    def __init__(self, source_url: str, message: str):
        self.source_url = source_url
        super().__init__(f"Failed to parse {source_url}: {message}")


class DateFormatUnrecognized(FeedFanError):
    """Raised when no known layout matches a timestamp string.

    Attributes:
        value: The offending timestamp string.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown date format: {value}")
