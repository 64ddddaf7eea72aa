"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from feedfan.models.item import RawFeed


class FeedParser(Protocol):
    """Feed document parser abstraction protocol."""

    def parse(self, raw_content: bytes | str, source_url: str) -> RawFeed:
        """Decode a feed payload into its channel title and raw entries.

        Args:
            raw_content: Response body of the feed.
            source_url: URL the body came from, used in error messages.

        Returns:
            RawFeed with entries in document order.

        Raises:
            MalformedDocument: When the payload is not a recognizable feed.
        """
        ...
