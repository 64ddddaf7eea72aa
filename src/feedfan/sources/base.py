"""Abstract feed source interface using Protocol."""

import asyncio
from typing import Protocol

from feedfan.models.result import SourceMessage, SourceResult


class FeedSource(Protocol):
    """A single feed source run as one aggregation task."""

    @property
    def url(self) -> str:
        """Feed URL."""
        ...

    async def run(self, queue: asyncio.Queue[SourceMessage]) -> SourceResult:
        """Put the source's items on queue, then exactly one SourceDone.

        Must never raise a soft failure and must send SourceDone on every
        exit path, cancellation included.
        """
        ...
