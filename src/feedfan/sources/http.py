"""HTTP feed source: one fetch-parse-normalize task per URL."""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime

import httpx
import structlog

from feedfan.exceptions import DateFormatUnrecognized, FetchError, MalformedDocument
from feedfan.models.item import Item, RawEntry
from feedfan.models.result import (
    ItemMessage,
    SourceDone,
    SourceMessage,
    SourceResult,
    SourceStatus,
)
from feedfan.parsers.base import FeedParser
from feedfan.parsers.rss_parser import RssParser
from feedfan.utils.dates import parse_date

logger = structlog.get_logger()


class HttpFeedSource:
    """Feed source retrieved over HTTP(S).

    Every problem met while handling the source is a soft failure: it ends
    this source's contribution early but is never raised to the caller of
    run(). Nothing is retried.
    """

    def __init__(
        self,
        url: str,
        client: httpx.AsyncClient,
        parser: FeedParser | None = None,
        skip_bad_dates: bool = False,
    ):
        """Initialize HTTP feed source.

        Args:
            url: Feed URL.
            client: Shared async HTTP client. Not closed by the source.
            parser: Document parser. Defaults to RssParser.
            skip_bad_dates: Skip only entries with an unparseable date
                instead of stopping at the first one.
        """
        self._url = url
        self._client = client
        self._parser = parser or RssParser()
        self._skip_bad_dates = skip_bad_dates

    @property
    def url(self) -> str:
        """Feed URL."""
        return self._url

    async def fetch_raw(self) -> bytes:
        """Fetch the raw feed payload.

        Returns:
            Response body bytes.

        Raises:
            FetchError: When the request fails or the status is not 2xx.
        """
        try:
            response = await self._client.get(self._url)
        except httpx.TimeoutException as e:
            raise FetchError(self._url, f"Request timed out: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FetchError(self._url, f"Request failed: {e}") from e

        if not 200 <= response.status_code <= 299:
            raise FetchError(
                self._url,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.content

    async def run(self, queue: asyncio.Queue[SourceMessage]) -> SourceResult:
        """Emit this source's items on queue followed by one SourceDone.

        Args:
            queue: Channel shared with the aggregator.

        Returns:
            The same SourceResult carried by the completion signal.
        """
        emitted = 0

        async def emit(item: Item) -> None:
            nonlocal emitted
            await queue.put(ItemMessage(item))
            emitted += 1

        status, reason = SourceStatus.ERROR, "Fetch task was cancelled"
        try:
            status, reason = await self._produce(emit)
        except Exception as e:
            logger.exception("Unexpected error while processing source", url=self._url)
            status, reason = SourceStatus.ERROR, str(e)
        finally:
            result = SourceResult(url=self._url, status=status, item_count=emitted, reason=reason)
            await queue.put(SourceDone(result))

        self._log_result(result)
        return result

    async def collect(self) -> tuple[SourceResult, list[Item]]:
        """Run the source on a private queue and return its outcome and items."""
        queue: asyncio.Queue[SourceMessage] = asyncio.Queue()
        result = await self.run(queue)

        items: list[Item] = []
        while not queue.empty():
            message = queue.get_nowait()
            if isinstance(message, ItemMessage):
                items.append(message.item)
        return result, items

    async def _produce(
        self, emit: Callable[[Item], Awaitable[None]]
    ) -> tuple[SourceStatus, str | None]:
        try:
            raw = await self.fetch_raw()
        except FetchError as e:
            if e.status_code is not None:
                return SourceStatus.BAD_STATUS, str(e)
            return SourceStatus.FETCH_FAILED, str(e)

        try:
            feed = self._parser.parse(raw, self._url)
        except MalformedDocument as e:
            return SourceStatus.MALFORMED, str(e)

        skipped = 0
        for entry in feed.entries:
            try:
                publish_date = parse_date(entry.published)
            except DateFormatUnrecognized as e:
                if not self._skip_bad_dates:
                    # Entries without a usable date end the source
                    return SourceStatus.TRUNCATED, str(e)
                skipped += 1
                continue

            await emit(self._build_item(entry, feed.title, publish_date))

        if skipped:
            return SourceStatus.OK, f"Skipped {skipped} entries with unparseable dates"
        return SourceStatus.OK, None

    def _build_item(self, entry: RawEntry, source: str, publish_date: datetime) -> Item:
        return Item(
            title=entry.title,
            description=entry.description,
            link=entry.link,
            publish_date=publish_date,
            source=source,
            source_url=self._url,
        )

    def _log_result(self, result: SourceResult) -> None:
        log = logger.bind(url=result.url, status=result.status.value)
        if result.status is SourceStatus.OK:
            log.info("Source fetched", item_count=result.item_count, note=result.reason)
        else:
            log.warning(
                "Source degraded",
                item_count=result.item_count,
                reason=result.reason,
            )
