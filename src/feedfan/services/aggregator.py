"""Feed aggregation service.

Fans out one HttpFeedSource task per URL and fans their items back in
through a single queue of tagged messages. The aggregation is finished
when every task has sent its SourceDone completion signal.
"""

import asyncio
from collections.abc import AsyncIterator, Callable, Iterable
from contextlib import asynccontextmanager

import httpx
import structlog

from feedfan.config.settings import settings
from feedfan.exceptions import NoSourcesProvided
from feedfan.models.item import Item
from feedfan.models.result import SourceDone, SourceMessage, SourceResult
from feedfan.parsers.base import FeedParser
from feedfan.parsers.rss_parser import RssParser
from feedfan.sources.base import FeedSource
from feedfan.sources.http import HttpFeedSource
from feedfan.utils.http_client import create_http_client

logger = structlog.get_logger()

SourceResultCallback = Callable[[SourceResult], None]


class FeedAggregator:
    """Concurrent best-effort feed aggregator.

    Each source is fetched once, independently of the others. A source
    that cannot be fetched or parsed contributes fewer items, or none, and
    never fails the aggregation. The only error raised to the caller is
    NoSourcesProvided.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        parser: FeedParser | None = None,
        timeout: float | None = None,
        follow_redirects: bool | None = None,
        user_agent: str | None = None,
        skip_bad_dates: bool | None = None,
    ):
        """Initialize aggregator.

        Args:
            client: Shared HTTP client. When omitted a client is created per
                fetch() call and closed afterwards; an injected client is
                left open.
            parser: Document parser shared by all sources. Defaults to RssParser.
            timeout: Request timeout in seconds. Defaults to settings.
            follow_redirects: Whether to follow redirects. Defaults to settings.
            user_agent: User-Agent header value. Defaults to settings.
            skip_bad_dates: Skip only entries with unparseable dates instead
                of stopping the source at the first one. Defaults to settings.
        """
        self._client = client
        self._parser = parser or RssParser()
        self._timeout = timeout if timeout is not None else settings.fetch_timeout
        self._follow_redirects = (
            follow_redirects if follow_redirects is not None else settings.follow_redirects
        )
        self._user_agent = user_agent if user_agent is not None else settings.user_agent
        self._skip_bad_dates = (
            skip_bad_dates if skip_bad_dates is not None else settings.skip_bad_dates
        )

    async def fetch(
        self,
        urls: Iterable[str],
        on_source_result: SourceResultCallback | None = None,
    ) -> list[Item]:
        """Fetch all sources concurrently and merge their items.

        Args:
            urls: Feed URLs. Duplicates are fetched independently.
            on_source_result: Optional diagnostics hook, called with each
                source's SourceResult as its completion signal arrives.

        Returns:
            Items from every source. Items of one source keep their document
            order; items of different sources interleave by arrival.

        Raises:
            NoSourcesProvided: When urls is empty. No request is made.
        """
        urls = list(urls)
        if not urls:
            raise NoSourcesProvided()

        log = logger.bind(job="aggregate", source_count=len(urls))
        log.info("Starting aggregation")

        async with self._client_scope() as client:
            queue: asyncio.Queue[SourceMessage] = asyncio.Queue()
            tasks = [
                asyncio.create_task(self._make_source(url, client).run(queue)) for url in urls
            ]
            try:
                items, results = await self._drain(queue, len(tasks), on_source_result)
            except BaseException:
                for task in tasks:
                    task.cancel()
                raise
            finally:
                await asyncio.gather(*tasks, return_exceptions=True)

        log.info(
            "Aggregation completed",
            item_count=len(items),
            failed_sources=sum(1 for result in results if result.failed),
        )
        return items

    def _make_source(self, url: str, client: httpx.AsyncClient) -> FeedSource:
        return HttpFeedSource(
            url=url,
            client=client,
            parser=self._parser,
            skip_bad_dates=self._skip_bad_dates,
        )

    async def _drain(
        self,
        queue: asyncio.Queue[SourceMessage],
        expected: int,
        on_source_result: SourceResultCallback | None,
    ) -> tuple[list[Item], list[SourceResult]]:
        """Collect messages until `expected` completion signals have arrived."""
        items: list[Item] = []
        results: list[SourceResult] = []

        while len(results) < expected:
            message = await queue.get()
            if isinstance(message, SourceDone):
                results.append(message.result)
                if on_source_result is not None:
                    on_source_result(message.result)
            else:
                items.append(message.item)

        return items, results

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return

        async with create_http_client(
            timeout=self._timeout,
            user_agent=self._user_agent,
            follow_redirects=self._follow_redirects,
        ) as client:
            yield client


async def afetch_feeds(
    urls: Iterable[str],
    on_source_result: SourceResultCallback | None = None,
    **options,
) -> list[Item]:
    """Aggregate feeds from urls. Options are passed to FeedAggregator."""
    return await FeedAggregator(**options).fetch(urls, on_source_result=on_source_result)


def fetch_feeds(
    urls: Iterable[str],
    on_source_result: SourceResultCallback | None = None,
    **options,
) -> list[Item]:
    """Blocking variant of afetch_feeds for callers without an event loop."""
    urls = list(urls)
    if not urls:
        raise NoSourcesProvided()
    return asyncio.run(afetch_feeds(urls, on_source_result=on_source_result, **options))
