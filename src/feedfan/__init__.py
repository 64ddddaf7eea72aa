"""Concurrent best-effort RSS feed aggregation."""

from feedfan.exceptions import (
    DateFormatUnrecognized,
    FeedFanError,
    FetchError,
    MalformedDocument,
    NoSourcesProvided,
)
from feedfan.models.item import Item
from feedfan.models.result import SourceResult, SourceStatus
from feedfan.services.aggregator import FeedAggregator, afetch_feeds, fetch_feeds
from feedfan.utils.dates import parse_date

__all__ = [
    "FeedAggregator",
    "afetch_feeds",
    "fetch_feeds",
    "parse_date",
    "Item",
    "SourceResult",
    "SourceStatus",
    "FeedFanError",
    "NoSourcesProvided",
    "FetchError",
    "MalformedDocument",
    "DateFormatUnrecognized",
]
