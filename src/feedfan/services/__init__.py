"""Services package."""

from feedfan.services.aggregator import FeedAggregator, afetch_feeds, fetch_feeds

__all__ = [
    "FeedAggregator",
    "afetch_feeds",
    "fetch_feeds",
]
