"""Sources package."""

from feedfan.sources.base import FeedSource
from feedfan.sources.http import HttpFeedSource

__all__ = [
    "FeedSource",
    "HttpFeedSource",
]
