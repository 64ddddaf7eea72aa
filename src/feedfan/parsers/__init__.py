"""Parsers package."""

from feedfan.parsers.base import FeedParser
from feedfan.parsers.rss_parser import RssParser

__all__ = [
    "FeedParser",
    "RssParser",
]
