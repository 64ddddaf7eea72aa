"""Models package."""

from feedfan.models.item import Item, RawEntry, RawFeed
from feedfan.models.result import (
    ItemMessage,
    SourceDone,
    SourceMessage,
    SourceResult,
    SourceStatus,
)

__all__ = [
    "Item",
    "RawEntry",
    "RawFeed",
    "ItemMessage",
    "SourceDone",
    "SourceMessage",
    "SourceResult",
    "SourceStatus",
]
