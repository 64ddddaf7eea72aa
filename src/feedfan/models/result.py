"""Per-source outcome and the messages exchanged with the aggregator."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from feedfan.models.item import Item


class SourceStatus(str, Enum):
    """How a single source fetch ended."""

    OK = "ok"
    TRUNCATED = "truncated"  # stopped at an entry with an unparseable date
    FETCH_FAILED = "fetch_failed"
    BAD_STATUS = "bad_status"
    MALFORMED = "malformed"
    ERROR = "error"  # unexpected exception or cancellation


class SourceResult(BaseModel):
    """Outcome of one source fetch task."""

    url: str = Field(..., description="Queried feed URL")
    status: SourceStatus = Field(default=SourceStatus.OK)
    item_count: int = Field(default=0, ge=0, description="Items emitted by this source")
    reason: str | None = Field(default=None, description="Failure detail, if any")

    model_config = {"frozen": True}

    @property
    def failed(self) -> bool:
        """True when the source contributed nothing because of an error."""
        return self.status not in (SourceStatus.OK, SourceStatus.TRUNCATED)


@dataclass(frozen=True)
class ItemMessage:
    """An item handed from a fetch task to the aggregator."""

    item: Item


@dataclass(frozen=True)
class SourceDone:
    """Completion signal. Exactly one is sent per fetch task, always last."""

    result: SourceResult


SourceMessage = ItemMessage | SourceDone
