"""Feed item data models."""

from dataclasses import dataclass, field
from datetime import datetime

from pydantic import BaseModel, Field


class Item(BaseModel):
    """A normalized feed entry returned to the caller.

    Serializes with the field names title, source, source_url, link,
    publish_date and description.
    """

    title: str = Field(default="", description="Entry title")
    source: str = Field(default="", description="Channel title of the originating feed")
    source_url: str = Field(..., description="URL the entry was fetched from")
    link: str = Field(default="", description="Entry link")
    publish_date: datetime = Field(..., description="Publish time, timezone-aware UTC")
    description: str = Field(default="", description="Entry description")

    model_config = {"frozen": True}


@dataclass(frozen=True)
class RawEntry:
    """An entry exactly as found in the document, date still unparsed."""

    title: str = ""
    description: str = ""
    link: str = ""
    published: str = ""


@dataclass(frozen=True)
class RawFeed:
    """Decoded feed document: channel title plus entries in document order."""

    title: str = ""
    entries: tuple[RawEntry, ...] = field(default_factory=tuple)
