"""RSS 2.0 document parser implementation."""

from xml.sax import SAXParseException

import feedparser

from feedfan.exceptions import MalformedDocument
from feedfan.models.item import RawEntry, RawFeed

# feedparser versions for documents with an <rss> root. RDF based RSS 0.90
# and 1.0 (rss090, rss10) are rejected.
RSS_ROOT_VERSIONS = frozenset(
    {"rss", "rss091u", "rss091n", "rss092", "rss093", "rss094", "rss20"}
)


class RssParser:
    """Parser for RSS 2.0 shaped documents.

    Only rss/channel/title and the title, description, link and pubDate of
    each rss/channel/item are read, as raw text. Dates are left as strings;
    turning them into datetimes is the fetch task's job.
    """

    def parse(self, raw_content: bytes | str, source_url: str) -> RawFeed:
        """Parse an RSS payload.

        Args:
            raw_content: Response body. Strings are encoded as UTF-8 first so
                feedparser never treats them as a URL or file name to open.
            source_url: Source URL for error messages.

        Returns:
            RawFeed with entries in document order.

        Raises:
            MalformedDocument: When the payload is not well-formed XML or its
                root is not <rss>.
        """
        if isinstance(raw_content, str):
            raw_content = raw_content.encode("utf-8")

        try:
            feed = feedparser.parse(
                raw_content,
                sanitize_html=False,
                resolve_relative_uris=False,
            )
        except Exception as e:
            raise MalformedDocument(source_url, f"Unexpected parse error: {e}") from e

        # feedparser recovers from broken markup with its loose parser and
        # still returns entries; any XML error rejects the whole document
        if feed.bozo and isinstance(feed.get("bozo_exception"), SAXParseException):
            raise MalformedDocument(source_url, f"Feed parse error: {feed.bozo_exception}")

        if feed.get("version", "") not in RSS_ROOT_VERSIONS:
            raise MalformedDocument(source_url, "Document is not an RSS feed")

        entries = tuple(self._parse_entry(entry) for entry in feed.entries)
        return RawFeed(title=feed.feed.get("title", ""), entries=entries)

    def _parse_entry(self, entry: feedparser.FeedParserDict) -> RawEntry:
        return RawEntry(
            title=entry.get("title", ""),
            description=entry.get("description", ""),
            link=self._extract_link(entry),
            published=entry.get("published", ""),
        )

    def _extract_link(self, entry: feedparser.FeedParserDict) -> str:
        """Return the text of the item's own <link> element.

        feedparser copies a permalink <guid> into "link" when the item has
        no <link>; only an alternate entry in "links" proves a real one.
        """
        has_link_element = any(
            link.get("rel") == "alternate" for link in entry.get("links", [])
        )
        if not has_link_element:
            return ""
        return entry.get("link", "")
