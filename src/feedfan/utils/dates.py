"""Publish date normalization.

Feeds in the wild encode pubDate in many ways. parse_date tries a fixed,
ordered table of layouts and returns the result of the first one that
matches, always as a timezone-aware UTC datetime.

Order matters: some layouts are looser subsets of others, so the table is
read top to bottom and never reordered at runtime.

A value must first have the exact shape of a layout (field widths,
separators, zone form) before strptime reads it. strptime alone is more
forgiving than the layouts: it takes one-digit days for zero-padded ones
and "Z" or "-0700" for any offset.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from functools import cached_property

from feedfan.exceptions import DateFormatUnrecognized


class ZoneStyle(str, Enum):
    """How a layout expresses its UTC offset."""

    NONE = "none"
    NUMERIC = "numeric"  # -0700
    ISO = "iso"  # -07:00 or Z
    SHORT_NUMERIC = "short_numeric"  # -07
    NAMED = "named"  # MST, GMT, ...


# Directive shapes. %d is zero-padded, %_d space-padded and %-d unpadded;
# all three are read by strptime as %d.
_FIELD_SHAPES: dict[str, str] = {
    "%a": r"[A-Za-z]{3}",
    "%A": r"[A-Za-z]+",
    "%b": r"[A-Za-z]{3}",
    "%B": r"[A-Za-z]+",
    "%d": r"\d{2}",
    "%_d": r" ?\d{1,2}",
    "%-d": r"\d{1,2}",
    "%m": r"\d{2}",
    "%y": r"\d{2}",
    "%Y": r"\d{4}",
    "%H": r"\d{1,2}",
    "%M": r"\d{2}",
    "%S": r"\d{2}",
    "%f": r"\d{1,6}",
}

_ZONE_SHAPES: dict[ZoneStyle, str] = {
    ZoneStyle.NUMERIC: r"[+-]\d{4}",
    ZoneStyle.ISO: r"(?:Z|[+-]\d{2}:\d{2})",
    ZoneStyle.SHORT_NUMERIC: r"[+-]\d{2}",
    ZoneStyle.NAMED: r"[A-Z]{2,5}",
}

_DIRECTIVE = re.compile(r"%[_-]?[A-Za-z]")


@dataclass(frozen=True)
class DateLayout:
    """A single candidate timestamp layout.

    Attributes:
        name: Human-readable layout name, used in logs and tests.
        pattern: strptime-style pattern. Named zones are written as %Z,
            space-padded days as %_d and unpadded days as %-d.
        zone: How the zone is written in matching strings.
    """

    name: str
    pattern: str
    zone: ZoneStyle

    @cached_property
    def shape(self) -> re.Pattern:
        """Regex a value must fully match before strptime is tried."""
        parts = []
        position = 0
        for match in _DIRECTIVE.finditer(self.pattern):
            parts.append(re.escape(self.pattern[position : match.start()]))
            directive = match.group()
            if directive in ("%z", "%Z"):
                parts.append(_ZONE_SHAPES[self.zone])
            else:
                parts.append(_FIELD_SHAPES[directive])
            position = match.end()
        parts.append(re.escape(self.pattern[position:]))
        return re.compile("".join(parts))

    @cached_property
    def strptime_pattern(self) -> str:
        return (
            self.pattern.replace("%_d", "%d").replace("%-d", "%d").replace("%Z", "%z")
        )


DATE_LAYOUTS: tuple[DateLayout, ...] = (
    DateLayout("RFC822", "%d %b %y %H:%M %Z", ZoneStyle.NAMED),
    DateLayout("RFC822 with seconds", "%d %b %y %H:%M:%S %Z", ZoneStyle.NAMED),
    DateLayout("RFC822Z", "%d %b %y %H:%M %z", ZoneStyle.NUMERIC),
    DateLayout("RFC3339", "%Y-%m-%dT%H:%M:%S%z", ZoneStyle.ISO),
    DateLayout("RFC3339 with fraction", "%Y-%m-%dT%H:%M:%S.%f%z", ZoneStyle.ISO),
    DateLayout("UnixDate", "%a %b %_d %H:%M:%S %Z %Y", ZoneStyle.NAMED),
    DateLayout("RubyDate", "%a %b %d %H:%M:%S %z %Y", ZoneStyle.NUMERIC),
    DateLayout("RFC850", "%A, %d-%b-%y %H:%M:%S %Z", ZoneStyle.NAMED),
    DateLayout("RFC1123Z", "%a, %d %b %Y %H:%M:%S %z", ZoneStyle.NUMERIC),
    DateLayout("RFC1123", "%a, %d %b %Y %H:%M:%S %Z", ZoneStyle.NAMED),
    DateLayout("ANSIC", "%a %b %_d %H:%M:%S %Y", ZoneStyle.NONE),
    DateLayout("Weekday, full month", "%a, %B %-d %Y %H:%M:%S %z", ZoneStyle.NUMERIC),
    DateLayout(
        "Weekday, short month, short offset",
        "%a, %b %-d %Y %H:%M:%S %z",
        ZoneStyle.SHORT_NUMERIC,
    ),
    DateLayout("Weekday, short month", "%a, %b %-d %Y %H:%M:%S %z", ZoneStyle.NUMERIC),
)

# Offsets in hours for the zone names RFC 822 defines. Any other
# abbreviation resolves to UTC.
ZONE_OFFSETS: dict[str, int] = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

_ZONE_NAME = re.compile(r"(?<=\s)([A-Z]{2,5})(?=\s|$)")


def parse_date(value: str) -> datetime:
    """Parse a feed timestamp string.

    Args:
        value: Raw timestamp, e.g. "Sun, 06 Sep 2009 16:20:00 +0000".

    Returns:
        Timezone-aware datetime converted to UTC.

    Raises:
        DateFormatUnrecognized: When no layout in DATE_LAYOUTS matches.
    """
    for layout in DATE_LAYOUTS:
        parsed = _try_layout(layout, value)
        if parsed is not None:
            return parsed

    raise DateFormatUnrecognized(value)


def match_layout(value: str) -> DateLayout | None:
    """Return the first layout that accepts value, or None."""
    for layout in DATE_LAYOUTS:
        if _try_layout(layout, value) is not None:
            return layout
    return None


def _try_layout(layout: DateLayout, value: str) -> datetime | None:
    if not layout.shape.fullmatch(value):
        return None

    try:
        parsed = datetime.strptime(_prepare(layout.zone, value), layout.strptime_pattern)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _prepare(zone: ZoneStyle, value: str) -> str:
    """Rewrite the zone part of a shape-checked value for strptime's %z."""
    if zone is ZoneStyle.NAMED:
        last = list(_ZONE_NAME.finditer(value))[-1]
        offset = _format_offset(ZONE_OFFSETS.get(last.group(1), 0))
        return value[: last.start()] + offset + value[last.end() :]

    if zone is ZoneStyle.SHORT_NUMERIC:
        return value + "00"

    return value


def _format_offset(hours: int) -> str:
    sign = "-" if hours < 0 else "+"
    return f"{sign}{abs(hours):02d}00"
