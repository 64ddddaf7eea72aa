#!/usr/bin/env python
"""Script to manually run an aggregation and print the merged items.

Usage:
    python scripts/fetch_feeds.py [URL ...] [--skip-bad-dates]

Without URLs, FEEDFAN_FEED_URLS from the environment or .env is used.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from feedfan.config.settings import settings
from feedfan.exceptions import NoSourcesProvided
from feedfan.models.result import SourceResult
from feedfan.services.aggregator import FeedAggregator
from feedfan.utils.logger import configure_logging, get_logger


async def main(urls: list[str], skip_bad_dates: bool = False) -> int:
    """Run one aggregation over urls."""
    configure_logging(log_level=settings.log_level, json_format=settings.log_json)
    logger = get_logger("fetch_feeds")

    results: list[SourceResult] = []
    aggregator = FeedAggregator(skip_bad_dates=skip_bad_dates or None)

    try:
        items = await aggregator.fetch(urls, on_source_result=results.append)
    except NoSourcesProvided:
        logger.error("No feed URLs given and FEEDFAN_FEED_URLS is empty")
        return 1

    print(json.dumps([item.model_dump(mode="json") for item in items], indent=2))

    print("\nSources:", file=sys.stderr)
    for result in results:
        line = f"  {result.status.value:<12} {result.item_count:>4}  {result.url}"
        if result.reason:
            line += f"  ({result.reason})"
        print(line, file=sys.stderr)
    return 0


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Fetch and merge RSS feeds")
    arg_parser.add_argument("urls", nargs="*", help="Feed URLs")
    arg_parser.add_argument(
        "--skip-bad-dates",
        action="store_true",
        help="Skip entries with unparseable dates instead of stopping the source",
    )
    args = arg_parser.parse_args()

    sys.exit(asyncio.run(main(args.urls or settings.feed_urls, args.skip_bad_dates)))
