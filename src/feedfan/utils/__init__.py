"""Utils package."""

from feedfan.utils.dates import DATE_LAYOUTS, parse_date
from feedfan.utils.http_client import create_http_client
from feedfan.utils.logger import configure_logging, get_logger

__all__ = [
    "DATE_LAYOUTS",
    "parse_date",
    "configure_logging",
    "get_logger",
    "create_http_client",
]
