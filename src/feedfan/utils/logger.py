"""structlog setup for applications embedding feedfan.

The library itself only calls structlog.get_logger(). Nothing is rendered
in a particular format until the application calls configure_logging(),
as scripts/fetch_feeds.py does.
"""

import logging
import sys

import structlog

# Standard library loggers of the HTTP stack. httpx reports every request
# at INFO, one line per feed.
HTTP_LOGGERS = ("httpx", "httpcore")


def _build_processors(json_format: bool) -> list:
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """Route feedfan's structured events to stdout.

    Args:
        log_level: Minimum level name. Unknown names fall back to INFO.
        json_format: Render one JSON object per line instead of the
            human-readable console format.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)

    structlog.configure(
        processors=_build_processors(json_format),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **context) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger, optionally bound to a name and context."""
    if name:
        context["logger"] = name
    logger = structlog.get_logger()
    return logger.bind(**context) if context else logger
