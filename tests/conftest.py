"""Test configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

from feedfan.utils.http_client import create_http_client

Route = tuple[int, str | bytes] | Callable[[httpx.Request], object]


def make_rss(title: str, items: list[dict]) -> str:
    """Build an RSS 2.0 document from item dicts (title, description, link, pubDate)."""
    parts = [
        '<?xml version="1.0" encoding="UTF-8" ?>',
        '<rss version="2.0">',
        "<channel>",
        f"<title>{title}</title>",
        "<link>http://example.com</link>",
    ]
    for item in items:
        parts.append("<item>")
        for tag in ("title", "description", "link", "pubDate"):
            if tag in item:
                parts.append(f"<{tag}>{item[tag]}</{tag}>")
        parts.append("</item>")
    parts += ["</channel>", "</rss>"]
    return "\n".join(parts)


class FakeFeedServer:
    """In-memory feed host served through httpx.MockTransport.

    Routes map a path to either (status, body) or a callable taking the
    request. Callables may raise httpx errors or be coroutine functions.
    """

    base_url = "http://feeds.test"

    def __init__(self):
        self.routes: dict[str, Route] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Route | str | bytes = "", status: int = 200) -> str:
        if callable(body):
            self.routes[path] = body
        else:
            self.routes[path] = (status, body)
        return self.base_url + path

    def handler(self, request: httpx.Request):
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404)
        if callable(route):
            return route(request)
        status, body = route
        return httpx.Response(status, content=body)

    def client(self, **kwargs) -> httpx.AsyncClient:
        return create_http_client(transport=httpx.MockTransport(self.handler), **kwargs)


@pytest.fixture
def server():
    """Fresh fake feed host for each test."""
    return FakeFeedServer()


@pytest.fixture
def sample_rss_content():
    """Single-item RSS document."""
    return (
        "<rss><channel><title>Test feed</title><item><title>Title string</title>"
        "<description>Description string.</description>"
        "<link>http://www.example.com/1</link>"
        "<pubDate>Sun, 06 Sep 2009 16:20:00 +0000</pubDate></item></channel></rss>"
    )


@pytest.fixture
def two_item_rss_content():
    """Two-item RSS document with valid dates."""
    return make_rss(
        "Test feed",
        [
            {
                "title": "Title string",
                "description": "Description string.",
                "link": "http://www.example.com/1",
                "pubDate": "Sun, 06 Sep 2009 16:20:00 +0000",
            },
            {
                "title": "Second Title",
                "description": "Second Description",
                "link": "http://www.example.com/2",
                "pubDate": "Sun, 06 Sep 2009 16:20:00 +0000",
            },
        ],
    )
