"""HTTP client utilities."""

import httpx


def create_http_client(
    timeout: float = 30.0,
    user_agent: str | None = None,
    follow_redirects: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value. httpx's default is kept when None.
        follow_redirects: Whether to follow redirects.
        transport: Optional transport, e.g. httpx.MockTransport in tests.

    Returns:
        Configured httpx.AsyncClient.
    """
    headers = {"User-Agent": user_agent} if user_agent else None
    return httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=follow_redirects,
        transport=transport,
    )
