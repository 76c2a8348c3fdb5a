"""HTTP fetcher for blog pages."""

from __future__ import annotations

import logging

import httpx

from summariser.config import settings
from summariser.scraper.models import RawPage

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; BlogSummariser/0.1; +https://github.com/blog-summariser)"
    )
}


def fetch_url(url: str, timeout: float | None = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed.  No retry is attempted; callers decide what a
    failure means for them.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: On connection errors, timeouts or invalid URLs.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=timeout if timeout is not None else settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    logger.debug("Fetched %s (%d, %d bytes)", url, status_code, len(html))
    return RawPage(url=url, html=html, status_code=status_code)
