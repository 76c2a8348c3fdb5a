"""Content extraction: turns a :class:`RawPage` into a :class:`CleanPage`.

The "main content" is found with an ordered cascade of CSS selectors.  The
first selector whose matched elements carry any text wins; later selectors
are never consulted, even if the winner's text turns out too short.  When no
selector matches any element at all, the whole document outside ``<head>``
is used instead.
"""

from __future__ import annotations

import re
from typing import Sequence

from bs4 import BeautifulSoup

from summariser.errors import ExtractionError
from summariser.scraper.models import CleanPage, RawPage

# Landmark selectors, most specific first.
DEFAULT_SELECTORS: tuple[str, ...] = ("main", "article", "body")

# Anything shorter is treated as boilerplate or an empty page.
MIN_CONTENT_LENGTH = 50

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _selector_text(soup: BeautifulSoup, selector: str) -> str:
    """Concatenate the text of every element matching *selector*."""
    return "".join(element.get_text() for element in soup.select(selector))


def _document_text(soup: BeautifulSoup) -> str:
    """Text of the whole document outside ``<head>``.

    ``html.parser`` only creates a ``<body>`` element when the markup has
    one, so fragments and pages that omit the tag are read this way.
    """
    for head in soup.find_all("head"):
        head.decompose()
    return soup.get_text()


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_text(html: str, selectors: Sequence[str] = DEFAULT_SELECTORS) -> str:
    """Return the normalised main-content text of *html*.

    Raises:
        ExtractionError: If no selector yields text, or the normalised text
            is shorter than :data:`MIN_CONTENT_LENGTH` characters.
    """
    soup = BeautifulSoup(html, "html.parser")

    raw_text = ""
    matched = False
    for selector in selectors:
        matched = matched or soup.select_one(selector) is not None
        raw_text = _selector_text(soup, selector)
        if raw_text:
            break

    if not matched:
        raw_text = _document_text(soup)

    text = normalize_whitespace(raw_text)
    if len(text) < MIN_CONTENT_LENGTH:
        raise ExtractionError()
    return text


def extract_content(
    raw: RawPage, selectors: Sequence[str] = DEFAULT_SELECTORS
) -> CleanPage:
    """Extract clean, readable text from *raw*.

    Raises:
        ExtractionError: See :func:`extract_text`.
    """
    return CleanPage(url=raw.url, text=extract_text(raw.html, selectors))
