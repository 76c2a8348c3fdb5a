"""Tests for the scraper stage (fetch + content extraction).

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_url`` tests.
- Extraction is pure, so it is tested against literal HTML strings.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from summariser.errors import ExtractionError, STAGE_EXTRACT
from summariser.scraper.extractor import (
    DEFAULT_SELECTORS,
    MIN_CONTENT_LENGTH,
    extract_content,
    extract_text,
    normalize_whitespace,
)
from summariser.scraper.fetcher import fetch_url
from summariser.scraper.models import CleanPage, RawPage


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_MAIN_TEXT = "This is the main content of the test page with enough text for extraction."
_ARTICLE_TEXT = "This article text is long enough to pass the minimum length check easily."
_BODY_TEXT = "Plain body text that is also comfortably longer than fifty characters."

_SIMPLE_HTML = f"""\
<!DOCTYPE html>
<html>
<head><title>Test Page</title></head>
<body>
  <nav>Home | About</nav>
  <article>{_ARTICLE_TEXT}</article>
  <main>
    {_MAIN_TEXT}
  </main>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# fetch_url tests
# ---------------------------------------------------------------------------

class TestFetchUrl:
    def test_successful_fetch_returns_raw_page(self) -> None:
        """A 200 response is returned as a RawPage."""
        with respx.mock:
            respx.get("https://example.com/article").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            raw = fetch_url("https://example.com/article")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/article"
        assert raw.status_code == 200
        assert "<title>Test Page</title>" in raw.html

    def test_http_error_raises(self) -> None:
        """A 404 response raises ``httpx.HTTPStatusError``."""
        with respx.mock:
            respx.get("https://example.com/missing").mock(
                return_value=httpx.Response(404, text="Not Found")
            )
            with pytest.raises(httpx.HTTPStatusError):
                fetch_url("https://example.com/missing")

    def test_network_error_propagates(self) -> None:
        with respx.mock:
            respx.get("https://down.example.com/").mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            with pytest.raises(httpx.ConnectError):
                fetch_url("https://down.example.com/")

    def test_follows_redirects(self) -> None:
        with respx.mock:
            respx.get("https://example.com/old").mock(
                return_value=httpx.Response(
                    301, headers={"Location": "https://example.com/new"}
                )
            )
            respx.get("https://example.com/new").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            raw = fetch_url("https://example.com/old")

        assert raw.status_code == 200
        assert raw.url == "https://example.com/old"

    def test_sends_user_agent(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            fetch_url("https://example.com/")

        assert "BlogSummariser" in route.calls.last.request.headers["User-Agent"]


# ---------------------------------------------------------------------------
# Extractor unit tests
# ---------------------------------------------------------------------------

class TestNormalizeWhitespace:
    def test_collapses_runs_and_trims(self) -> None:
        assert normalize_whitespace("  a \n\n\t b   c  ") == "a b c"

    def test_non_breaking_space_is_whitespace(self) -> None:
        assert normalize_whitespace("a\u00a0 b") == "a b"


class TestExtractText:
    def test_selector_order(self) -> None:
        assert DEFAULT_SELECTORS == ("main", "article", "body")

    def test_prefers_main_over_article_and_body(self) -> None:
        assert extract_text(_SIMPLE_HTML) == _MAIN_TEXT

    def test_falls_back_to_article(self) -> None:
        html = f"<html><body><p>Sidebar</p><article>{_ARTICLE_TEXT}</article></body></html>"
        assert extract_text(html) == _ARTICLE_TEXT

    def test_falls_back_to_body(self) -> None:
        html = f"<html><body>\n  <p>{_BODY_TEXT}</p>\n  <p>Second paragraph.</p>\n</body></html>"
        assert extract_text(html) == f"{_BODY_TEXT} Second paragraph."

    def test_concatenates_every_matching_element(self) -> None:
        html = (
            "<html><body>"
            "<main>First main block with a fair amount of text. </main>"
            "<main>Second main block follows it.</main>"
            "</body></html>"
        )
        assert extract_text(html) == (
            "First main block with a fair amount of text. Second main block follows it."
        )

    def test_collapses_nested_whitespace(self) -> None:
        html = (
            "<main>\n\t<h1>Title</h1>\n\n<p>Some   paragraph\ttext that goes on "
            "for a long while.</p>\n</main>"
        )
        assert extract_text(html) == "Title Some paragraph text that goes on for a long while."

    def test_short_text_fails(self) -> None:
        with pytest.raises(ExtractionError) as excinfo:
            extract_text("<html><body><main>Too short.</main></body></html>")
        assert excinfo.value.stage == STAGE_EXTRACT
        assert excinfo.value.message == "Could not extract blog content"

    def test_exactly_minimum_length_passes(self) -> None:
        text = "x" * MIN_CONTENT_LENGTH
        assert extract_text(f"<main>{text}</main>") == text

    def test_one_below_minimum_fails(self) -> None:
        with pytest.raises(ExtractionError):
            extract_text(f"<main>{'x' * (MIN_CONTENT_LENGTH - 1)}</main>")

    def test_length_measured_after_normalisation(self) -> None:
        padded = "word " + " " * 100 + "word"
        with pytest.raises(ExtractionError):
            extract_text(f"<main>{padded}</main>")

    def test_empty_document_fails(self) -> None:
        with pytest.raises(ExtractionError):
            extract_text("<html></html>")

    def test_whitespace_only_main_is_not_skipped(self) -> None:
        """A ``<main>`` with any raw text wins, even if it normalises to nothing."""
        html = f"<html><body><main>\n   \n</main><article>{_ARTICLE_TEXT}</article></body></html>"
        with pytest.raises(ExtractionError):
            extract_text(html)

    def test_empty_main_is_skipped(self) -> None:
        html = f"<html><body><main></main><article>{_ARTICLE_TEXT}</article></body></html>"
        assert extract_text(html) == _ARTICLE_TEXT

    def test_fragment_without_body_tag(self) -> None:
        assert extract_text(f"<p>{_BODY_TEXT}</p>") == _BODY_TEXT

    def test_html5_page_with_omitted_body_tag(self) -> None:
        html = (
            "<!DOCTYPE html><html><head><title>Page title</title></head>"
            f"<p>{_BODY_TEXT}</p></html>"
        )
        assert extract_text(html) == _BODY_TEXT

    def test_empty_body_does_not_fall_back_to_head(self) -> None:
        html = f"<html><head><title>{_ARTICLE_TEXT}</title></head><body></body></html>"
        with pytest.raises(ExtractionError):
            extract_text(html)

    def test_custom_selectors(self) -> None:
        html = f'<html><body><div class="post">{_ARTICLE_TEXT}</div></body></html>'
        assert extract_text(html, selectors=("div.post",)) == _ARTICLE_TEXT


class TestExtractContent:
    def test_returns_clean_page(self) -> None:
        raw = RawPage(url="https://example.com/", html=_SIMPLE_HTML, status_code=200)
        clean = extract_content(raw)

        assert isinstance(clean, CleanPage)
        assert clean.url == "https://example.com/"
        assert clean.text == _MAIN_TEXT

    def test_failure_propagates(self) -> None:
        raw = RawPage(url="https://example.com/", html="<html></html>", status_code=200)
        with pytest.raises(ExtractionError):
            extract_content(raw)
