"""Scraper package — web fetch & content extraction."""

from summariser.scraper.extractor import extract_content, extract_text
from summariser.scraper.fetcher import fetch_url
from summariser.scraper.models import CleanPage, RawPage

__all__ = ["fetch_url", "extract_content", "extract_text", "RawPage", "CleanPage"]
