"""Data models for the scraper stage."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class CleanPage:
    """Normalised main-content text extracted from a :class:`RawPage`."""

    url: str
    text: str
