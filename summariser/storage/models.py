"""Records handed to the persistence stores."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SummaryRecord:
    url: str
    summary: str
    translated_summary: str

    def to_row(self) -> dict[str, Any]:
        """Serialise to the ``summaries`` table column names."""
        return {
            "url": self.url,
            "summary": self.summary,
            "urdu_summary": self.translated_summary,
        }


@dataclass(frozen=True)
class FullTextRecord:
    url: str
    full_text: str
    created_at: datetime

    def to_document(self) -> dict[str, Any]:
        """Serialise to the ``blog_texts`` document shape."""
        return {
            "url": self.url,
            "fullText": self.full_text,
            "created_at": self.created_at,
        }
