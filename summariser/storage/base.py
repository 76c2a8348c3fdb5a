"""Abstract store interfaces consumed by the pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod

from summariser.storage.models import FullTextRecord, SummaryRecord


class SummaryStore(ABC):
    """Structured-record sink for ``(url, summary, translated_summary)``."""

    @abstractmethod
    def insert_summary(self, record: SummaryRecord) -> None:
        """Persist *record*.  Raise a ``PipelineError`` subclass on failure."""


class FullTextStore(ABC):
    """Document sink for ``(url, full_text, created_at)``."""

    @abstractmethod
    def insert_full_text(self, record: FullTextRecord) -> None:
        """Persist *record*.  Raise a ``PipelineError`` subclass on failure."""
