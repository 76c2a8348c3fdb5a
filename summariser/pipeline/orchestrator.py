"""Summarisation pipeline — URL in, persisted summary out.

``SummaryPipeline.run`` sequences the stages:

    fetch → extract → summarise → translate → persist summary → persist text

Every failure is terminal and raised as a stage-tagged
:class:`~summariser.errors.PipelineError`.  There is no retry and no
rollback: if the full-text insert fails, the summary row already written
stays written.  Running the same URL twice stores two copies of each record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Mapping

import httpx

from summariser.config import Settings, settings as default_settings
from summariser.errors import FetchError
from summariser.pipeline.models import PipelineResult
from summariser.pipeline.summarizer import DEFAULT_MAX_SENTENCES, summarize
from summariser.pipeline.translator import URDU_TABLE, load_table, translate
from summariser.scraper.extractor import extract_content
from summariser.scraper.fetcher import fetch_url
from summariser.scraper.models import RawPage
from summariser.storage.base import FullTextStore, SummaryStore
from summariser.storage.models import FullTextRecord, SummaryRecord
from summariser.storage.mongo import MongoFullTextStore
from summariser.storage.supabase import SupabaseSummaryStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SummaryPipeline:
    """Wire the pure stages to the fetch and persistence collaborators."""

    summary_store: SummaryStore
    full_text_store: FullTextStore
    fetcher: Callable[[str], RawPage] = fetch_url
    table: Mapping[str, str] = field(default_factory=lambda: URDU_TABLE)
    max_sentences: int = DEFAULT_MAX_SENTENCES
    clock: Callable[[], datetime] = _utcnow

    def process(self, url: str) -> PipelineResult:
        """Run fetch → extract → summarise → translate without persisting.

        Raises:
            FetchError: If the page cannot be downloaded.
            ExtractionError: If no usable main content is found.
        """
        try:
            raw = self.fetcher(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            raise FetchError() from exc

        page = extract_content(raw)
        summary = summarize(page.text, self.max_sentences)
        translated = translate(summary, self.table)

        return PipelineResult(
            summary=summary,
            translated_summary=translated,
            full_text=page.text,
        )

    def run(self, url: str) -> PipelineResult:
        """Process *url* and persist both the summary and the full text.

        Raises:
            PipelineError: The first failing stage's error; later stages are
                skipped.
        """
        result = self.process(url)

        self.summary_store.insert_summary(
            SummaryRecord(
                url=url,
                summary=result.summary,
                translated_summary=result.translated_summary,
            )
        )
        self.full_text_store.insert_full_text(
            FullTextRecord(url=url, full_text=result.full_text, created_at=self.clock())
        )

        logger.info(
            "Summarised %s (%d chars, %d-char summary)",
            url,
            len(result.full_text),
            len(result.summary),
        )
        return result


def build_pipeline(config: Settings | None = None) -> SummaryPipeline:
    """Return a :class:`SummaryPipeline` wired from *config* (default: settings)."""
    config = config or default_settings
    return SummaryPipeline(
        summary_store=SupabaseSummaryStore(
            base_url=config.supabase_url,
            api_key=config.supabase_key,
            table=config.supabase_table,
        ),
        full_text_store=MongoFullTextStore(
            uri=config.mongodb_uri,
            database=config.mongodb_database,
            collection=config.mongodb_collection,
        ),
        table=load_table(config.translation_table_path),
        max_sentences=config.summary_sentences,
    )
