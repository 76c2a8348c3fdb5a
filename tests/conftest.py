"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from summariser.pipeline.orchestrator import SummaryPipeline

from tests.fakes import (
    BLOG_HTML,
    FIXED_NOW,
    FakeFullTextStore,
    FakeSummaryStore,
    static_fetcher,
)


@pytest.fixture()
def summary_store() -> FakeSummaryStore:
    return FakeSummaryStore()


@pytest.fixture()
def full_text_store() -> FakeFullTextStore:
    return FakeFullTextStore()


@pytest.fixture()
def pipeline(
    summary_store: FakeSummaryStore, full_text_store: FakeFullTextStore
) -> SummaryPipeline:
    """A pipeline serving :data:`BLOG_HTML` into the fake stores."""
    return SummaryPipeline(
        summary_store=summary_store,
        full_text_store=full_text_store,
        fetcher=static_fetcher(BLOG_HTML),
        clock=lambda: FIXED_NOW,
    )
