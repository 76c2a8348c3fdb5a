"""Summary store backed by a Supabase table.

Rows are inserted with the official ``supabase`` client; a client is created
per insert from the project URL and anon key.
"""

from __future__ import annotations

import logging

import httpx
from postgrest.exceptions import APIError
from supabase import Client, SupabaseException, create_client

from summariser.errors import (
    STAGE_PERSIST_SUMMARY,
    ConfigurationError,
    PersistenceError,
)
from summariser.storage.base import SummaryStore
from summariser.storage.models import SummaryRecord

logger = logging.getLogger(__name__)


class SupabaseSummaryStore(SummaryStore):
    """Insert :class:`SummaryRecord` rows into a Supabase table."""

    def __init__(self, base_url: str, api_key: str, table: str = "summaries") -> None:
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.api_key = api_key
        self.table = table

    def _client(self) -> Client:
        return create_client(self.base_url, self.api_key)

    def insert_summary(self, record: SummaryRecord) -> None:
        """Insert *record* as a single row.

        Raises:
            ConfigurationError: If the URL or key is not configured.
            PersistenceError: If the client cannot be created or the insert
                fails or is rejected.
        """
        if not self.base_url or not self.api_key:
            raise ConfigurationError("Supabase credentials not set", STAGE_PERSIST_SUMMARY)

        try:
            self._client().table(self.table).insert([record.to_row()]).execute()
        except (APIError, SupabaseException, httpx.HTTPError) as exc:
            logger.error("Supabase error: %s", exc)
            raise PersistenceError(
                "Failed to save summary to Supabase", STAGE_PERSIST_SUMMARY
            ) from exc
