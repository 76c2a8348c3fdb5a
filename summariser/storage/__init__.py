"""Persistence collaborators — Supabase for summaries, MongoDB for full text."""

from summariser.storage.base import FullTextStore, SummaryStore
from summariser.storage.models import FullTextRecord, SummaryRecord
from summariser.storage.mongo import MongoFullTextStore
from summariser.storage.supabase import SupabaseSummaryStore

__all__ = [
    "SummaryStore",
    "FullTextStore",
    "SummaryRecord",
    "FullTextRecord",
    "SupabaseSummaryStore",
    "MongoFullTextStore",
]
