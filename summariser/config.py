"""Centralised settings for the blog summariser.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env(*names: str, default: str = "") -> str:
    """Return the first non-empty environment variable among *names*."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Structured-record store (Supabase / PostgREST)
    # ------------------------------------------------------------------
    supabase_url: str = field(
        default_factory=lambda: _env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
    )
    supabase_key: str = field(
        default_factory=lambda: _env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY")
    )
    supabase_table: str = field(
        default_factory=lambda: _env("SUPABASE_TABLE", default="summaries")
    )

    # ------------------------------------------------------------------
    # Document store (MongoDB)
    # ------------------------------------------------------------------
    mongodb_uri: str = field(default_factory=lambda: _env("MONGODB_URI"))
    mongodb_database: str = field(
        default_factory=lambda: _env("MONGODB_DATABASE", default="test")
    )
    mongodb_collection: str = field(
        default_factory=lambda: _env("MONGODB_COLLECTION", default="blog_texts")
    )

    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    summary_sentences: int = field(
        default_factory=lambda: int(os.environ.get("SUMMARY_SENTENCES", "3"))
    )
    translation_table_path: Path | None = field(
        default_factory=lambda: (
            Path(os.environ["TRANSLATION_TABLE_PATH"])
            if os.environ.get("TRANSLATION_TABLE_PATH")
            else None
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton — import this everywhere:
#   from summariser.config import settings
settings = Settings()
