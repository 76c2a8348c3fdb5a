"""Process-wide logging configuration."""

from __future__ import annotations

import logging

from summariser.config import settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at *level* (defaults to ``settings.log_level``).

    Calling it again is a no-op once the root logger has handlers, so the
    app factory and the CLI can both call it safely.
    """
    logging.basicConfig(level=(level or settings.log_level), format=_FORMAT)
