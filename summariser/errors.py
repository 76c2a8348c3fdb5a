"""Failure taxonomy for the summarisation pipeline.

Every failure is terminal for the request.  Each exception carries the
pipeline ``stage`` it was raised from and the HTTP status class the API layer
reports it with; ``message`` is the stable, user-visible error string.
"""

from __future__ import annotations

STAGE_FETCH = "fetch"
STAGE_EXTRACT = "extract"
STAGE_PERSIST_SUMMARY = "persist-summary"
STAGE_PERSIST_FULLTEXT = "persist-fulltext"


class PipelineError(Exception):
    """Base class for every stage-tagged pipeline failure."""

    status_code: int = 400

    def __init__(self, message: str, stage: str) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stage={self.stage!r}, message={self.message!r})"


class FetchError(PipelineError):
    """The page could not be downloaded (network error, timeout, non-2xx)."""

    def __init__(self, message: str = "Failed to fetch blog page") -> None:
        super().__init__(message, STAGE_FETCH)


class ExtractionError(PipelineError):
    """No main content, or content shorter than the minimum length."""

    def __init__(self, message: str = "Could not extract blog content") -> None:
        super().__init__(message, STAGE_EXTRACT)


class PersistenceError(PipelineError):
    """A store rejected or failed to complete an insert."""

    status_code = 500


class ConfigurationError(PipelineError):
    """A store is missing the credentials it needs."""

    status_code = 500
