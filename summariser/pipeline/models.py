"""Result type of a successful pipeline run."""

from __future__ import annotations

from dataclasses import dataclass

NO_SUMMARY_PLACEHOLDER = "No summary available."


@dataclass(frozen=True)
class PipelineResult:
    summary: str
    translated_summary: str
    full_text: str

    def to_response(self) -> dict[str, str]:
        """Serialise to the public JSON shape.

        An empty summary is shown as :data:`NO_SUMMARY_PLACEHOLDER`; the
        translated summary is passed through as-is.
        """
        return {
            "summary": self.summary or NO_SUMMARY_PLACEHOLDER,
            "urduSummary": self.translated_summary,
            "fullText": self.full_text,
        }
