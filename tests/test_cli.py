"""Tests for the Typer CLI."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from cli.main import app
from summariser.errors import FetchError
from summariser.pipeline.models import PipelineResult

runner = CliRunner()

_RESULT = PipelineResult(
    summary="This is a blog post.",
    translated_summary="یہ ہے ایک بلاگ پوسٹ",
    full_text="This is a blog post. It goes on for a little while longer.",
)


def test_translate() -> None:
    result = runner.invoke(app, ["translate", "This is a blog post"])
    assert result.exit_code == 0
    assert result.output.strip() == "یہ ہے ایک بلاگ پوسٹ"


def test_summarise_prints_response() -> None:
    pipeline = MagicMock()
    pipeline.run.return_value = _RESULT

    with patch("cli.main.build_pipeline", return_value=pipeline):
        result = runner.invoke(app, ["summarise", "https://blog.example.com/post"])

    assert result.exit_code == 0
    pipeline.run.assert_called_once_with("https://blog.example.com/post")
    assert json.loads(result.output) == {
        "summary": "This is a blog post.",
        "urduSummary": "یہ ہے ایک بلاگ پوسٹ",
        "fullText": "This is a blog post. It goes on for a little while longer.",
    }


def test_summarise_failure_exits_non_zero() -> None:
    pipeline = MagicMock()
    pipeline.run.side_effect = FetchError()

    with patch("cli.main.build_pipeline", return_value=pipeline):
        result = runner.invoke(app, ["summarise", "https://blog.example.com/post"])

    assert result.exit_code == 1
    assert "Failed to fetch blog page" in result.output


def test_preview_does_not_persist() -> None:
    pipeline = MagicMock()
    pipeline.process.return_value = _RESULT

    with patch("cli.main.build_pipeline", return_value=pipeline):
        result = runner.invoke(app, ["preview", "https://blog.example.com/post"])

    assert result.exit_code == 0
    pipeline.process.assert_called_once_with("https://blog.example.com/post")
    pipeline.run.assert_not_called()
    assert json.loads(result.output)["urduSummary"] == "یہ ہے ایک بلاگ پوسٹ"
