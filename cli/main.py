"""Blog summariser CLI — entry-point for running the pipeline by hand.

Usage:
    python cli/main.py --help

Commands:
    summarise  → full pipeline, including persistence
    preview    → fetch, extract, summarise and translate; nothing is stored
    translate  → dictionary-translate a piece of text
    serve      → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from summariser.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json

import typer

from summariser.config import settings
from summariser.errors import PipelineError
from summariser.logging_setup import configure_logging
from summariser.pipeline import build_pipeline, load_table, translate

app = typer.Typer(
    name="summariser",
    help="Blog summariser CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    configure_logging(log_level.upper())


def _echo_json(payload: dict[str, str]) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("summarise")
def summarise(
    url: str = typer.Argument(..., help="Blog post URL."),
) -> None:
    """Summarise URL and store the summary (Supabase) and full text (MongoDB)."""
    pipeline = build_pipeline()
    try:
        result = pipeline.run(url)
    except PipelineError as exc:
        typer.echo(f"[summarise] {exc.stage}: {exc.message}", err=True)
        raise typer.Exit(1)
    _echo_json(result.to_response())


@app.command("preview")
def preview(
    url: str = typer.Argument(..., help="Blog post URL."),
) -> None:
    """Show the summary and its translation without storing anything."""
    pipeline = build_pipeline()
    try:
        result = pipeline.process(url)
    except PipelineError as exc:
        typer.echo(f"[preview] {exc.stage}: {exc.message}", err=True)
        raise typer.Exit(1)
    _echo_json(result.to_response())


@app.command("translate")
def translate_cmd(
    text: str = typer.Argument(..., help="English text to translate word by word."),
) -> None:
    """Translate TEXT to Urdu with the dictionary table."""
    table = load_table(settings.translation_table_path)
    typer.echo(translate(text, table))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run("summariser.api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
