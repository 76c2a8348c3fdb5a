"""FastAPI application factory.

Lifespan
--------
On startup the app builds a single :class:`SummaryPipeline` from the settings
(shared across all requests via ``request.app.state.pipeline``).  The
translation table is loaded once here and never changes afterwards.

Routers
-------
    /api       — summarisation endpoint
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from summariser import __version__
from summariser.logging_setup import configure_logging
from summariser.pipeline import build_pipeline

from summariser.api.routers import summarise as summarise_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the pipeline on startup."""
    app.state.pipeline = build_pipeline()
    yield


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="Blog Summariser API",
        description=(
            "Fetches a blog post, extracts its main text, returns a short "
            "extractive summary with a word-by-word Urdu rendering, and stores "
            "the summary in Supabase and the full text in MongoDB."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(summarise_router.router, prefix="/api", tags=["summarise"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn summariser.api.app:app --reload
app = create_app()
