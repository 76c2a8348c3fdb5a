"""Summarisation endpoint.

Routes
------
POST /api/summarise    Body: {"url": "https://..."}    → SummaryPipeline.run

Every failure is answered with ``{"error": <message>}``.  Pipeline errors keep
their own status (400 for fetch/extract, 500 for the stores); anything else,
including a body that is not JSON, is a 400 ``"Invalid request"``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from summariser.errors import PipelineError

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_URL_ERROR = "Missing or invalid url"
INVALID_REQUEST_ERROR = "Invalid request"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class SummariseResponse(BaseModel):
    summary: str
    urduSummary: str
    fullText: str


class ErrorResponse(BaseModel):
    error: str


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/summarise",
    response_model=SummariseResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def summarise_endpoint(request: Request) -> Any:
    """Fetch a blog post, summarise it, translate the summary and store both."""
    try:
        body = await request.json()
        url = body.get("url") if isinstance(body, dict) else None
        if not url or not isinstance(url, str):
            return _error(MISSING_URL_ERROR, 400)

        pipeline = request.app.state.pipeline
        result = await run_in_threadpool(pipeline.run, url)
    except PipelineError as exc:
        return _error(exc.message, exc.status_code)
    except Exception:
        logger.exception("Unhandled error while summarising")
        return _error(INVALID_REQUEST_ERROR, 400)

    return result.to_response()
