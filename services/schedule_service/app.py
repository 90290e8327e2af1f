"""
FastAPI service for schedule parsing.

Exposes schedule_parser.SchedulePipeline as a REST endpoint. A request can
take several model calls (up to the per-call timeout each) before falling
back to the heuristic parser, so the blocking pipeline runs in a worker
thread.
"""
from __future__ import annotations

import asyncio
import logging
import typing as t
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schedule_parser.config import load_config
from schedule_parser.errors import ExtractionServiceError, InputValidationError
from schedule_parser.logging_setup import setup_logging
from schedule_parser.normalizer import class_to_dict
from schedule_parser.pipeline import SchedulePipeline
from services.shared.models import (
    ErrorResponse,
    ParseScheduleRequest,
    ParseScheduleResponse,
)


logger = logging.getLogger(__name__)

# Global pipeline - will be initialized on startup
pipeline: t.Optional[SchedulePipeline] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup and cleanup on shutdown."""
    global pipeline

    setup_logging()
    if pipeline is None:
        pipeline = SchedulePipeline(load_config())
    if not pipeline.config.extraction_configured:
        logger.warning("OPENAI_API_KEY is not set; every request will use the heuristic parser")

    yield


app = FastAPI(
    title="Schedule Service",
    description="REST API for extracting class sessions from uploaded schedules",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are bad requests, reported in the same shape as other rejections."""
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "schedule-service"}


@app.post(
    "/parse-schedule",
    response_model=ParseScheduleResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def parse_schedule(request: ParseScheduleRequest):
    """
    Parse an uploaded schedule into class sessions.

    Returns 400 for invalid uploads and 500 when the extraction service fails
    unexpectedly. Degraded (heuristic) results are still 200, with a warning.
    """
    try:
        result = await asyncio.to_thread(pipeline.parse_schedule, request.to_payload())
    except InputValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except ExtractionServiceError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})

    return ParseScheduleResponse(
        classes=[class_to_dict(c) for c in result.classes],
        warnings=result.warnings,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
