"""
PDF Extraction Service - FastAPI Application

Minimal REST API for heuristic PDF content extraction and result export.
"""

import asyncio
import logging
import os
import time
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

load_dotenv()
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from pdf_extractor import (
    ExtractionOrchestrator,
    ExtractionServiceError,
    ExtractorConfig,
    OcrFallbackClient,
    RawDocument,
    UnrecoverableRequestFault,
    ValidationError,
    __version__,
    export_result,
)
from pdf_extractor.backends import HttpOCRBackend
from pdf_extractor.errors import error_payload

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="PDF Extraction Service",
    description="Heuristic PDF content extraction with OCR fallback",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Lazily built on first use so environment changes in tests are honored
_orchestrator: ExtractionOrchestrator | None = None
_ocr_backend: HttpOCRBackend | None = None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_orchestrator() -> ExtractionOrchestrator:
    """Get or create the ExtractionOrchestrator."""
    global _orchestrator, _ocr_backend

    if _orchestrator is None:
        if _ocr_backend is None:
            _ocr_backend = HttpOCRBackend()

        config = ExtractorConfig(
            enable_ocr_fallback=_env_flag("OCR_FALLBACK_ENABLED", True),
            ocr_timeout_seconds=_ocr_backend.timeout,
        )
        _orchestrator = ExtractionOrchestrator(
            config=config,
            ocr_client=OcrFallbackClient(
                _ocr_backend, timeout_seconds=config.ocr_timeout_seconds
            ),
        )

    return _orchestrator


def reset_orchestrator() -> None:
    """Drop the cached orchestrator and backend (used by tests)."""
    global _orchestrator, _ocr_backend
    _orchestrator = None
    _ocr_backend = None


# ============================================================================
# Pydantic Models
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = __version__
    uptime_seconds: float
    backends: dict[str, bool] = {}


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    details: str
    timestamp: str


# ============================================================================
# Global state
# ============================================================================

_start_time = time.time()


# ============================================================================
# Endpoints
# ============================================================================


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Health check endpoint for container orchestration."""
    orchestrator = get_orchestrator()
    ocr_available = bool(orchestrator.ocr_client and orchestrator.ocr_client.is_available())

    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        backends={"ocr": ocr_available},
    )


@app.get("/", tags=["System"])
async def root():
    """Root endpoint with API info."""
    return {
        "service": "pdf-extraction",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.post(
    "/api/extract-pdf",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Extraction"],
)
async def extract_pdf(
    file: UploadFile | None = File(default=None, description="PDF file to extract"),
) -> dict[str, Any]:
    """
    Extract text, metadata, per-page languages and statistics from a PDF.

    Text is recovered heuristically from the PDF byte structure. When the
    recovered text looks unusable, the document is sent once to the
    configured OCR service; if that fails the heuristic text is kept.
    """
    if file is None:
        raise ValidationError("No file provided")

    logger.info("File received: %s (%s)", file.filename, file.content_type)

    orchestrator = get_orchestrator()
    document = RawDocument(
        data=b"",
        media_type=file.content_type or "",
        filename=file.filename or "document.pdf",
    )
    orchestrator.validate(document)

    try:
        data = await file.read()
    except Exception as e:
        raise UnrecoverableRequestFault("Failed to read uploaded file", details=str(e)) from e

    document = RawDocument(data=data, media_type=document.media_type, filename=document.filename)

    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, orchestrator.extract, document)
    return result.to_dict()


@app.post(
    "/api/download-results",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Export"],
)
async def download_results(request: Request) -> Response:
    """
    Export a previous extraction result.

    Body: {"result": <extraction result>, "format": "json" | "txt"}
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationError("Invalid request data", details=str(e)) from e

    if not isinstance(body, dict):
        raise ValidationError("Invalid request data", details="Body must be a JSON object")

    result = body.get("result")
    fmt = body.get("format")
    if result is not None and not isinstance(result, dict):
        raise ValidationError("Invalid request data", details="'result' must be an object")

    exported = export_result(result or {}, fmt)

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )


# ============================================================================
# Error handlers
# ============================================================================


@app.exception_handler(ExtractionServiceError)
async def extraction_error_handler(request, exc: ExtractionServiceError):
    """Typed service errors carry their own status code."""
    if exc.status_code >= 500:
        logger.error("Request failed: %s (%s)", exc.message, exc.details)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """General exception handler."""
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=error_payload("Internal server error", str(exc)),
    )
