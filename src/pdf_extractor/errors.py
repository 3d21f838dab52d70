"""
Error Taxonomy
==============

Typed errors raised by the extraction pipeline and mapped to JSON error
payloads by the service layer.

- ValidationError: request rejected before any extraction work (400)
- TransientFallbackFailure: OCR backend failure, absorbed by the fallback client
- UnrecoverableRequestFault: payload unreadable or an unexpected fault (500)
"""

from datetime import datetime, timezone
from typing import Any


class ExtractionServiceError(Exception):
    """Base class for all service errors."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        """Structured error body: error, details, timestamp."""
        return error_payload(self.message, self.details or self.message)


class ValidationError(ExtractionServiceError):
    """Missing file, unsupported media type, or invalid export request."""

    status_code = 400


class TransientFallbackFailure(ExtractionServiceError):
    """OCR fallback call failed. Never surfaced to API callers."""

    status_code = 503


class UnrecoverableRequestFault(ExtractionServiceError):
    """The request could not be processed at all."""

    status_code = 500


def error_payload(error: str, details: str) -> dict[str, Any]:
    return {
        "error": error,
        "details": details,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
