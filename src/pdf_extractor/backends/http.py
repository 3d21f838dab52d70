"""
HTTP OCR Backend
================

Sends the whole document to a remote OCR service as a multipart upload and
expects a JSON body of the form {"text": str, "pages": int}.
"""

import logging
import os
import time
from typing import Any

import requests

from pdf_extractor.errors import TransientFallbackFailure

from .base import BaseOCRBackend, OCRResult

logger = logging.getLogger(__name__)


class HttpOCRBackend(BaseOCRBackend):
    """
    OCR backend for a remote recognition service.

    Environment variables:
        OCR_SERVICE_URL: Recognition endpoint (backend unavailable if unset)
        OCR_API_KEY: Optional bearer token
        OCR_TIMEOUT: Request timeout in seconds (default: 60)
    """

    DEFAULT_TIMEOUT = 60

    def __init__(
        self,
        service_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize HTTP OCR backend.

        Args:
            service_url: OCR endpoint URL (or OCR_SERVICE_URL env var)
            api_key: Bearer token (or OCR_API_KEY env var)
            timeout: Request timeout in seconds (or OCR_TIMEOUT env var)
        """
        super().__init__(name="HttpOCR")

        self.service_url = service_url or os.getenv("OCR_SERVICE_URL")
        self.api_key = api_key or os.getenv("OCR_API_KEY")
        self.timeout = timeout or self._timeout_from_env()

    def _timeout_from_env(self) -> float:
        value = os.getenv("OCR_TIMEOUT")
        if value is None:
            return self.DEFAULT_TIMEOUT
        try:
            timeout = float(value)
        except ValueError:
            timeout = 0
        if not timeout > 0:
            logger.warning(
                "Ignoring invalid OCR_TIMEOUT=%r, using %ss", value, self.DEFAULT_TIMEOUT
            )
            return self.DEFAULT_TIMEOUT
        return timeout

    def is_available(self) -> bool:
        """Check if an OCR endpoint is configured."""
        return bool(self.service_url)

    def extract_text(self, data: bytes, filename: str, **kwargs: Any) -> OCRResult:
        """
        Upload the document and return the recognized text.

        Raises:
            TransientFallbackFailure: Unconfigured backend, non-200 status,
                or a response that is not {"text": str, "pages": int}
            requests.RequestException: Transport errors
        """
        if not self.is_available():
            raise TransientFallbackFailure("OCR service URL not configured")

        start_time = time.time()
        timeout = kwargs.get("timeout", self.timeout)

        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        files = {"file": (filename, data, "application/pdf")}
        response = requests.post(
            self.service_url,
            headers=headers,
            files=files,
            timeout=timeout,
        )

        if response.status_code != 200:
            raise TransientFallbackFailure(
                f"OCR failed: {response.status_code}",
                details=response.text[:500],
            )

        text, pages = self._parse_response(response)
        processing_time = (time.time() - start_time) * 1000

        logger.info(
            "OCR completed: file=%s, pages=%d, words=%d, time=%.0fms",
            filename,
            pages,
            len(text.split()),
            processing_time,
        )

        return OCRResult(
            text=text,
            page_count=pages,
            backend=self.name,
            metadata={"processing_time_ms": processing_time},
        )

    def _parse_response(self, response: requests.Response) -> tuple[str, int]:
        try:
            body = response.json()
        except ValueError as e:
            raise TransientFallbackFailure("OCR response is not JSON") from e

        if not isinstance(body, dict):
            raise TransientFallbackFailure("OCR response is not an object")

        text = body.get("text")
        pages = body.get("pages")
        if not isinstance(text, str):
            raise TransientFallbackFailure("OCR response has no 'text' string")
        if isinstance(pages, bool) or not isinstance(pages, int) or pages < 1:
            raise TransientFallbackFailure("OCR response has no valid 'pages' count")

        return text, pages
