"""
OCR Fallback Client
===================

Single, bounded OCR attempt for documents whose recovered text failed the
quality gate. Every failure mode (unconfigured backend, timeout, transport
error, bad status, malformed body, empty text) yields None: the caller keeps
the heuristic candidate and carries on.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from pdf_extractor.backends.base import BaseOCRBackend, OCRResult

logger = logging.getLogger(__name__)


class OcrFallbackClient:
    """Runs one OCR backend call as a future with an explicit timeout."""

    def __init__(
        self,
        backend: BaseOCRBackend | None,
        timeout_seconds: float = 60.0,
    ):
        """
        Initialize the fallback client.

        Args:
            backend: OCR backend to call (None disables the fallback)
            timeout_seconds: Upper bound on the whole call
        """
        self.backend = backend
        self.timeout_seconds = timeout_seconds

    def is_available(self) -> bool:
        return self.backend is not None and self.backend.is_available()

    def recognize(self, raw_bytes: bytes, filename: str = "document.pdf") -> OCRResult | None:
        """
        Recognize the document once.

        The same timeout is handed to the backend call, so a worker left
        behind after a timeout is bounded by the backend's own deadline.

        Args:
            raw_bytes: Raw document bytes
            filename: Original filename

        Returns:
            OCRResult, or None when the fallback is unavailable
        """
        if not self.is_available():
            logger.info("OCR fallback skipped: no available backend")
            return None

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="ocr-fallback")
        future = executor.submit(
            self.backend.extract_text, raw_bytes, filename, timeout=self.timeout_seconds
        )
        try:
            result = future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError:
            future.cancel()
            logger.warning(
                "OCR (%s) timed out after %.1fs for %s",
                self.backend.name, self.timeout_seconds, filename,
            )
            return None
        except Exception as e:
            logger.warning("OCR (%s) failed for %s: %s", self.backend.name, filename, e)
            return None
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        if not result.text.strip():
            logger.warning("OCR (%s) returned empty text for %s", self.backend.name, filename)
            return None

        return result
