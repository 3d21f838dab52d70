"""
OCR Backends
============

OCR backend implementations used for escalation.

Available Backends:
- HttpOCRBackend: remote OCR service reached over HTTP (multipart upload)

Usage:
    from pdf_extractor.backends import HttpOCRBackend

    backend = HttpOCRBackend(service_url="https://ocr.example.com/recognize")
    if backend.is_available():
        result = backend.extract_text(pdf_bytes, "scan.pdf")
"""

from .base import BaseOCRBackend, OCRResult
from .http import HttpOCRBackend

__all__ = [
    "BaseOCRBackend",
    "OCRResult",
    "HttpOCRBackend",
]
