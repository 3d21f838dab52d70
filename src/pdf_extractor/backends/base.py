"""
Base OCR Backend
================

Abstract base class for OCR backend implementations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OCRResult:
    """Result from a whole-document OCR call."""
    text: str
    page_count: int = 1
    backend: str = "unknown"
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def word_count(self) -> int:
        return len(self.text.split())


class BaseOCRBackend(ABC):
    """
    Abstract base class for OCR backends.

    All OCR backends must implement:
    - extract_text(): Recognize text in a whole document
    - is_available(): Check if the backend is configured

    Backends raise on failure; OcrFallbackClient turns failures into an
    absent result.
    """

    def __init__(self, name: str = "BaseOCR"):
        """
        Initialize backend.

        Args:
            name: Human-readable name for the backend
        """
        self.name = name

    @abstractmethod
    def extract_text(self, data: bytes, filename: str, **kwargs: Any) -> OCRResult:
        """
        Recognize text in a document.

        Args:
            data: Raw document bytes
            filename: Original filename, forwarded to the service
            **kwargs: Backend-specific options

        Returns:
            OCRResult with recognized text and page count
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this backend is available and configured.

        Returns:
            True if backend can be used, False otherwise
        """
        pass

    def __repr__(self) -> str:
        available = "available" if self.is_available() else "unavailable"
        return f"{self.__class__.__name__}(name='{self.name}', {available})"
