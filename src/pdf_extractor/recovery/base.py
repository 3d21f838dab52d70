"""
Base Recovery Method
====================

Abstract base class for text recovery methods used by TextRecoveryEngine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from pdf_extractor.scanner import ByteScanner

# Marks one page object in the document structure (excludes /Pages, /PageLabels)
PAGE_MARKER = r"/Type\s*/Page(?![A-Za-z])"


class SourceMethod(Enum):
    """Method that produced an extraction candidate."""
    MARKER_SCAN = "marker_scan"                  # BT/ET text objects
    STREAM_SCAN = "stream_scan"                  # readable runs in streams
    STRUCTURAL_FALLBACK = "structural_fallback"  # synthesized placeholder


@dataclass(frozen=True)
class ExtractionCandidate:
    """One method's recovered text plus its page-count estimate."""
    text: str
    estimated_page_count: int
    source_method: SourceMethod


class BaseRecoveryMethod(ABC):
    """
    Abstract base class for recovery methods.

    All methods must implement:
    - attempt(): Return raw recovered text (may be empty)

    A terminal method is accepted by the engine even when its output would
    not pass the sufficiency check; it ends the cascade.
    """

    source: SourceMethod
    terminal: bool = False

    def __init__(self, name: str = "BaseRecovery"):
        self.name = name

    @abstractmethod
    def attempt(self, scanner: ByteScanner) -> str:
        """
        Recover text from the scanned document.

        Args:
            scanner: ByteScanner over the raw document bytes

        Returns:
            Recovered text before normalization; empty if nothing was found
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
