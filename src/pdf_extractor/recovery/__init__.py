"""
Text Recovery
=============

Heuristic text recovery from raw PDF bytes.

Available Methods:
- MarkerScanMethod: show-text operands inside BT/ET text objects
- StreamScanMethod: readable runs inside stream blocks
- StructuralFallbackMethod: deterministic placeholder text (terminal)

Usage:
    from pdf_extractor.recovery import TextRecoveryEngine

    candidate = TextRecoveryEngine().recover(pdf_bytes)
    print(candidate.text)
"""

from .base import (
    PAGE_MARKER,
    BaseRecoveryMethod,
    ExtractionCandidate,
    SourceMethod,
)
from .engine import TextRecoveryEngine, default_methods, normalize_text
from .marker import MarkerScanMethod
from .stream import StreamScanMethod
from .structural import StructuralFallbackMethod

__all__ = [
    "PAGE_MARKER",
    "BaseRecoveryMethod",
    "ExtractionCandidate",
    "SourceMethod",
    "TextRecoveryEngine",
    "default_methods",
    "normalize_text",
    "MarkerScanMethod",
    "StreamScanMethod",
    "StructuralFallbackMethod",
]
