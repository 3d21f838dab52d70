"""
Text Recovery Engine
====================

Runs the recovery methods in strict priority order and returns the first
candidate whose normalized text is sufficient.

Cascade:
    | Priority | Method             | Accepted when                    |
    |----------|--------------------|----------------------------------|
    | 1        | MarkerScan         | >= min_text_length normalized    |
    | 2        | StreamScan         | >= min_text_length normalized    |
    | 3        | StructuralFallback | always (terminal)                |

Usage:
    engine = TextRecoveryEngine()
    candidate = engine.recover(pdf_bytes)
    print(candidate.source_method, candidate.estimated_page_count)
"""

import logging
import math
import re

from pdf_extractor.models import ExtractorConfig
from pdf_extractor.scanner import ByteScanner

from .base import PAGE_MARKER, BaseRecoveryMethod, ExtractionCandidate, SourceMethod
from .marker import MarkerScanMethod
from .stream import StreamScanMethod
from .structural import StructuralFallbackMethod

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_REPEATED_CHAR = re.compile(r"(.)\1{10,}", re.DOTALL)


def normalize_text(text: str) -> str:
    """Collapse whitespace, defang long single-character runs, trim."""
    text = _WHITESPACE.sub(" ", text)
    text = _REPEATED_CHAR.sub(r"\1", text)
    return text.strip()


def default_methods(config: ExtractorConfig) -> list[BaseRecoveryMethod]:
    return [
        MarkerScanMethod(min_fragment_length=config.min_fragment_length),
        StreamScanMethod(min_run_length=config.stream_run_min_length),
        StructuralFallbackMethod(),
    ]


class TextRecoveryEngine:
    """Ordered cascade of recovery methods. recover() never raises."""

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        methods: list[BaseRecoveryMethod] | None = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Extraction configuration (thresholds)
            methods: Recovery methods in priority order; defaults to
                MarkerScan, StreamScan, StructuralFallback
        """
        self.config = config or ExtractorConfig()
        self.methods = methods if methods is not None else default_methods(self.config)

    def recover(self, raw_bytes: bytes) -> ExtractionCandidate:
        try:
            scanner = ByteScanner(raw_bytes)
        except Exception as e:
            logger.warning("Cannot scan document bytes: %s", e)
            return self._last_resort()

        for method in self.methods:
            try:
                text = normalize_text(method.attempt(scanner))
            except Exception as e:
                logger.warning("%s failed, trying next method: %s", method.name, e)
                continue

            if not (method.terminal or self.is_sufficient(text)):
                logger.debug(
                    "%s insufficient (%d chars < %d)",
                    method.name, len(text), self.config.min_text_length,
                )
                continue

            if not text:
                continue

            page_count = self.estimate_page_count(scanner, text)
            logger.info(
                "Text recovered via %s: %d chars, %d estimated pages",
                method.name, len(text), page_count,
            )
            return ExtractionCandidate(
                text=text,
                estimated_page_count=page_count,
                source_method=method.source,
            )

        return self._last_resort()

    def is_sufficient(self, text: str) -> bool:
        return bool(text) and len(text) >= self.config.min_text_length

    def estimate_page_count(self, scanner: ByteScanner, text: str) -> int:
        """Page-type markers, else one page per chars_per_page of text."""
        markers = scanner.count(PAGE_MARKER)
        if markers:
            return markers
        return max(1, math.ceil(len(text) / self.config.chars_per_page))

    def _last_resort(self) -> ExtractionCandidate:
        logger.warning("All recovery methods failed, using one-page placeholder")
        return ExtractionCandidate(
            text=normalize_text(StructuralFallbackMethod.placeholder(1, False, False)),
            estimated_page_count=1,
            source_method=SourceMethod.STRUCTURAL_FALLBACK,
        )
