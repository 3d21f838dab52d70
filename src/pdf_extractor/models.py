"""
Data Models for PDF Extraction
==============================

Shared data models for the extraction pipeline.
"""

from dataclasses import dataclass, field
from typing import Any

from pdf_extractor.auxiliary import AuxiliaryFeatures


@dataclass
class ExtractorConfig:
    """Configuration for ExtractionOrchestrator and its stages."""

    min_text_length: int = 100  # normalized chars for a sufficient candidate
    min_fragment_length: int = 3
    stream_run_min_length: int = 10
    chars_per_page: int = 1000
    min_words: int = 10
    enable_ocr_fallback: bool = True
    escalate_placeholder_text: bool = False  # also OCR structural-fallback text
    ocr_timeout_seconds: float = 60.0
    accepted_media_types: tuple[str, ...] = ("application/pdf",)


@dataclass(frozen=True)
class RawDocument:
    """Uploaded file content. Never mutated during a request."""

    data: bytes
    media_type: str
    filename: str

    @property
    def stem(self) -> str:
        """Filename without a trailing .pdf extension."""
        if self.filename.lower().endswith(".pdf"):
            return self.filename[:-4]
        return self.filename


@dataclass(frozen=True)
class LanguageVerdict:
    language: str
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {"language": self.language, "confidence": self.confidence}


@dataclass(frozen=True)
class PageStatistic:
    page: int  # 1-indexed
    words: int
    characters: int


@dataclass(frozen=True)
class DocumentStatistics:
    total_words: int
    total_characters: int
    page_stats: list[PageStatistic] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalWords": self.total_words,
            "totalCharacters": self.total_characters,
            "pageStats": [
                {"page": s.page, "words": s.words, "characters": s.characters}
                for s in self.page_stats
            ],
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Terminal result of one extraction request."""

    filename: str
    metadata: dict[str, Any]  # presentation defaults applied, includes "pages"
    full_text: str
    page_texts: list[str]
    languages: dict[int, LanguageVerdict]
    statistics: DocumentStatistics
    extraction_method: str
    quality: str
    escalated: bool
    processing_time_ms: int
    auxiliary: AuxiliaryFeatures = field(default_factory=AuxiliaryFeatures)

    @property
    def page_count(self) -> int:
        return len(self.page_texts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire format returned by the extraction endpoint."""
        return {
            "filename": self.filename,
            "metadata": dict(self.metadata),
            "content": {
                "fullText": self.full_text,
                "pageTexts": list(self.page_texts),
                "structure": [],
            },
            **self.auxiliary.to_dict(),
            "languages": {
                str(page): verdict.to_dict()
                for page, verdict in sorted(self.languages.items())
            },
            "statistics": self.statistics.to_dict(),
            "extraction": {
                "method": self.extraction_method,
                "quality": self.quality,
                "escalated": self.escalated,
            },
            "processingTime": self.processing_time_ms,
        }
