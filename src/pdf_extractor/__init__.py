"""
PDF Extractor
=============

Heuristic PDF content extraction without a full PDF-parsing library.

Features:
- Text recovery cascade (text objects, stream runs, structural fallback)
- Info-dictionary metadata recovery
- Quality gate with single-attempt OCR escalation
- Length-based page splitting, stopword language detection, statistics
- JSON and plain-text export

Basic Usage:
    from pdf_extractor import ExtractionOrchestrator, RawDocument

    orchestrator = ExtractionOrchestrator()
    with open("document.pdf", "rb") as f:
        document = RawDocument(f.read(), "application/pdf", "document.pdf")
    result = orchestrator.extract(document)
    print(result.statistics.total_words)

Advanced Usage:
    from pdf_extractor import ExtractionOrchestrator, ExtractorConfig, OcrFallbackClient
    from pdf_extractor.backends import HttpOCRBackend

    config = ExtractorConfig(min_text_length=200)
    orchestrator = ExtractionOrchestrator(
        config=config,
        ocr_client=OcrFallbackClient(HttpOCRBackend(), timeout_seconds=30),
    )
"""

__version__ = "0.1.0"

from .auxiliary import AuxiliaryFeatures, BaseAuxiliaryProvider, NullAuxiliaryProvider
from .errors import (
    ExtractionServiceError,
    TransientFallbackFailure,
    UnrecoverableRequestFault,
    ValidationError,
)
from .export import ExportedDocument, export_result
from .fallback import OcrFallbackClient
from .language import LanguageIdentifier
from .metadata import DocumentMetadata, MetadataReader
from .models import (
    DocumentStatistics,
    ExtractionResult,
    ExtractorConfig,
    LanguageVerdict,
    PageStatistic,
    RawDocument,
)
from .orchestrator import ExtractionOrchestrator
from .paginator import Paginator
from .quality import QualityGate, QualityReason, QualityVerdict
from .recovery import ExtractionCandidate, SourceMethod, TextRecoveryEngine
from .scanner import ByteScanner, Span
from .statistics import StatisticsAggregator

__all__ = [
    # Version
    "__version__",
    # Pipeline
    "ExtractionOrchestrator",
    "ExtractorConfig",
    "RawDocument",
    "ExtractionResult",
    # Stages
    "ByteScanner",
    "Span",
    "MetadataReader",
    "DocumentMetadata",
    "TextRecoveryEngine",
    "ExtractionCandidate",
    "SourceMethod",
    "QualityGate",
    "QualityVerdict",
    "QualityReason",
    "OcrFallbackClient",
    "Paginator",
    "LanguageIdentifier",
    "LanguageVerdict",
    "StatisticsAggregator",
    "DocumentStatistics",
    "PageStatistic",
    "AuxiliaryFeatures",
    "BaseAuxiliaryProvider",
    "NullAuxiliaryProvider",
    # Export
    "ExportedDocument",
    "export_result",
    # Errors
    "ExtractionServiceError",
    "ValidationError",
    "TransientFallbackFailure",
    "UnrecoverableRequestFault",
]
