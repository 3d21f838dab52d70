"""
Extraction Orchestrator
=======================

Composes the heuristic pipeline into one request -> result flow:

    recover text || read metadata
        -> quality gate -> [OCR fallback]
        -> paginate -> identify languages -> aggregate statistics
        -> auxiliary features -> ExtractionResult

Usage:
    orchestrator = ExtractionOrchestrator(
        ocr_client=OcrFallbackClient(HttpOCRBackend()),
    )
    result = orchestrator.extract(RawDocument(data, "application/pdf", "report.pdf"))
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any

from pdf_extractor.auxiliary import (
    AuxiliaryFeatures,
    BaseAuxiliaryProvider,
    NullAuxiliaryProvider,
)
from pdf_extractor.errors import (
    ExtractionServiceError,
    UnrecoverableRequestFault,
    ValidationError,
)
from pdf_extractor.fallback import OcrFallbackClient
from pdf_extractor.language import LanguageIdentifier
from pdf_extractor.metadata import DocumentMetadata, MetadataReader
from pdf_extractor.models import ExtractionResult, ExtractorConfig, RawDocument
from pdf_extractor.paginator import Paginator
from pdf_extractor.quality import QualityGate, QualityVerdict
from pdf_extractor.recovery import ExtractionCandidate, SourceMethod, TextRecoveryEngine
from pdf_extractor.statistics import StatisticsAggregator

logger = logging.getLogger(__name__)


class ExtractionOrchestrator:
    """Heuristic PDF extraction with a single OCR escalation."""

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        ocr_client: OcrFallbackClient | None = None,
        auxiliary_provider: BaseAuxiliaryProvider | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Extraction configuration
            ocr_client: OCR fallback client (None disables escalation)
            auxiliary_provider: Font/image/table provider (stub by default)
        """
        self.config = config or ExtractorConfig()
        self.ocr_client = ocr_client
        self.auxiliary_provider = auxiliary_provider or NullAuxiliaryProvider()

        self.engine = TextRecoveryEngine(self.config)
        self.metadata_reader = MetadataReader()
        self.quality_gate = QualityGate(min_words=self.config.min_words)
        self.paginator = Paginator()
        self.language_identifier = LanguageIdentifier()
        self.statistics = StatisticsAggregator()

    def validate(self, document: RawDocument | None) -> None:
        """Reject requests before any extraction work."""
        if document is None:
            raise ValidationError("No file provided")
        if document.media_type not in self.config.accepted_media_types:
            raise ValidationError(
                "File must be a PDF",
                details=f"Unsupported media type: {document.media_type or 'none'}",
            )
        if not isinstance(document.data, (bytes, bytearray)):
            raise UnrecoverableRequestFault(
                "Failed to read uploaded file",
                details=f"Payload is {type(document.data).__name__}, not bytes",
            )

    def extract(self, document: RawDocument) -> ExtractionResult:
        """
        Extract content from a document.

        Args:
            document: Uploaded document

        Returns:
            ExtractionResult

        Raises:
            ValidationError: Missing document or unsupported media type
            UnrecoverableRequestFault: Unreadable payload or unexpected fault
        """
        start_time = time.time()
        self.validate(document)

        logger.info(
            "Extracting %s (%d bytes)", document.filename, len(document.data)
        )

        try:
            return self._run_pipeline(document, start_time)
        except ExtractionServiceError:
            raise
        except Exception as e:
            logger.exception("Extraction failed for %s", document.filename)
            raise UnrecoverableRequestFault(
                "Failed to extract PDF content", details=str(e)
            ) from e

    def _run_pipeline(self, document: RawDocument, start_time: float) -> ExtractionResult:
        candidate, metadata = self._recover(document)

        text = candidate.text
        page_count = candidate.estimated_page_count
        method = candidate.source_method.value

        verdict = self.quality_gate.assess(text)
        escalated = False
        if self._needs_ocr(candidate, verdict):
            logger.info(
                "Escalating %s to OCR: %s via %s", document.filename, verdict, method
            )
            ocr_result = self.ocr_client.recognize(document.data, document.filename)
            if ocr_result is not None:
                text = ocr_result.text.strip()
                page_count = ocr_result.page_count
                method = "ocr"
                escalated = True
            else:
                logger.warning(
                    "OCR fallback unavailable for %s, keeping %s candidate",
                    document.filename, candidate.source_method.value,
                )

        page_texts = self.paginator.split(text, page_count)
        languages = self.language_identifier.identify_pages(page_texts)
        statistics = self.statistics.aggregate(page_texts)
        auxiliary = self._derive_auxiliary(document, page_count)

        processing_time = int((time.time() - start_time) * 1000)

        logger.info(
            "Extraction completed: %s, %d pages, %d words, method=%s, %dms",
            document.filename,
            len(page_texts),
            statistics.total_words,
            method,
            processing_time,
        )

        return ExtractionResult(
            filename=document.stem,
            metadata=self._present_metadata(metadata, document, len(page_texts)),
            full_text=text,
            page_texts=page_texts,
            languages=languages,
            statistics=statistics,
            extraction_method=method,
            quality=verdict.reason.value,
            escalated=escalated,
            processing_time_ms=processing_time,
            auxiliary=auxiliary,
        )

    def _recover(self, document: RawDocument) -> tuple[ExtractionCandidate, DocumentMetadata]:
        """Run text recovery and metadata reading concurrently."""
        data = bytes(document.data)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="extract") as pool:
            text_future = pool.submit(self.engine.recover, data)
            metadata_future = pool.submit(self.metadata_reader.read, data)
            return text_future.result(), metadata_future.result()

    def _needs_ocr(self, candidate: ExtractionCandidate, verdict: QualityVerdict) -> bool:
        if not self.config.enable_ocr_fallback or self.ocr_client is None:
            return False
        if not verdict.is_acceptable:
            return True
        # Placeholder text is synthetic even when it reads well
        return (
            self.config.escalate_placeholder_text
            and candidate.source_method is SourceMethod.STRUCTURAL_FALLBACK
        )

    def _derive_auxiliary(self, document: RawDocument, page_count: int) -> AuxiliaryFeatures:
        try:
            return self.auxiliary_provider.derive(document, page_count)
        except Exception as e:
            logger.warning(
                "Auxiliary provider %s failed: %s", self.auxiliary_provider.name, e
            )
            return AuxiliaryFeatures()

    @staticmethod
    def _present_metadata(
        metadata: DocumentMetadata,
        document: RawDocument,
        page_count: int,
    ) -> dict[str, Any]:
        """Apply presentation defaults to absent metadata fields."""
        now = datetime.now(timezone.utc).isoformat()
        return {
            "title": metadata.title or document.stem,
            "author": metadata.author or "Unknown",
            "subject": metadata.subject or "",
            "creator": metadata.creator or "Unknown",
            "producer": metadata.producer or "Unknown",
            "creationDate": metadata.creation_date or now,
            "modificationDate": metadata.modification_date or now,
            "pages": page_count,
        }
