"""
Structural Fallback
===================

Terminal recovery method. When no text can be read from the byte structure,
inspect structural markers (pages, images, tables) and synthesize clearly
labelled placeholder text, one paragraph per estimated page.

The output is deterministic: the same bytes always produce the same text.
"""

from pdf_extractor.scanner import ByteScanner

from .base import PAGE_MARKER, BaseRecoveryMethod, SourceMethod

IMAGE_MARKERS = r"/Image|/XObject"
TABLE_MARKERS = r"/Table|TD|TR"

_PAGE_TEMPLATE = (
    "Page {page}. No readable text layer was recovered for this page of the "
    "document. The content is likely scanned, compressed or encoded in a form "
    "that the heuristic extraction cannot read, and the text shown here is a "
    "placeholder for it."
)
_IMAGE_NOTE = "[Image: embedded image content detected in the document structure]"
_TABLE_NOTE = "[Table: table-like layout markers detected in the document structure]"


class StructuralFallbackMethod(BaseRecoveryMethod):
    """Synthesizes placeholder text sized to the structural page estimate."""

    source = SourceMethod.STRUCTURAL_FALLBACK
    terminal = True

    def __init__(self):
        super().__init__(name="StructuralFallback")

    def attempt(self, scanner: ByteScanner) -> str:
        page_count = max(1, scanner.count(PAGE_MARKER))
        has_images = scanner.contains(IMAGE_MARKERS)
        has_tables = scanner.contains(TABLE_MARKERS)
        return self.placeholder(page_count, has_images, has_tables)

    @staticmethod
    def placeholder(page_count: int, has_images: bool, has_tables: bool) -> str:
        """Build placeholder narrative for page_count pages."""
        sections: list[str] = []
        for page in range(1, max(1, page_count) + 1):
            lines = [_PAGE_TEMPLATE.format(page=page)]
            if has_images:
                lines.append(_IMAGE_NOTE)
            if has_tables:
                lines.append(_TABLE_NOTE)
            sections.append("\n".join(lines))
        return "\n\n".join(sections)
