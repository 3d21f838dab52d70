"""
Metadata Reader
===============

Recovers document info-dictionary fields (/Title, /Author, ...) from raw PDF
bytes by key/value marker lookup. Absent fields stay None; presentation
defaults are the orchestrator's concern.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any

from pdf_extractor.literals import LITERAL_BODY, unescape_literal
from pdf_extractor.scanner import ByteScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentMetadata:
    """Info-dictionary fields; each independently present or absent."""
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    creator: str | None = None
    producer: str | None = None
    creation_date: str | None = None
    modification_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "subject": self.subject,
            "creator": self.creator,
            "producer": self.producer,
            "creationDate": self.creation_date,
            "modificationDate": self.modification_date,
        }

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


# Field name -> info-dictionary key
FIELD_MARKERS: dict[str, str] = {
    "title": "Title",
    "author": "Author",
    "subject": "Subject",
    "creator": "Creator",
    "producer": "Producer",
    "creation_date": "CreationDate",
    "modification_date": "ModDate",
}


class MetadataReader:
    """Reads DocumentMetadata from raw bytes. Never raises."""

    def read(self, raw_bytes: bytes) -> DocumentMetadata:
        try:
            scanner = ByteScanner(raw_bytes)
            values: dict[str, str] = {}
            for field_name, marker in FIELD_MARKERS.items():
                raw = scanner.find_first_group(
                    rf"/{marker}\s*\(({LITERAL_BODY}+)\)"
                )
                if raw is None:
                    continue
                value = unescape_literal(raw).strip()
                if value:
                    values[field_name] = value
            return DocumentMetadata(**values)
        except Exception as e:
            logger.warning("Metadata extraction failed, using empty metadata: %s", e)
            return DocumentMetadata()
