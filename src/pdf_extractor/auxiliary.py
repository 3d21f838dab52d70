"""
Auxiliary Features
==================

Capability interface for font, image and table features.

No extraction logic lives here: the shipped provider returns empty features,
and nothing in pagination, language detection or statistics depends on them.
A real engine-backed provider can be plugged into ExtractionOrchestrator.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pdf_extractor.models import RawDocument


@dataclass(frozen=True)
class AuxiliaryFeatures:
    fonts: dict[int, list[dict[str, Any]]] = field(default_factory=dict)
    images: list[dict[str, Any]] = field(default_factory=list)
    tables: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fonts": {str(page): list(items) for page, items in self.fonts.items()},
            "images": list(self.images),
            "tables": list(self.tables),
        }


class BaseAuxiliaryProvider(ABC):
    """Derives fonts/images/tables for a document."""

    name: str = "BaseAuxiliary"

    @abstractmethod
    def derive(self, document: "RawDocument", page_count: int) -> AuxiliaryFeatures:
        pass


class NullAuxiliaryProvider(BaseAuxiliaryProvider):
    """Stub provider: reports no fonts, images or tables."""

    name = "null"

    def derive(self, document: "RawDocument", page_count: int) -> AuxiliaryFeatures:
        return AuxiliaryFeatures()
