"""
Result Export
=============

Renders a finished extraction result as a downloadable document:

    | Format | Media type       | Content                               |
    |--------|------------------|---------------------------------------|
    | json   | application/json | pretty-printed result record          |
    | txt    | text/plain       | human-readable extraction report      |
"""

import json
from dataclasses import dataclass
from typing import Any, Mapping

from pdf_extractor.errors import ValidationError
from pdf_extractor.models import ExtractionResult

SUPPORTED_FORMATS = ("json", "txt")

_RULE = "=" * 64


@dataclass(frozen=True)
class ExportedDocument:
    content: str
    media_type: str
    filename: str


def export_result(
    result: ExtractionResult | Mapping[str, Any],
    fmt: str | None,
) -> ExportedDocument:
    """
    Export an extraction result.

    Args:
        result: ExtractionResult or its serialized mapping
        fmt: "json" or "txt"

    Returns:
        ExportedDocument with content, media type and download filename

    Raises:
        ValidationError: Missing result, or a format other than json/txt
    """
    if isinstance(result, ExtractionResult):
        record: Mapping[str, Any] = result.to_dict()
    else:
        record = result

    if not record or not fmt:
        raise ValidationError("Missing result or format parameter")

    base_name = record.get("filename") or "document"

    if fmt == "json":
        return ExportedDocument(
            content=json.dumps(record, indent=2, ensure_ascii=False),
            media_type="application/json",
            filename=f"{base_name}.json",
        )
    if fmt == "txt":
        return ExportedDocument(
            content=render_text_report(record),
            media_type="text/plain",
            filename=f"{base_name}.txt",
        )

    raise ValidationError(
        "Invalid format. Use 'json' or 'txt'",
        details=f"Unsupported export format: {fmt!r}",
    )


def _section(title: str) -> str:
    return f"--- {title} " + "-" * max(0, 60 - len(title))


def _page_order(item: tuple[Any, Any]) -> tuple[int, str]:
    page = str(item[0])
    return (int(page) if page.isdigit() else 0, page)


def render_text_report(record: Mapping[str, Any]) -> str:
    """Format metadata, statistics, languages and full text as plain text."""
    metadata = record.get("metadata") or {}
    statistics = record.get("statistics") or {}
    languages = record.get("languages") or {}
    content = record.get("content") or {}

    lines = [
        _RULE,
        "PDF EXTRACTION REPORT".center(64),
        _RULE,
        "",
        f"Filename: {record.get('filename') or 'Unknown'}",
        f"Processing Time: {record.get('processingTime') or 0}ms",
        f"Pages: {metadata.get('pages') or 0}",
        "",
        _section("METADATA"),
    ]

    for label, key in (
        ("Title", "title"),
        ("Author", "author"),
        ("Subject", "subject"),
        ("Creator", "creator"),
        ("Producer", "producer"),
        ("Created", "creationDate"),
        ("Modified", "modificationDate"),
    ):
        if metadata.get(key):
            lines.append(f"{label}: {metadata[key]}")

    lines += [
        "",
        _section("STATISTICS"),
        f"Total Words: {statistics.get('totalWords') or 0:,}",
        f"Total Characters: {statistics.get('totalCharacters') or 0:,}",
        f"Images Found: {len(record.get('images') or [])}",
        f"Tables Found: {len(record.get('tables') or [])}",
        "",
        _section("LANGUAGES DETECTED"),
    ]

    for page, verdict in sorted(languages.items(), key=_page_order):
        if not isinstance(verdict, Mapping):
            continue
        code = (verdict.get("language") or "unknown").upper()
        confidence = (verdict.get("confidence") or 0) * 100
        lines.append(f"Page {page}: {code} ({confidence:.1f}%)")

    lines += [
        "",
        _section("EXTRACTED CONTENT"),
        "",
        content.get("fullText") or "No content extracted",
        "",
        _RULE,
    ]
    return "\n".join(lines)
