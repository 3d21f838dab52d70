"""
Test Configuration and Fixtures for pdf-extraction-service

This module provides shared fixtures, markers, and configuration for all tests.
PDF payloads are synthesized as raw bytes so no PDF library is needed.
"""

from typing import Any

import pytest

from pdf_extractor.backends.base import BaseOCRBackend, OCRResult


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests (full pipeline)")
    config.addinivalue_line("markers", "performance: Performance benchmark tests")
    config.addinivalue_line("markers", "api: API/service tests")


# =============================================================================
# Sample Content
# =============================================================================

ENGLISH_LINES = [
    "The quarterly report describes the state of the business in detail.",
    "Revenue grew in each of the regions that were part of the review.",
    "This section explains the method that was used for the forecast.",
    "Most of the growth came from the services that are sold by the team.",
    "The board approved the plan for the next year at the last meeting.",
]


def text_content(lines: list[str]) -> str:
    """Build a content stream that shows each line with Tj."""
    parts = ["BT", "/F1 12 Tf", "72 720 Td"]
    for line in lines:
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        parts.append(f"({escaped}) Tj")
        parts.append("0 -14 Td")
    parts.append("ET")
    return "\n".join(parts)


def build_pdf(
    page_contents: list[str],
    info: dict[str, str] | None = None,
    extra_objects: list[str] | None = None,
) -> bytes:
    """
    Assemble a minimal uncompressed PDF.

    Args:
        page_contents: Content stream text for each page
        info: Info-dictionary entries, e.g. {"Title": "Report"}
        extra_objects: Additional raw object bodies (e.g. image XObjects)

    Returns:
        PDF bytes (Latin-1 encoded)
    """
    objects: list[str] = []
    page_count = len(page_contents)
    first_page = 3
    kids = " ".join(f"{first_page + 2 * i} 0 R" for i in range(page_count))

    objects.append("<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>")
    for i, content in enumerate(page_contents):
        contents_ref = first_page + 2 * i + 1
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Contents {contents_ref} 0 R >>"
        )
        objects.append(
            f"<< /Length {len(content)} >>\nstream\n{content}\nendstream"
        )
    for body in extra_objects or []:
        objects.append(body)

    info_ref = None
    if info:
        entries = " ".join(f"/{key} ({value})" for key, value in info.items())
        objects.append(f"<< {entries} >>")
        info_ref = len(objects)

    chunks = ["%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"]
    for number, body in enumerate(objects, start=1):
        chunks.append(f"{number} 0 obj\n{body}\nendobj\n")
    trailer = "<< /Size %d /Root 1 0 R" % (len(objects) + 1)
    if info_ref:
        trailer += f" /Info {info_ref} 0 R"
    chunks.append(f"trailer\n{trailer} >>\n%%EOF\n")
    return "".join(chunks).encode("latin-1")


# =============================================================================
# PDF Fixtures
# =============================================================================

@pytest.fixture
def make_pdf():
    """Factory fixture exposing build_pdf."""
    return build_pdf


@pytest.fixture
def make_text_page():
    """Factory fixture exposing text_content."""
    return text_content


@pytest.fixture
def text_pdf_bytes() -> bytes:
    """Two-page English text PDF with a full info dictionary."""
    return build_pdf(
        [text_content(ENGLISH_LINES), text_content(list(reversed(ENGLISH_LINES)))],
        info={
            "Title": "Quarterly Report",
            "Author": "Finance Team",
            "Subject": "Results",
            "Creator": "Writer",
            "Producer": "Report Builder 2.1",
            "CreationDate": "D:20240101120000Z",
            "ModDate": "D:20240102120000Z",
        },
    )


@pytest.fixture
def noisy_text_pdf_bytes() -> bytes:
    """Text PDF whose recovered text fails the quality gate."""
    return build_pdf([text_content(ENGLISH_LINES + ["ZXCVBNMZXCVBNM"])])


@pytest.fixture
def scanned_pdf_bytes() -> bytes:
    """Three pages with no text objects and an image XObject."""
    return build_pdf(
        ["q 612 0 0 792 0 0 cm /Im0 Do Q"] * 3,
        extra_objects=["<< /Type /XObject /Subtype /Image /Width 10 /Height 10 >>"],
    )


@pytest.fixture
def binary_noise_bytes() -> bytes:
    """Bytes with no markers and no readable runs."""
    return bytes(range(0, 32)) * 20


# =============================================================================
# OCR Backend Fixtures
# =============================================================================

class MockOCRBackend(BaseOCRBackend):
    """Mock OCR backend for testing."""

    def __init__(
        self,
        name: str = "MockOCR",
        available: bool = True,
        return_text: str = "Mock OCR text",
        page_count: int = 1,
        should_fail: bool = False,
    ):
        super().__init__(name)
        self._available = available
        self._return_text = return_text
        self._page_count = page_count
        self._should_fail = should_fail
        self.extract_calls: list[tuple[int, str]] = []  # (byte length, filename)
        self.last_kwargs: dict[str, Any] = {}

    def is_available(self) -> bool:
        return self._available

    def extract_text(self, data: bytes, filename: str, **kwargs: Any) -> OCRResult:
        self.extract_calls.append((len(data), filename))
        self.last_kwargs = kwargs

        if self._should_fail:
            raise RuntimeError("Mock OCR failure")

        return OCRResult(
            text=self._return_text,
            page_count=self._page_count,
            backend=self.name,
        )


OCR_TEXT = (
    "The scanned letter was read by the recognition service and the text of "
    "the letter is shown here for the reader."
)


@pytest.fixture
def mock_ocr_backend():
    """Available backend returning readable two-page text."""
    return MockOCRBackend(name="MockPrimary", return_text=OCR_TEXT, page_count=2)


@pytest.fixture
def mock_failing_backend():
    """Backend that always raises."""
    return MockOCRBackend(name="MockFailing", should_fail=True)


@pytest.fixture
def mock_unavailable_backend():
    """Backend that is not configured."""
    return MockOCRBackend(name="MockUnavailable", available=False)


# =============================================================================
# Performance Fixtures
# =============================================================================

@pytest.fixture
def performance_timer():
    """Simple performance timer context manager."""
    import time

    class Timer:
        def __init__(self):
            self.start_time = None
            self.end_time = None
            self.elapsed_ms = None

        def __enter__(self):
            self.start_time = time.perf_counter()
            return self

        def __exit__(self, *args):
            self.end_time = time.perf_counter()
            self.elapsed_ms = (self.end_time - self.start_time) * 1000

    return Timer
