"""
Unit Tests for MetadataReader
=============================
"""

from unittest.mock import patch

import pytest

from pdf_extractor.metadata import DocumentMetadata, MetadataReader


@pytest.fixture
def reader():
    return MetadataReader()


@pytest.mark.unit
class TestMetadataReader:
    """Tests for MetadataReader.read()."""

    def test_reads_all_fields(self, reader, text_pdf_bytes):
        """Test every info-dictionary field is recovered."""
        metadata = reader.read(text_pdf_bytes)

        assert metadata == DocumentMetadata(
            title="Quarterly Report",
            author="Finance Team",
            subject="Results",
            creator="Writer",
            producer="Report Builder 2.1",
            creation_date="D:20240101120000Z",
            modification_date="D:20240102120000Z",
        )

    def test_missing_fields_are_absent(self, reader, make_pdf):
        """Test fields without a marker stay None."""
        metadata = reader.read(make_pdf([""], info={"Title": "Only Title"}))

        assert metadata.title == "Only Title"
        assert metadata.author is None
        assert metadata.modification_date is None
        assert not metadata.is_empty

    def test_no_info_dictionary(self, reader, binary_noise_bytes):
        """Test bytes without markers give empty metadata."""
        metadata = reader.read(binary_noise_bytes)

        assert metadata.is_empty

    def test_empty_input(self, reader):
        assert reader.read(b"").is_empty

    def test_first_occurrence_wins(self, reader):
        data = b"<< /Title (First) >> << /Title (Second) >>"

        assert reader.read(data).title == "First"

    def test_escaped_parentheses(self, reader):
        metadata = reader.read(rb"<< /Title (Report \(Draft\)) >>")

        assert metadata.title == "Report (Draft)"

    def test_nested_parentheses(self, reader):
        metadata = reader.read(b"<< /Title (Budget (revised) 2024) >>")

        assert metadata.title == "Budget (revised) 2024"

    def test_deeply_nested_parentheses(self, reader):
        metadata = reader.read(b"<< /Title (Plan (phase (one (a)) done) final) >>")

        assert metadata.title == "Plan (phase (one (a)) done) final"

    def test_utf16_title(self, reader):
        metadata = reader.read(b"<< /Title (\xfe\xff\x00H\x00i) >>")

        assert metadata.title == "Hi"

    def test_blank_value_is_absent(self, reader):
        metadata = reader.read(b"<< /Author (   ) /Creator () >>")

        assert metadata.author is None
        assert metadata.creator is None

    def test_moddate_key(self, reader):
        metadata = reader.read(b"<< /ModDate (D:20240301) >>")

        assert metadata.modification_date == "D:20240301"
        assert metadata.creation_date is None

    def test_internal_failure_returns_empty(self, reader):
        """Test an unexpected scanner error never propagates."""
        with patch(
            "pdf_extractor.metadata.ByteScanner.find_first_group",
            side_effect=RuntimeError("boom"),
        ):
            metadata = reader.read(b"<< /Title (x) >>")

        assert metadata == DocumentMetadata()


@pytest.mark.unit
class TestDocumentMetadata:
    """Tests for the DocumentMetadata record."""

    def test_to_dict_keys(self):
        data = DocumentMetadata(title="T", modification_date="D:1").to_dict()

        assert data["title"] == "T"
        assert data["modificationDate"] == "D:1"
        assert data["author"] is None
        assert set(data) == {
            "title", "author", "subject", "creator",
            "producer", "creationDate", "modificationDate",
        }

    def test_is_empty(self):
        assert DocumentMetadata().is_empty
        assert not DocumentMetadata(producer="p").is_empty
