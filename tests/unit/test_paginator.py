"""
Unit Tests for Paginator
========================
"""

import pytest

from pdf_extractor.paginator import Paginator, placeholder_for, split


@pytest.mark.unit
class TestSplit:
    """Tests for length-based page splitting."""

    def test_even_target_with_short_tail(self):
        assert split("abcdefghij", 3) == ["abcd", "efgh", "ij"]

    def test_single_page(self):
        assert split("whole text", 1) == ["whole text"]

    def test_length_matches_page_count(self):
        pages = split("abc", 5)

        assert pages == ["a", "b", "c", "Page 4 content", "Page 5 content"]

    def test_empty_text_gives_placeholders(self):
        assert split("", 2) == ["Page 1 content", "Page 2 content"]

    def test_segments_are_trimmed(self):
        assert split("  ab  cd  ", 2) == ["ab", "cd"]

    def test_blank_segment_replaced(self):
        assert split("abcd      ", 2) == ["abcd", "Page 2 content"]

    def test_non_positive_page_count(self):
        assert split("text", 0) == ["text"]
        assert split("text", -3) == ["text"]

    def test_concatenation_preserves_order(self):
        text = "abcdefghijklmnopqrstuvwxyz"

        pages = split(text, 4)

        assert [len(p) for p in pages] == [7, 7, 7, 5]
        assert "".join(pages) == text

    def test_placeholder_format(self):
        assert placeholder_for(7) == "Page 7 content"


@pytest.mark.unit
class TestPaginator:
    def test_wraps_split(self):
        assert Paginator().split("abcdefghij", 3) == split("abcdefghij", 3)
