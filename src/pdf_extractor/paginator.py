"""
Paginator
=========

Splits recovered text into per-page segments by character offset.

The split is length-based and does not follow real page boundaries inside
the text; it is an approximation kept until a page-boundary signal exists.
"""

import math


def placeholder_for(page_number: int) -> str:
    return f"Page {page_number} content"


def split(full_text: str, page_count: int) -> list[str]:
    """
    Divide full_text into page_count contiguous segments.

    Args:
        full_text: Text to split
        page_count: Number of segments (values below 1 are treated as 1)

    Returns:
        List of exactly page_count trimmed segments; blank segments are
        replaced with "Page N content"
    """
    page_count = max(1, page_count)
    target = math.ceil(len(full_text) / page_count)

    pages: list[str] = []
    for index in range(page_count):
        start = index * target
        end = min((index + 1) * target, len(full_text))
        segment = full_text[start:end].strip()
        pages.append(segment or placeholder_for(index + 1))
    return pages


class Paginator:
    """Object wrapper around split() for pipeline composition."""

    def split(self, full_text: str, page_count: int) -> list[str]:
        return split(full_text, page_count)
