"""
Byte Scanner
============

Low-level pattern search over raw PDF bytes.

The payload is decoded once as Latin-1 so every byte maps to exactly one
character and match offsets equal byte offsets. All lookups are stateless;
"no match" is reported as an empty iterator or None, never as an error.
"""

import re
from dataclasses import dataclass
from typing import Iterator

# Letter first, then letters, digits, whitespace and common punctuation
_READABLE_RUN = r"[A-Za-z][A-Za-z0-9\s.,!?;:'\"()\-]{%d,}"


@dataclass(frozen=True)
class Span:
    """A delimited region of the document."""
    start: int  # offset of the begin marker
    end: int    # offset just past the end marker
    content: str  # text between the markers


class ByteScanner:
    """
    Pattern search over a Latin-1 view of a byte sequence.

    Markers and field patterns are regular-expression fragments, so callers
    can express operator boundaries (e.g. r"\\bBT\\b").
    """

    def __init__(self, data: bytes):
        self.data = data
        self.text = data.decode("latin-1")

    def find_blocks(
        self,
        begin_marker: str,
        end_marker: str,
        body_unit: str = ".",
    ) -> Iterator[Span]:
        """
        Yield non-overlapping spans between begin/end markers in document order.

        Args:
            begin_marker: Regex for the opening delimiter
            end_marker: Regex for the closing delimiter
            body_unit: Regex for one unit of block content; a unit that
                consumes a whole quoted region keeps end markers inside it
                from closing the block

        Yields:
            Span for each shortest begin...end match
        """
        pattern = re.compile(
            rf"(?:{begin_marker})(?P<content>(?:{body_unit})*?)(?:{end_marker})",
            re.DOTALL,
        )
        for match in pattern.finditer(self.text):
            yield Span(
                start=match.start(),
                end=match.end(),
                content=match.group("content"),
            )

    def find_first_group(self, field_pattern: str) -> str | None:
        """Return the first capture group of the first match, or None."""
        match = re.search(field_pattern, self.text, re.DOTALL)
        if match is None:
            return None
        return match.group(1)

    def find_all_readable_runs(
        self,
        min_length: int,
        within: str | None = None,
    ) -> Iterator[str]:
        """
        Yield runs of printable characters at least min_length long.

        Args:
            min_length: Minimum run length (including the leading letter)
            within: Optional substring to search instead of the whole document
        """
        source = self.text if within is None else within
        pattern = re.compile(_READABLE_RUN % max(min_length - 1, 0))
        for match in pattern.finditer(source):
            yield match.group(0)

    def count(self, pattern: str) -> int:
        return sum(1 for _ in re.finditer(pattern, self.text))

    def contains(self, pattern: str) -> bool:
        return re.search(pattern, self.text) is not None

    def __len__(self) -> int:
        return len(self.data)
