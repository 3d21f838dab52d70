"""
Marker Scan
===========

Recovers text from BT ... ET text objects by reading the string operands of
the show-text operators (Tj, TJ, ' and ").
"""

import re

from pdf_extractor.literals import (
    HEX_STRING,
    LITERAL_BODY,
    LITERAL_STRING,
    decode_hex,
    unescape_literal,
)
from pdf_extractor.scanner import ByteScanner

from .base import BaseRecoveryMethod, SourceMethod

# One unit of an array or text object: a whole literal string, a whole hex
# string, or any other single character
_TJ_ARRAY_UNIT = rf"\({LITERAL_BODY}*\)|<[^>\]]*>|[^\]<(]"
_TEXT_OBJECT_UNIT = rf"\({LITERAL_BODY}*\)|[^(]"

_SHOW_TEXT = re.compile(
    rf"{LITERAL_STRING}\s*(?:Tj|'|\")"          # (text) Tj
    rf"|{HEX_STRING}\s*Tj"                      # <48656c6c6f> Tj
    rf"|\[((?:{_TJ_ARRAY_UNIT})*)\]\s*TJ",      # [(Hel) -20 (lo)] TJ
    re.DOTALL,
)

_ARRAY_ITEM = re.compile(
    rf"\(({LITERAL_BODY}*)\)|{HEX_STRING}|(-?\d+(?:\.\d+)?)", re.DOTALL
)

# Kerning adjustments at or below this value usually stand for a word gap
_WORD_GAP_KERNING = -200

_HAS_LETTER = re.compile(r"[A-Za-z]")


class MarkerScanMethod(BaseRecoveryMethod):
    """Reads show-text operands inside text objects."""

    source = SourceMethod.MARKER_SCAN

    def __init__(self, min_fragment_length: int = 3):
        super().__init__(name="MarkerScan")
        self.min_fragment_length = min_fragment_length

    def attempt(self, scanner: ByteScanner) -> str:
        fragments: list[str] = []

        for block in scanner.find_blocks(r"\bBT\b", r"\bET\b", _TEXT_OBJECT_UNIT):
            for match in _SHOW_TEXT.finditer(block.content):
                literal, hex_digits, array = match.groups()
                if literal is not None:
                    text = unescape_literal(literal)
                elif hex_digits is not None:
                    text = decode_hex(hex_digits)
                else:
                    text = self._join_array(array)

                cleaned = text.strip()
                if self._keep(cleaned):
                    fragments.append(cleaned)

        return " ".join(fragments)

    def _keep(self, fragment: str) -> bool:
        return (
            len(fragment) >= self.min_fragment_length
            and _HAS_LETTER.search(fragment) is not None
        )

    def _join_array(self, array: str) -> str:
        """Concatenate the strings of a TJ array, honoring wide kerning gaps."""
        parts: list[str] = []
        for literal, hex_digits, number in _ARRAY_ITEM.findall(array):
            if number:
                if float(number) <= _WORD_GAP_KERNING:
                    parts.append(" ")
            elif hex_digits:
                parts.append(decode_hex(hex_digits))
            else:
                parts.append(unescape_literal(literal))
        return "".join(parts)
