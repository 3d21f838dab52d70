"""
PDF string operand helpers shared by metadata and text recovery.

Literal strings may contain balanced parentheses. Nesting is matched up to
MAX_LITERAL_NESTING levels inside the outer pair; a literal nested deeper
than that is not recognized.
"""

import re

MAX_LITERAL_NESTING = 3

_LITERAL_CHAR = r"\\.|[^\\()]"


def _nested_body(depth: int) -> str:
    body = rf"(?:{_LITERAL_CHAR})"
    for _ in range(depth):
        body = rf"(?:{_LITERAL_CHAR}|\({body}*\))"
    return body


# One unit of a literal string body: a character, an escape or a nested group
LITERAL_BODY = _nested_body(MAX_LITERAL_NESTING)
LITERAL_STRING = rf"\(({LITERAL_BODY}*)\)"
HEX_STRING = r"<([0-9A-Fa-f\s]*)>"

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "b": "\b", "f": "\f"}
_ESCAPE_PATTERN = re.compile(r"\\([0-7]{1,3}|\r\n|.)", re.DOTALL)

_UTF16_BOM = "\xfe\xff"


def _replace_escape(match: re.Match) -> str:
    seq = match.group(1)
    if seq[0] in "01234567":
        return chr(int(seq, 8) & 0xFF)
    if seq in ("\n", "\r", "\r\n"):
        # Backslash-newline is a line continuation
        return ""
    return _ESCAPES.get(seq, seq)


def unescape_literal(raw: str) -> str:
    """
    Resolve backslash escapes in a literal string body.

    Handles the named escapes (\\n \\r \\t \\b \\f), octal codes (\\ddd),
    line continuations, and any other escaped character as itself. Bodies
    starting with a UTF-16BE byte order mark are decoded accordingly.
    """
    text = _ESCAPE_PATTERN.sub(_replace_escape, raw)
    if text.startswith(_UTF16_BOM):
        return text[2:].encode("latin-1").decode("utf-16-be", errors="ignore")
    return text


def decode_hex(raw: str) -> str:
    """Decode a hex string operand; odd-length input is zero-padded."""
    digits = re.sub(r"\s+", "", raw)
    if len(digits) % 2:
        digits += "0"
    return bytes.fromhex(digits).decode("latin-1")
