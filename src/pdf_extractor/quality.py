"""
Quality Gate
============

Decides whether heuristically recovered text is usable or whether the
request should escalate to OCR.

Signals:
- Too few words (whitespace tokens below min_words)
- Keyboard-row runs: 5+ consecutive uppercase letters from one keyboard row
  (e.g. "QWERTY"), typical of binary data misread as letters
- Numeric noise: 10+ consecutive digits

Usage:
    gate = QualityGate()
    verdict = gate.assess(candidate.text)
    if not verdict.is_acceptable:
        ...  # escalate to OCR
"""

import re
from dataclasses import dataclass
from enum import Enum


class QualityReason(Enum):
    """Why a text was accepted or rejected."""
    TOO_FEW_WORDS = "too_few_words"
    SUSPICIOUS_REPEATED_TOKENS = "suspicious_repeated_tokens"
    NUMERIC_NOISE = "numeric_noise"
    OK = "ok"


@dataclass(frozen=True)
class QualityVerdict:
    is_acceptable: bool
    reason: QualityReason
    word_count: int = 0

    def __str__(self) -> str:
        status = "acceptable" if self.is_acceptable else "unacceptable"
        return f"{status} ({self.reason.value}, {self.word_count} words)"


KEYBOARD_ROW_RUN = re.compile(r"[QWERTYUIOP]{5,}|[ASDFGHJKL]{5,}|[ZXCVBNM]{5,}")
NUMERIC_RUN = re.compile(r"\d{10,}")


class QualityGate:
    """Pure, deterministic acceptability check for recovered text."""

    def __init__(self, min_words: int = 10):
        self.min_words = min_words

    def assess(self, text: str) -> QualityVerdict:
        word_count = len(text.split())

        if word_count < self.min_words:
            reason = QualityReason.TOO_FEW_WORDS
        elif KEYBOARD_ROW_RUN.search(text):
            reason = QualityReason.SUSPICIOUS_REPEATED_TOKENS
        elif NUMERIC_RUN.search(text):
            reason = QualityReason.NUMERIC_NOISE
        else:
            reason = QualityReason.OK

        return QualityVerdict(
            is_acceptable=reason == QualityReason.OK,
            reason=reason,
            word_count=word_count,
        )
