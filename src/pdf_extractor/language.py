"""
Language Identifier
===================

Lightweight stopword scoring over a fixed table of language profiles.

For each profile:
    score = stopword hits among the first 200 tokens / min(tokens, stopwords)
          + word-boundary pattern matches over the full text / 100
capped at 0.95. The strictly highest score wins (ties keep table order);
a winning score below 0.3 is reported as English with confidence 0.5.
"""

import logging
import re
from dataclasses import dataclass

from pdf_extractor.models import LanguageVerdict

logger = logging.getLogger(__name__)

MAX_TOKENS = 200
MAX_CONFIDENCE = 0.95
MIN_CONFIDENCE = 0.3
DEFAULT_VERDICT = LanguageVerdict(language="en", confidence=0.5)


@dataclass(frozen=True)
class LanguageProfile:
    code: str
    stopwords: frozenset[str]
    pattern: re.Pattern


def _profile(code: str, words: list[str]) -> LanguageProfile:
    alternation = "|".join(re.escape(w) for w in words)
    return LanguageProfile(
        code=code,
        stopwords=frozenset(words),
        pattern=re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE),
    )


PROFILES: list[LanguageProfile] = [
    _profile("en", [
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "this", "that", "is", "are", "was", "were",
    ]),
    _profile("es", [
        "el", "la", "y", "o", "pero", "en", "con", "de", "para", "por",
        "que", "es", "un", "una", "los", "las",
    ]),
    _profile("fr", [
        "le", "la", "et", "ou", "mais", "dans", "sur", "à", "pour", "de",
        "avec", "par", "un", "une", "les", "des",
    ]),
    _profile("de", [
        "der", "die", "das", "und", "oder", "aber", "in", "auf", "zu", "für",
        "von", "mit", "ein", "eine", "den", "dem",
    ]),
    _profile("it", [
        "il", "la", "e", "o", "ma", "in", "su", "a", "per", "di",
        "con", "da", "un", "una", "gli", "le",
    ]),
    _profile("pt", [
        "o", "a", "e", "ou", "mas", "em", "sobre", "para", "de", "com",
        "por", "um", "uma", "os", "as",
    ]),
]


class LanguageIdentifier:
    """Scores page text against the profile table."""

    def __init__(self, profiles: list[LanguageProfile] | None = None):
        self.profiles = profiles if profiles is not None else PROFILES

    def score(self, text: str, profile: LanguageProfile) -> float:
        tokens = text.lower().split()[:MAX_TOKENS]
        if not tokens:
            return 0.0
        hits = sum(1 for token in tokens if token in profile.stopwords)
        score = hits / min(len(tokens), len(profile.stopwords))
        score += len(profile.pattern.findall(text)) / 100
        return min(score, MAX_CONFIDENCE)

    def identify(self, page_text: str) -> LanguageVerdict:
        best_code = self.profiles[0].code if self.profiles else DEFAULT_VERDICT.language
        best_score = 0.0
        for profile in self.profiles:
            confidence = self.score(page_text, profile)
            if confidence > best_score:
                best_code, best_score = profile.code, confidence

        if best_score < MIN_CONFIDENCE:
            return DEFAULT_VERDICT
        return LanguageVerdict(language=best_code, confidence=best_score)

    def identify_pages(self, page_texts: list[str]) -> dict[int, LanguageVerdict]:
        """Verdicts keyed by 1-based page number; blank pages are skipped."""
        verdicts: dict[int, LanguageVerdict] = {}
        for page_number, text in enumerate(page_texts, start=1):
            if not text.strip():
                continue
            verdicts[page_number] = self.identify(text)
        logger.debug("Detected languages for %d of %d pages", len(verdicts), len(page_texts))
        return verdicts
