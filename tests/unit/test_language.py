"""
Unit Tests for LanguageIdentifier
=================================
"""

import pytest

from pdf_extractor.language import (
    DEFAULT_VERDICT,
    MAX_CONFIDENCE,
    PROFILES,
    LanguageIdentifier,
    _profile,
)
from pdf_extractor.models import LanguageVerdict

ENGLISH = " ".join(["the and of to for with"] * 40)
SPANISH = " ".join(["el y que los las pero para por con es"] * 10)
GERMAN = " ".join(["der die das und oder aber auf zu von mit"] * 10)


@pytest.fixture
def identifier():
    return LanguageIdentifier()


@pytest.mark.unit
class TestIdentify:
    """Tests for LanguageIdentifier.identify()."""

    def test_english(self, identifier):
        verdict = identifier.identify(ENGLISH)

        assert verdict.language == "en"
        assert verdict.confidence >= 0.3

    def test_spanish(self, identifier):
        assert identifier.identify(SPANISH).language == "es"

    def test_german(self, identifier):
        assert identifier.identify(GERMAN).language == "de"

    def test_confidence_is_capped(self, identifier):
        assert identifier.identify(ENGLISH).confidence == MAX_CONFIDENCE

    def test_low_score_defaults_to_english(self, identifier):
        verdict = identifier.identify("zebra quantum lattice photon nebula")

        assert verdict == DEFAULT_VERDICT == LanguageVerdict("en", 0.5)

    def test_ties_keep_table_order(self):
        profiles = [_profile("xx", ["alpha", "beta"]), _profile("yy", ["alpha", "beta"])]

        verdict = LanguageIdentifier(profiles).identify("alpha beta alpha beta")

        assert verdict.language == "xx"

    def test_score_within_bounds(self, identifier):
        for profile in PROFILES:
            score = identifier.score(SPANISH, profile)
            assert 0.0 <= score <= MAX_CONFIDENCE

    def test_score_of_empty_text(self, identifier):
        assert identifier.score("", PROFILES[0]) == 0.0

    def test_only_first_tokens_scored(self, identifier):
        """Test stopwords beyond the first 200 tokens do not add hits."""
        text = " ".join(["zebra"] * 200 + ["the"] * 50)

        # Only the pattern term contributes: 50 matches / 100
        assert identifier.score(text, PROFILES[0]) == pytest.approx(0.5)


@pytest.mark.unit
class TestIdentifyPages:
    """Tests for per-page identification."""

    def test_keys_are_one_based(self, identifier):
        verdicts = identifier.identify_pages([ENGLISH, SPANISH])

        assert set(verdicts) == {1, 2}
        assert verdicts[1].language == "en"
        assert verdicts[2].language == "es"

    def test_blank_pages_skipped(self, identifier):
        verdicts = identifier.identify_pages([ENGLISH, "   ", ""])

        assert set(verdicts) == {1}

    def test_no_pages(self, identifier):
        assert identifier.identify_pages([]) == {}
