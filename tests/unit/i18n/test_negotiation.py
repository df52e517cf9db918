"""Tests for locale_engine.i18n.negotiation module."""

import pytest

from locale_engine.i18n import LanguageNegotiator, parse_accept_language


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
        "unordered": "fr;q=0.2,de;q=0.9,en",
    }


@pytest.mark.unit
class TestParseAcceptLanguage:
    """Tests for parse_accept_language()."""

    def test_empty(self):
        assert parse_accept_language(None) == []
        assert parse_accept_language("") == []

    def test_simple(self, accept_language_headers):
        assert parse_accept_language(accept_language_headers["simple_en"]) == ["en"]

    def test_with_quality(self, accept_language_headers):
        assert parse_accept_language(accept_language_headers["with_quality"]) == [
            "en-US",
            "en",
            "fr",
        ]

    def test_sorted_by_quality(self, accept_language_headers):
        assert parse_accept_language(accept_language_headers["unordered"]) == [
            "en",
            "de",
            "fr",
        ]

    def test_wildcard_dropped(self, accept_language_headers):
        assert parse_accept_language(accept_language_headers["wildcard"]) == ["en-US", "en"]

    def test_invalid_quality_defaults_to_one(self, accept_language_headers):
        assert parse_accept_language(accept_language_headers["invalid_quality"]) == [
            "en",
            "fr",
        ]

    def test_zero_quality_dropped(self):
        assert parse_accept_language("fr;q=0,en") == ["en"]


@pytest.mark.unit
class TestLanguageNegotiator:
    """Tests for LanguageNegotiator."""

    def test_matches_exact(self):
        assert LanguageNegotiator.matches_language("en-US", "en-us", strict=True)

    def test_strict_rejects_primary_only(self):
        assert not LanguageNegotiator.matches_language("en-US", "en", strict=True)

    def test_loose_matches_primary_subtag(self):
        assert LanguageNegotiator.matches_language("pt-BR", "pt")
        assert LanguageNegotiator.matches_language("pt_BR", "pt")
        assert not LanguageNegotiator.matches_language("pt-BR", "es")

    def test_find_best_match_prefers_exact(self):
        result = LanguageNegotiator.find_best_match(["fr-CA"], ["fr", "fr-CA"])
        assert result == "fr-CA"

    def test_find_best_match_in_preference_order(self, accept_language_headers):
        requested = parse_accept_language(accept_language_headers["multiple"])
        assert LanguageNegotiator.find_best_match(requested, ["en", "fr"]) == "fr"

    def test_find_best_match_default(self):
        assert LanguageNegotiator.find_best_match(["de"], ["en", "fr"], "en") == "en"
        assert LanguageNegotiator.find_best_match(["de"], ["en"]) is None

    def test_find_best_match_accepts_generators(self):
        requested = (tag for tag in ["de", "es"])
        assert LanguageNegotiator.find_best_match(requested, {"es"}) == "es"
