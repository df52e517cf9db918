"""Unit tests for locale_engine.configuration module.

Tests cover:
- TranslationSettings defaults and environment overrides
- Settings aggregation and environment detection
"""

import pytest
from pydantic import ValidationError

from locale_engine.configuration import Settings, TranslationSettings


class TestTranslationSettings:
    """Test suite for TranslationSettings configuration."""

    def test_defaults(self, monkeypatch):
        for name in (
            "I18N_TRANSLATIONS_DIR",
            "I18N_FALLBACK_LANGUAGE",
            "I18N_NOT_FOUND_MESSAGE",
            "I18N_DEBUG",
        ):
            monkeypatch.delenv(name, raising=False)

        config = TranslationSettings()

        assert config.translations_dir == "./locales"
        assert config.fallback_language == "en"
        assert config.not_found_message is None
        assert config.debug is False

    def test_custom_values(self, monkeypatch):
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", "/srv/locales")
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", " fr ")
        monkeypatch.setenv("I18N_NOT_FOUND_MESSAGE", "Missing {key}")
        monkeypatch.setenv("I18N_DEBUG", "true")

        config = TranslationSettings()

        assert config.translations_dir == "/srv/locales"
        assert config.fallback_language == "fr"
        assert config.not_found_message == "Missing {key}"
        assert config.debug is True

    def test_blank_fallback_language_rejected(self, monkeypatch):
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "  ")
        with pytest.raises(ValidationError):
            TranslationSettings()


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_instantiates_sections(self):
        assert isinstance(Settings().i18n, TranslationSettings)

    def test_section_override(self, monkeypatch):
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "de")
        custom = TranslationSettings()
        monkeypatch.delenv("I18N_FALLBACK_LANGUAGE")

        settings = Settings(i18n=custom)
        assert settings.i18n.fallback_language == "de"

    @pytest.mark.parametrize(
        "environment, expected",
        [("production", True), ("Production", True), ("development", False), ("staging", False)],
    )
    def test_is_production(self, monkeypatch, environment, expected):
        monkeypatch.setenv("ENVIRONMENT", environment)
        assert Settings().is_production is expected
