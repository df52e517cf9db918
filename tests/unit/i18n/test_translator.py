"""Tests for locale_engine.i18n.translator module."""

import json

import pytest

from locale_engine.i18n import ResolutionStatus, Translator
from tests.factories.i18n import InMemorySource


@pytest.mark.unit
class TestTranslator:
    """Tests for Translator service."""

    @pytest.fixture
    def translator(self, temp_translations_dir, reporter):
        """Create Translator loaded from the temporary directory."""
        return Translator(
            directory=temp_translations_dir,
            fallback_language="en",
            reporter=reporter,
        )

    def test_initialization_without_directory(self, reporter):
        translator = Translator(reporter=reporter)
        assert translator.get_available_languages() == frozenset()
        assert translator.translate("en", "greeting") == "greeting"

    def test_set_directory_loads_eagerly(self, translator):
        """Every parsable file is loaded on directory set."""
        assert translator.get_available_languages() == frozenset({"en", "fr"})

    def test_malformed_file_reported(self, translator, reporter):
        assert reporter.count("load_error") == 1

    def test_translate_basic(self, translator):
        assert translator.translate("en", "greeting", {"user": "Ana"}) == "Hello Ana"
        assert translator.translate("fr", "greeting", {"user": "Ana"}) == "Bonjour Ana"

    def test_translate_nested_key(self, translator):
        assert translator.translate("fr", "errors.notFound", {"id": 7}) == "Élément 7 introuvable"

    def test_translate_absent_language_uses_fallback(self, translator):
        assert translator.translate("de", "greeting", {"user": "Ana"}) == "Hello Ana"

    def test_translate_missing_everywhere_returns_not_found(self, translator):
        translator.set_not_found_message("Translation not found")
        assert translator.translate("de", "nothing.here") == "Translation not found"

    def test_translate_with_group(self, translator):
        assert translator.translate("fr", "title", group="dashboard") == "Tableau de bord"
        assert (
            translator.translate("fr", "welcome", {"user": "Ana"}, group="dashboard")
            == "Welcome back, Ana"
        )

    def test_resolve_keeps_outcome(self, translator):
        result = translator.resolve("fr", "farewell")
        assert result.status == ResolutionStatus.FALLBACK
        assert result.value == "Goodbye"

    def test_set_not_found_message_reset(self, translator):
        translator.set_not_found_message("???")
        assert translator.translate("en", "nope") == "???"
        translator.set_not_found_message(None)
        assert translator.translate("en", "nope") == "nope"

    def test_set_debug_mode(self, translator, reporter):
        translator.set_debug_mode(True)
        translator.translate("en", "farewell")
        assert reporter.count("resolved") == 1

        translator.set_debug_mode(False)
        translator.translate("en", "farewell")
        assert reporter.count("resolved") == 1

    def test_reconfiguration_builds_new_resolver(self, translator):
        before = translator.resolver
        translator.set_debug_mode(True)
        assert translator.resolver is not before
        assert translator.resolver.store is before.store

    def test_set_directory_replaces_store(self, translator, tmp_path):
        """A new directory discards the previous languages entirely."""
        other = tmp_path / "other"
        other.mkdir()
        (other / "es.json").write_text(json.dumps({"greeting": "Hola {user}"}), encoding="utf-8")

        old_store = translator.store
        translator.set_directory(other)

        assert translator.get_available_languages() == frozenset({"es"})
        assert old_store.languages == frozenset({"en", "fr"})
        assert translator.translate("es", "greeting", {"user": "Ana"}) == "Hola Ana"

    def test_reload_picks_up_changes(self, reporter):
        source = InMemorySource({"en.json": '{"a": "one"}'})
        translator = Translator(source=source, reporter=reporter)
        assert translator.translate("en", "a") == "one"

        source.files["en.json"] = '{"a": "two"}'
        translator.reload()
        assert translator.translate("en", "a") == "two"

    def test_has_message(self, translator, reporter):
        assert translator.has_message("en", "errors.forbidden")
        assert not translator.has_message("fr", "errors.forbidden")
        assert not translator.has_message("de", "greeting")
        assert translator.has_message("fr", "title", group="dashboard")
        assert reporter.count("key_missing") == 0

    def test_get_resource_tree(self, translator, resource_trees):
        assert translator.get_resource_tree("fr") == resource_trees["fr"]
        assert translator.get_resource_tree("de") is None

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("fr-CA,fr;q=0.9,en;q=0.5", "fr"),
            ("de-DE,en;q=0.5", "en"),
            ("es, de", "en"),
            (None, "en"),
        ],
    )
    def test_negotiate(self, translator, header, expected):
        assert translator.negotiate(header) == expected
