"""Shared fixtures for locale-engine tests."""

import json

import pytest
import yaml

from tests.factories.i18n import RecordingReporter, make_resource_store, make_resource_trees


@pytest.fixture
def resource_trees():
    """Sample en/fr resource trees as plain dicts."""
    return make_resource_trees()


@pytest.fixture
def resource_store():
    """ResourceStore built from the sample trees."""
    return make_resource_store()


@pytest.fixture
def reporter():
    """Reporter recording every diagnostic event."""
    return RecordingReporter()


@pytest.fixture
def temp_translations_dir(tmp_path, resource_trees):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - en.json
    - fr.yml
    - broken.json   (malformed, must be skipped)
    - notes.txt     (unsupported extension, ignored)
    """
    with open(tmp_path / "en.json", "w", encoding="utf-8") as f:
        json.dump(resource_trees["en"], f)

    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(resource_trees["fr"], f, allow_unicode=True)

    (tmp_path / "broken.json").write_text('{"greeting": "Hi', encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a translation file", encoding="utf-8")

    return tmp_path
