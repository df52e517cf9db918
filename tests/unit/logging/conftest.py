"""Fixtures for locale_engine.logging tests."""

from unittest.mock import Mock

import pytest

from locale_engine.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    settings.i18n = Mock(debug=False)
    return settings
