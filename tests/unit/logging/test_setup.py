"""Unit tests for locale_engine.logging.setup module."""

import json
import logging
from types import MappingProxyType
from unittest.mock import patch

import pytest

from locale_engine.logging import setup
from locale_engine.logging.setup import (
    configure_logging,
    get_module_logger,
    resolve_log_level,
    thaw_resource_trees,
)


@pytest.fixture
def outside_pytest(mock_settings):
    """Run configure_logging as if pytest were not loaded."""
    with patch.object(setup, "_is_test_environment", return_value=False), patch.object(
        setup, "settings", mock_settings
    ), patch.object(setup.structlog, "configure") as mock_configure, patch.object(
        setup.logging, "basicConfig"
    ) as mock_basic_config:
        yield mock_configure, mock_basic_config


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_is_test_environment(self):
        assert setup._is_test_environment() is True

    def test_suppresses_output_under_pytest(self):
        configure_logging(debug=True)
        assert logging.root.level == logging.CRITICAL + 1

    def test_development_uses_console_renderer(self, outside_pytest):
        mock_configure, mock_basic_config = outside_pytest

        configure_logging(log_level="debug")

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], setup.structlog.dev.ConsoleRenderer)
        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_reconfiguring_replaces_root_handlers(self, outside_pytest):
        _, mock_basic_config = outside_pytest

        configure_logging()

        assert mock_basic_config.call_args.kwargs["force"] is True

    def test_production_uses_json_on_thawed_trees(self, outside_pytest):
        mock_configure, _ = outside_pytest

        configure_logging(is_production=True)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], setup.structlog.processors.JSONRenderer)
        assert processors[-2] is thaw_resource_trees

    def test_translation_debug_lowers_level(self, outside_pytest, mock_settings):
        _, mock_basic_config = outside_pytest
        mock_settings.i18n.debug = True

        configure_logging()

        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


@pytest.mark.unit
class TestResolveLogLevel:
    """Test suite for resolve_log_level()."""

    def test_defaults_to_settings_level(self, mock_settings):
        mock_settings.LOG_LEVEL = "warning"
        with patch.object(setup, "settings", mock_settings):
            assert resolve_log_level() == logging.WARNING

    def test_settings_debug_mode(self, mock_settings):
        mock_settings.i18n.debug = True
        with patch.object(setup, "settings", mock_settings):
            assert resolve_log_level() == logging.DEBUG

    def test_debug_argument_overrides_settings(self, mock_settings):
        mock_settings.i18n.debug = True
        with patch.object(setup, "settings", mock_settings):
            assert resolve_log_level(debug=False) == logging.INFO

    def test_explicit_level_wins_over_debug(self, mock_settings):
        with patch.object(setup, "settings", mock_settings):
            assert resolve_log_level("ERROR", debug=True) == logging.ERROR

    def test_unknown_level_name(self, mock_settings):
        with patch.object(setup, "settings", mock_settings):
            assert resolve_log_level("chatty") == logging.INFO


@pytest.mark.unit
class TestThawResourceTrees:
    """Test suite for the thaw_resource_trees processor."""

    def test_frozen_tree_becomes_serializable(self):
        tree = MappingProxyType({"errors": MappingProxyType({"notFound": "Missing"})})

        event = thaw_resource_trees(None, "info", {"event": "dump", "tree": tree})

        assert event == {"event": "dump", "tree": {"errors": {"notFound": "Missing"}}}
        json.dumps(event)

    def test_other_values_untouched(self):
        event = {"event": "loaded_translations", "language_count": 2}

        assert thaw_resource_trees(None, "info", event) == event


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger()."""

    def test_binds_module(self):
        with patch.object(setup, "logger") as mock_logger:
            get_module_logger()

        mock_logger.bind.assert_called_once_with(
            component="test_setup",
            module_path=__name__,
        )
