"""
Tests for settings and logging setup.
"""
import io
import json
import logging
from pathlib import Path

import pytest

from widgetpilot.config import Settings
from widgetpilot.exceptions import InvalidSurfaceError
from widgetpilot.log import JSONFormatter, configure_logging
from widgetpilot.models import Surface


class TestSettings:
    """Tests for Settings.from_env()."""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.widget_registry_path is None
        assert settings.default_surface == Surface.INLINE
        assert settings.cors_origins == ("*",)

    def test_overrides(self):
        settings = Settings.from_env({
            "WP_LOG_LEVEL": "debug",
            "WP_LOG_FORMAT": "TEXT",
            "WP_WIDGET_REGISTRY": "/etc/widgetpilot/widgets.yaml",
            "WP_CONFIDENCE_POLICY": "/etc/widgetpilot/policy.yaml",
            "WP_DEFAULT_SURFACE": "side-panel",
            "WP_CORS_ORIGINS": "https://app.example.com, https://admin.example.com,",
        })

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"
        assert settings.widget_registry_path == Path("/etc/widgetpilot/widgets.yaml")
        assert settings.confidence_policy_path == Path("/etc/widgetpilot/policy.yaml")
        assert settings.default_surface == Surface.PANEL
        assert settings.cors_origins == ("https://app.example.com", "https://admin.example.com")

    def test_invalid_default_surface(self):
        with pytest.raises(InvalidSurfaceError):
            Settings.from_env({"WP_DEFAULT_SURFACE": "billboard"})


class TestLogging:
    """Tests for structured logging setup."""

    def test_json_entry_carries_extra_fields(self):
        record = logging.LogRecord("widgetpilot.engine", logging.INFO, __file__, 1, "Rule %s", ("x",), None)
        record.rule_id = "portfolio_distribution_chat"
        record.surface = "inline"

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "Rule x"
        assert entry["level"] == "INFO"
        assert entry["rule_id"] == "portfolio_distribution_chat"
        assert entry["surface"] == "inline"
        assert "intent" not in entry

    def test_configure_replaces_handler(self, package_logger):
        stream = io.StringIO()

        configure_logging("DEBUG", stream=io.StringIO())
        logger = configure_logging("WARNING", fmt="text", stream=stream)
        logging.getLogger("widgetpilot.engine.selector").warning("Unknown component")

        ours = [h for h in logger.handlers if getattr(h, "_widgetpilot", False)]
        assert len(ours) == 1
        assert logger.level == logging.WARNING
        assert "Unknown component" in stream.getvalue()
