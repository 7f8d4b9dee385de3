"""Tests for settings loading and logging setup."""

import json
import logging

import pytest

from commander.core.config import Settings, get_settings
from commander.core.logging import JsonFormatter, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SECURITY__ADMIN_KEY", "DATABASE__URL", "CATALOG__LIST_LIMIT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.admin_key == ""
        assert settings.admin_key_header == "x-admin-key"
        assert settings.list_limit == 200
        assert settings.api_prefix == "/api"
        assert settings.database_url.startswith("sqlite+aiosqlite://")

    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("SECURITY__ADMIN_KEY", "from-env")
        monkeypatch.setenv("CATALOG__LIST_LIMIT", "25")
        monkeypatch.setenv("LOGGING__FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.admin_key == "from-env"
        assert settings.list_limit == 25
        assert settings.logging.format == "json"

    def test_list_limit_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("CATALOG__LIST_LIMIT", "0")

        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestLogging:
    def test_json_formatter_output(self):
        record = logging.LogRecord("commander.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "commander.test"
        assert data["message"] == "hello world"

    def test_configure_logging_does_not_stack_handlers(self):
        root = logging.getLogger()
        original_handlers = list(root.handlers)
        original_level = root.level
        try:
            settings = Settings(_env_file=None, logging={"level": "warning", "format": "json"})
            configure_logging(settings)
            configure_logging(settings)

            ours = [h for h in root.handlers if getattr(h, "_commander", False)]
            assert len(ours) == 1
            assert isinstance(ours[0].formatter, JsonFormatter)
            assert root.level == logging.WARNING
        finally:
            root.handlers = original_handlers
            root.setLevel(original_level)
