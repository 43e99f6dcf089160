# tests/core/test_settings.py
from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from pythonjsonlogger import jsonlogger

from structview.core.config import Settings, settings
from structview.core.logging import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STRUCTVIEW_LOG_LEVEL", raising=False)

        cfg = Settings(_env_file=None)

        assert cfg.log_level == "INFO"
        assert cfg.collection_warn_threshold == 1000
        assert cfg.action_on_unpermitted_parameters == "log"
        assert cfg.capabilities_config_paths == ["config/capabilities.yaml"]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STRUCTVIEW_COLLECTION_WARN_THRESHOLD", "10")
        monkeypatch.setenv("STRUCTVIEW_ACTION_ON_UNPERMITTED_PARAMETERS", "raise")

        cfg = Settings(_env_file=None)

        assert cfg.collection_warn_threshold == 10
        assert cfg.action_on_unpermitted_parameters == "raise"

    def test_invalid_action_rejected(self, monkeypatch):
        monkeypatch.setenv("STRUCTVIEW_ACTION_ON_UNPERMITTED_PARAMETERS", "explode")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_plain(self):
        configure_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

    def test_json(self):
        configure_logging("warning", json=True)
        configure_logging("warning", json=True)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

    def test_defaults_come_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "log_level", "ERROR")
        monkeypatch.setattr(settings, "log_json", True)

        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

    def test_arguments_override_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "log_json", True)

        configure_logging("info", json=False)

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
