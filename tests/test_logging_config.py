"""Tests for the logging dictConfig layout."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from app import logging_config
from app.logging_config import NOTIFICATION_LOGGERS, build_logging_config


def test_notification_loggers_write_to_their_own_file(tmp_path: Path):
    config = build_logging_config(tmp_path, "WARNING")

    handler = config["handlers"]["notifications_file"]
    assert handler["filename"] == str(tmp_path / "notifications.log")
    assert handler["level"] == "INFO"
    for name in NOTIFICATION_LOGGERS:
        assert config["loggers"][name] == {"handlers": ["notifications_file"], "propagate": True}


def test_root_level_and_app_log(tmp_path: Path):
    config = build_logging_config(tmp_path, "DEBUG")

    assert config["root"] == {"level": "DEBUG", "handlers": ["console", "app_file"]}
    assert config["handlers"]["app_file"]["filename"] == str(tmp_path / "app.log")
    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["loggers"]["httpx"] == {"level": "WARNING"}


def test_level_override_after_configuration(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_config, "_configured", True)
    monkeypatch.setattr(root, "level", root.level)

    logging_config.configure_logging("debug")

    assert root.level == logging.DEBUG
