"""Logging setup shared by the API process and the command-line scripts."""
from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from app.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Loggers whose records are also written to notifications.log.
NOTIFICATION_LOGGERS = (
    "app.services.notification_service",
    "app.services.mail_service",
    "app.routers.notifications",
)

_configured = False


def build_logging_config(log_dir: Path, level: str) -> dict:
    """Return the dictConfig mapping for console, app.log and notifications.log."""

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
        "app_file": {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "app.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": level,
        },
        "notifications_file": {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "notifications.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": "INFO",
        },
    }
    loggers: dict[str, dict] = {
        name: {"handlers": ["notifications_file"], "propagate": True}
        for name in NOTIFICATION_LOGGERS
    }
    # Per-request INFO lines from httpx.
    loggers["httpx"] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "loggers": loggers,
        "root": {"level": level, "handlers": ["console", "app_file"]},
    }


def configure_logging(level: str | None = None) -> None:
    """Configure logging once per process; ``level`` overrides LOG_LEVEL."""

    global _configured
    if _configured:
        if level is not None:
            logging.getLogger().setLevel(level.upper())
        return

    try:
        settings = get_settings()
        log_dir = settings.log_dir
        default_level = settings.log_level
    except ValidationError:
        # Scripts may run before their .env is in place.
        log_dir = Path("logs")
        default_level = "INFO"
    log_dir.mkdir(parents=True, exist_ok=True)

    effective = (level or default_level).upper()
    dictConfig(build_logging_config(log_dir, effective))
    logging.getLogger(__name__).debug("Logging configured | level=%s | dir=%s", effective, log_dir)
    _configured = True
