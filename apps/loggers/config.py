"""Logging configuration helpers."""

from __future__ import annotations

import os
import socket
from pathlib import Path
from typing import Any

from .filenames import normalize_log_filename
from .handlers import running_tests

LOG_RETENTION_DAYS = 7

LIBRARY_LOGGERS = ("requests", "urllib3", "urllib3.connectionpool")


def select_log_dir(base_dir: Path) -> Path:
    """Return the log directory, honoring ``NABBLE_LOG_DIR``."""

    configured = os.environ.get("NABBLE_LOG_DIR", "").strip()
    log_dir = Path(configured) if configured else base_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def configure_library_loggers(
    debug_enabled: bool, logging_config: dict[str, Any]
) -> None:
    """Cap noisy HTTP library loggers at INFO unless DEBUG is on."""

    if debug_enabled:
        return

    loggers = logging_config.setdefault("loggers", {})
    for logger_name in LIBRARY_LOGGERS:
        logger_settings: dict[str, Any] = loggers.setdefault(logger_name, {})
        logger_settings.setdefault("level", "INFO")
        logger_settings.setdefault("propagate", True)


def build_logging_settings(
    base_dir: Path, debug_enabled: bool
) -> tuple[Path, str, dict[str, Any]]:
    """Return the log directory, filename, and logging configuration."""

    log_dir = select_log_dir(base_dir)
    log_file_name = (
        "tests.log"
        if running_tests()
        else f"{normalize_log_filename(socket.gethostname())}.log"
    )

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            }
        },
        "handlers": {
            "file": {
                "class": "apps.loggers.handlers.ServiceFileHandler",
                "filename": str(log_dir / log_file_name),
                "when": "midnight",
                "backupCount": LOG_RETENTION_DAYS,
                "encoding": "utf-8",
                "formatter": "standard",
                "delay": True,
            },
            "error_file": {
                "class": "apps.loggers.handlers.ErrorFileHandler",
                "filename": str(log_dir / "error.log"),
                "when": "midnight",
                "backupCount": LOG_RETENTION_DAYS,
                "encoding": "utf-8",
                "formatter": "standard",
                "level": "WARNING",
                "delay": True,
            },
            "console": {
                "class": "logging.StreamHandler",
                "level": "ERROR",
                "formatter": "standard",
            },
        },
        "root": {
            "handlers": ["file", "error_file", "console"],
            "level": "DEBUG" if debug_enabled else "INFO",
        },
        "loggers": {},
    }

    configure_library_loggers(debug_enabled, logging_config)
    return log_dir, log_file_name, logging_config
