"""Django settings for the Nabble badge service."""

from __future__ import annotations

import os
from pathlib import Path

from django.core.management.utils import get_random_secret_key

from apps.loggers import build_logging_settings
from config.loadenv import loadenv

BASE_DIR = Path(__file__).resolve().parent.parent

loadenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


DEBUG = _env_flag("DEBUG")

SECRET_KEY = os.environ.get("NABBLE_SECRET_KEY") or get_random_secret_key()

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("NABBLE_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "apps.stats",
    "apps.badges",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("NABBLE_DB_PATH") or str(BASE_DIR / "db.sqlite3"),
        "TEST": {"NAME": str(BASE_DIR / "work" / "test_db.sqlite3")},
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"
LANGUAGE_CODE = "en-us"
USE_I18N = True

NABBLE_SHIELDS_URL = os.environ.get("NABBLE_SHIELDS_URL", "https://img.shields.io")
NABBLE_HTTP_TIMEOUT = _env_float("NABBLE_HTTP_TIMEOUT", 10.0)

NABBLE_BADGE_DEFAULTS = {
    "label": "stylecop",
    "style": "flat",
    "format": "svg",
    "color_error": "red",
    "color_warning": "yellow",
    "color_info": "blue",
    "color_success": "brightgreen",
    "color_inaccessible": "lightgrey",
    "status_template_error": "{0} errors",
    "status_template_warning": "{0} warnings",
    "status_template_info": "{0} infos",
    "status_template_aggregate": "{0} violations",
    "status_template_success": "passing",
    "status_template_pending": "pending",
    "status_template_inaccessible": "inaccessible",
    "aggregate_values": _env_flag("NABBLE_AGGREGATE_VALUES"),
    "count_infos": _env_flag("NABBLE_COUNT_INFOS"),
}

LOG_DIR, LOG_FILE_NAME, LOGGING = build_logging_settings(BASE_DIR, DEBUG)
