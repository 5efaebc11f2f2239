from __future__ import annotations

import os
from pathlib import Path

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def _ensure_clean_test_databases() -> None:
    base_dir = Path(__file__).resolve().parent
    work_dir = base_dir / "work"
    test_db = work_dir / "test_db.sqlite3"
    if test_db.exists():
        test_db.unlink()
    work_dir.mkdir(parents=True, exist_ok=True)


_ensure_clean_test_databases()
django.setup()

from apps.badges.properties import (  # noqa: E402
    AnalyzerResult,
    Badge,
    BadgeBuilderProperties,
)


class RecordingBadgeClient:
    """Badge client double that remembers every request it receives."""

    def __init__(self, failures: list[BaseException] | None = None) -> None:
        self.requests = []
        self._failures = list(failures or [])

    def request_badge(self, properties):
        self.requests.append(properties)
        if self._failures:
            failure = self._failures.pop(0)
            if failure is not None:
                raise failure
        text = f"{properties.label}|{properties.status}|{properties.color.value}"
        return Badge(content=text.encode("utf-8"), content_type="image/svg+xml")


class FailingAccessor:
    def __init__(self, error: BaseException) -> None:
        self.error = error
        self.calls = 0

    def get_analyzer_result(self) -> AnalyzerResult:
        self.calls += 1
        raise self.error


@pytest.fixture
def badge_properties() -> BadgeBuilderProperties:
    return BadgeBuilderProperties(
        label="stylecop",
        status_template_error="{0} errors",
        status_template_warning="{0} warnings",
        status_template_info="{0} infos",
        status_template_aggregate="{0} violations",
        status_template_success="passing",
        status_template_pending="pending",
        status_template_inaccessible="inaccessible",
    )


@pytest.fixture
def badge_client() -> RecordingBadgeClient:
    return RecordingBadgeClient()


@pytest.fixture
def failing_accessor():
    return FailingAccessor


@pytest.fixture
def make_badge_client():
    return RecordingBadgeClient
