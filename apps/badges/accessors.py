"""Analyzer result providers consumed by the badge builder."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

import requests
from django.conf import settings

from .exceptions import AnalyzerResultError, BuildPendingError
from .properties import AnalyzerResult

PENDING_STATUSES = frozenset({"queued", "starting", "running", "pending"})

_COUNT_KEYS = {
    "number_of_errors": ("errors", "numberOfErrors"),
    "number_of_warnings": ("warnings", "numberOfWarnings"),
    "number_of_infos": ("infos", "numberOfInfos"),
}


class AnalyzerResultAccessor(Protocol):
    def get_analyzer_result(self) -> AnalyzerResult: ...


class StaticAnalyzerResultAccessor:
    """Serve an analyzer result the caller already holds."""

    def __init__(self, result: AnalyzerResult) -> None:
        self.result = result

    def get_analyzer_result(self) -> AnalyzerResult:
        return self.result


def parse_analyzer_payload(payload: Any) -> AnalyzerResult:
    """Return an :class:`AnalyzerResult` from a decoded JSON report.

    Reports whose ``status`` is still in progress raise
    :class:`BuildPendingError`.
    """

    if not isinstance(payload, Mapping):
        raise AnalyzerResultError("Analyzer report must be a JSON object.")

    status = str(payload.get("status") or "").strip().lower()
    if status in PENDING_STATUSES:
        raise BuildPendingError(f"Analysis is {status}.")

    counts: dict[str, int] = {}
    for field_name, keys in _COUNT_KEYS.items():
        raw = next((payload[key] for key in keys if key in payload), 0)
        if isinstance(raw, bool) or (
            isinstance(raw, float) and not raw.is_integer()
        ):
            raise AnalyzerResultError(f"Invalid count for {keys[0]}: {raw!r}")
        try:
            counts[field_name] = int(raw)
        except (TypeError, ValueError) as exc:
            raise AnalyzerResultError(
                f"Invalid count for {keys[0]}: {raw!r}"
            ) from exc

    try:
        return AnalyzerResult(**counts)
    except ValueError as exc:
        raise AnalyzerResultError(str(exc)) from exc


class HttpAnalyzerResultAccessor:
    """Load an analyzer report published as JSON over HTTP."""

    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url
        self.session = session
        self.timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "NABBLE_HTTP_TIMEOUT", 10)
        )

    def get_analyzer_result(self) -> AnalyzerResult:
        getter = self.session.get if self.session is not None else requests.get
        response = getter(
            self.url, headers={"Accept": "application/json"}, timeout=self.timeout
        )
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise AnalyzerResultError("Analyzer report is not valid JSON.") from exc
        return parse_analyzer_payload(payload)
