"""Tests for analyzer result accessors."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from apps.badges.accessors import HttpAnalyzerResultAccessor, parse_analyzer_payload
from apps.badges.exceptions import AnalyzerResultError, BuildPendingError
from apps.badges.properties import AnalyzerResult


def test_parse_payload_reads_short_and_long_keys():
    assert parse_analyzer_payload(
        {"status": "success", "errors": 1, "numberOfWarnings": "2"}
    ) == AnalyzerResult(1, 2, 0)


@pytest.mark.parametrize("status", ["queued", "Running", "starting", "pending"])
def test_parse_payload_raises_pending_for_unfinished_builds(status):
    with pytest.raises(BuildPendingError):
        parse_analyzer_payload({"status": status, "errors": 3})


@pytest.mark.parametrize(
    "payload",
    [
        [1, 2, 3],
        {"errors": "many"},
        {"warnings": -2},
        {"infos": True},
        {"errors": 2.7},
        {"warnings": float("inf")},
    ],
)
def test_parse_payload_rejects_malformed_reports(payload):
    with pytest.raises(AnalyzerResultError):
        parse_analyzer_payload(payload)


def test_http_accessor_loads_json_report():
    response = Mock()
    response.json.return_value = {"status": "success", "warnings": 4, "infos": 1}
    response.raise_for_status = Mock()

    with patch("apps.badges.accessors.requests.get", return_value=response) as get:
        result = HttpAnalyzerResultAccessor(
            "https://ci.example.com/report.json", timeout=5
        ).get_analyzer_result()

    assert result == AnalyzerResult(0, 4, 1)
    get.assert_called_once_with(
        "https://ci.example.com/report.json",
        headers={"Accept": "application/json"},
        timeout=5,
    )


def test_http_accessor_rejects_invalid_json():
    response = Mock()
    response.json.side_effect = ValueError("no json")
    response.raise_for_status = Mock()
    session = Mock()
    session.get.return_value = response

    accessor = HttpAnalyzerResultAccessor("https://ci.example.com", session=session)

    with pytest.raises(AnalyzerResultError):
        accessor.get_analyzer_result()


def test_parse_payload_accepts_whole_number_floats():
    assert parse_analyzer_payload({"errors": 2.0}) == AnalyzerResult(2, 0, 0)
