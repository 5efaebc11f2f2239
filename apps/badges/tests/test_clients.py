"""Tests for the shields.io badge client."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from apps.badges.clients import ShieldsBadgeClient, shields_escape
from apps.badges.properties import BadgeClientProperties, BadgeColor, BadgeStyle


def _properties(**overrides) -> BadgeClientProperties:
    values = {
        "label": "style cop",
        "status": "3 warnings",
        "color": BadgeColor.YELLOW,
        "style": BadgeStyle.FLAT_SQUARE,
        "format": "svg",
    }
    values.update(overrides)
    return BadgeClientProperties(**values)


def test_shields_escape_doubles_separators():
    assert shields_escape("my-label_x y") == "my--label__x_y"
    assert shields_escape("50%") == "50%25"


def test_badge_url_uses_configured_base():
    client = ShieldsBadgeClient("https://badges.example.com/")

    assert (
        client.badge_url(_properties())
        == "https://badges.example.com/badge/style_cop-3_warnings-yellow.svg"
    )


def test_request_badge_returns_response_body():
    response = Mock()
    response.content = b"<svg/>"
    response.headers = {"Content-Type": "image/svg+xml"}
    response.raise_for_status = Mock()

    with patch("apps.badges.clients.requests.get", return_value=response) as get:
        badge = ShieldsBadgeClient("https://img.shields.io", timeout=3).request_badge(
            _properties()
        )

    assert badge.content == b"<svg/>"
    assert badge.content_type == "image/svg+xml"
    get.assert_called_once_with(
        "https://img.shields.io/badge/style_cop-3_warnings-yellow.svg",
        params={"style": "flat-square"},
        timeout=3,
    )


def test_request_badge_raises_on_http_error():
    response = Mock()
    response.raise_for_status = Mock(side_effect=requests.HTTPError("503"))
    session = Mock()
    session.get.return_value = response

    client = ShieldsBadgeClient(session=session)

    with pytest.raises(requests.HTTPError):
        client.request_badge(_properties())
    session.get.assert_called_once()
