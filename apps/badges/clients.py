"""Clients that turn resolved badge requests into rendered badges."""

from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import quote

import requests
from django.conf import settings

from .properties import Badge, BadgeClientProperties

logger = logging.getLogger(__name__)

DEFAULT_SHIELDS_URL = "https://img.shields.io"


class BadgeClient(Protocol):
    def request_badge(self, properties: BadgeClientProperties) -> Badge: ...


def shields_escape(text: str) -> str:
    """Escape a static badge path segment the way shields.io expects."""

    escaped = text.replace("_", "__").replace(" ", "_").replace("-", "--")
    return quote(escaped, safe="")


class ShieldsBadgeClient:
    """Thin client for the shields.io static badge endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        configured = base_url or getattr(
            settings, "NABBLE_SHIELDS_URL", DEFAULT_SHIELDS_URL
        )
        self.base_url = configured.rstrip("/")
        self.session = session
        self.timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "NABBLE_HTTP_TIMEOUT", 10)
        )

    def badge_url(self, properties: BadgeClientProperties) -> str:
        path = "-".join(
            (
                shields_escape(properties.label),
                shields_escape(properties.status),
                shields_escape(properties.color.value),
            )
        )
        return f"{self.base_url}/badge/{path}.{properties.format}"

    def request_badge(self, properties: BadgeClientProperties) -> Badge:
        url = self.badge_url(properties)
        getter = self.session.get if self.session is not None else requests.get
        logger.debug("Requesting badge from %s", url)
        response = getter(
            url, params={"style": properties.style.value}, timeout=self.timeout
        )
        response.raise_for_status()
        content_type = response.headers.get("Content-Type", "")
        return Badge(content=response.content, content_type=content_type)
