"""Value types exchanged between the badge builder and its collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from django.conf import settings

logger = logging.getLogger(__name__)


class BadgeStyle(str, Enum):
    """Badge styles understood by shields.io."""

    PLASTIC = "plastic"
    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    FOR_THE_BADGE = "for-the-badge"
    SOCIAL = "social"


class BadgeColor(str, Enum):
    """Named badge colors understood by shields.io."""

    BRIGHTGREEN = "brightgreen"
    GREEN = "green"
    YELLOWGREEN = "yellowgreen"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    LIGHTGREY = "lightgrey"
    BLUE = "blue"


_COLOR_FIELDS = (
    "color_error",
    "color_warning",
    "color_info",
    "color_success",
    "color_inaccessible",
)


@dataclass(frozen=True)
class BadgeBuilderProperties:
    """Presentation preferences supplied by the caller for one badge build.

    Templates that carry a violation count use a single positional
    placeholder, e.g. ``"{0} warnings"``. The success, pending and
    inaccessible templates are used verbatim.
    """

    label: str = "stylecop"
    style: BadgeStyle = BadgeStyle.FLAT
    format: str = "svg"
    color_error: BadgeColor = BadgeColor.RED
    color_warning: BadgeColor = BadgeColor.YELLOW
    color_info: BadgeColor = BadgeColor.BLUE
    color_success: BadgeColor = BadgeColor.BRIGHTGREEN
    color_inaccessible: BadgeColor = BadgeColor.LIGHTGREY
    status_template_error: str = "{0} errors"
    status_template_warning: str = "{0} warnings"
    status_template_info: str = "{0} infos"
    status_template_aggregate: str = "{0} violations"
    status_template_success: str = "passing"
    status_template_pending: str = "pending"
    status_template_inaccessible: str = "inaccessible"
    aggregate_values: bool = False
    count_infos: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", BadgeStyle(self.style))
        for name in _COLOR_FIELDS:
            object.__setattr__(self, name, BadgeColor(getattr(self, name)))

    @classmethod
    def from_settings(cls, **overrides: Any) -> BadgeBuilderProperties:
        """Build properties from ``NABBLE_BADGE_DEFAULTS`` plus ``overrides``."""

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown badge properties: {', '.join(unknown)}")

        configured = getattr(settings, "NABBLE_BADGE_DEFAULTS", None) or {}
        ignored = sorted(set(configured) - known)
        if ignored:
            logger.warning(
                "Ignoring unknown NABBLE_BADGE_DEFAULTS keys: %s", ", ".join(ignored)
            )
        values = {key: value for key, value in configured.items() if key in known}
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class AnalyzerResult:
    """Finding counts reported by a code analysis run."""

    number_of_errors: int = 0
    number_of_warnings: int = 0
    number_of_infos: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) < 0:
                raise ValueError(f"{field.name} must not be negative")


@dataclass
class BadgeClientProperties:
    """Fully resolved badge request handed to a badge client."""

    label: str
    status: str
    color: BadgeColor
    style: BadgeStyle
    format: str


@dataclass(frozen=True)
class Badge:
    """Rendered badge returned by a badge client."""

    content: bytes
    content_type: str
