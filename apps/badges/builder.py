"""Badge decision engine.

Maps an analyzer result and the caller's presentation preferences to a badge
request, records a statistics entry for every successful build and falls
back to a pending or inaccessible badge when anything on the way fails.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .exceptions import BuildPendingError
from .properties import (
    AnalyzerResult,
    Badge,
    BadgeBuilderProperties,
    BadgeClientProperties,
    BadgeColor,
)

if TYPE_CHECKING:  # pragma: no cover - typing only
    from apps.stats.services import StatisticsService

    from .accessors import AnalyzerResultAccessor
    from .clients import BadgeClient

logger = logging.getLogger(__name__)


class FailureKind(enum.Enum):
    """Why a badge build fell back."""

    PENDING = "pending"
    INACCESSIBLE = "inaccessible"


@dataclass(frozen=True)
class BuildFailure:
    """Failure notification passed to ``on_error`` callbacks."""

    kind: FailureKind
    error: BaseException

    @classmethod
    def from_exception(cls, error: BaseException) -> BuildFailure:
        if isinstance(error, BuildPendingError):
            return cls(FailureKind.PENDING, error)
        return cls(FailureKind.INACCESSIBLE, error)

    def status(self, properties: BadgeBuilderProperties) -> str:
        """Return the fallback status text for this failure."""

        if self.kind is FailureKind.PENDING:
            return properties.status_template_pending
        return properties.status_template_inaccessible


ErrorCallback = Callable[[BuildFailure], None]


def determine_color(
    properties: BadgeBuilderProperties, result: AnalyzerResult
) -> BadgeColor:
    if result.number_of_errors > 0:
        return properties.color_error
    if result.number_of_warnings > 0:
        return properties.color_warning
    if result.number_of_infos > 0 and properties.count_infos:
        return properties.color_info
    return properties.color_success


def determine_template(
    properties: BadgeBuilderProperties, result: AnalyzerResult
) -> str:
    if result.number_of_errors > 0:
        template = properties.status_template_error
    elif result.number_of_warnings > 0:
        template = properties.status_template_warning
    elif result.number_of_infos > 0 and properties.count_infos:
        template = properties.status_template_info
    else:
        return properties.status_template_success

    if properties.aggregate_values:
        return properties.status_template_aggregate
    return template


def determine_violations(
    properties: BadgeBuilderProperties, result: AnalyzerResult
) -> int:
    """Return the number interpolated into the status template.

    Without aggregation only the highest tier with findings is counted. Infos
    are only reached when nothing above them was counted, even with
    ``count_infos`` enabled.
    """

    violations = result.number_of_errors
    if violations == 0 or properties.aggregate_values:
        violations += result.number_of_warnings
    if properties.count_infos and (
        violations == 0 or properties.aggregate_values
    ):
        violations += result.number_of_infos
    return violations


def resolve_status(template: str, violations: int) -> str:
    if violations > 0:
        return template.format(violations)
    return template


class BadgeBuilder:
    """Build badges while recording request statistics."""

    def __init__(
        self, badge_client: BadgeClient, statistics_service: StatisticsService
    ) -> None:
        self.badge_client = badge_client
        self.statistics_service = statistics_service

    def build_badge(
        self,
        properties: BadgeBuilderProperties,
        analyzer_result_accessor: AnalyzerResultAccessor,
        on_error: ErrorCallback | None = None,
    ) -> Badge:
        """Return a badge for the analyzer result behind the accessor.

        Failures while building the badge are reported once through
        ``on_error`` and replaced by a fallback badge. Errors raised by
        ``on_error`` itself, or by the badge client while producing the
        fallback, propagate.
        """

        try:
            with self.statistics_service.begin_transaction() as statistics:
                result = analyzer_result_accessor.get_analyzer_result()
                template = determine_template(properties, result)
                violations = determine_violations(properties, result)
                client_properties = BadgeClientProperties(
                    label=properties.label,
                    status=resolve_status(template, violations),
                    color=determine_color(properties, result),
                    style=properties.style,
                    format=properties.format,
                )
                badge = self.badge_client.request_badge(client_properties)
                self.statistics_service.add_request_entry()
                statistics.commit()
                return badge
        except Exception as exc:
            failure = BuildFailure.from_exception(exc)

        self._report_failure(failure, on_error)
        return self.badge_client.request_badge(
            BadgeClientProperties(
                label=properties.label,
                status=failure.status(properties),
                color=properties.color_inaccessible,
                style=properties.style,
                format=properties.format,
            )
        )

    def _report_failure(
        self, failure: BuildFailure, on_error: ErrorCallback | None
    ) -> None:
        if failure.kind is FailureKind.PENDING:
            logger.info("Badge analysis still pending: %s", failure.error)
        else:
            logger.error(
                "Badge build failed, serving inaccessible badge",
                exc_info=failure.error,
            )

        if on_error is not None:
            on_error(failure)
