"""Service helpers for recording and reading badge statistics."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import Max

from .models import BadgeEntry, ProjectEntry, RequestEntry

logger = logging.getLogger(__name__)


class TransactionError(RuntimeError):
    """Raised when a statistics transaction is used out of order."""


class StatisticsTransaction:
    """Transaction scope that only persists work after :meth:`commit`.

    Leaving the ``with`` block without committing, or because of an
    exception, rolls back everything written inside it.
    """

    def __init__(self, using: str | None = None) -> None:
        self.using = using or DEFAULT_DB_ALIAS
        self._atomic = transaction.atomic(using=self.using)
        self.state = "new"

    def __enter__(self) -> "StatisticsTransaction":
        if self.state != "new":
            raise TransactionError("Statistics transactions cannot be reused.")
        self._atomic.__enter__()
        self.state = "open"
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None or self.state != "committed":
            if self.state == "open":
                transaction.set_rollback(True, using=self.using)
            self.state = "rolled_back"
        return self._atomic.__exit__(exc_type, exc, tb)

    def _ensure_open(self) -> None:
        if self.state != "open":
            raise TransactionError(f"Transaction is {self.state.replace('_', ' ')}.")

    def commit(self) -> None:
        """Mark the work done in this scope as durable."""

        self._ensure_open()
        self.state = "committed"

    def rollback(self) -> None:
        """Discard the work done in this scope."""

        self._ensure_open()
        transaction.set_rollback(True, using=self.using)
        self.state = "rolled_back"


@dataclass(frozen=True)
class StatisticsSummary:
    requests: int
    projects: int
    badges: int
    last_request_at: datetime | None

    def as_dict(self) -> dict:
        payload = asdict(self)
        if self.last_request_at is not None:
            payload["last_request_at"] = self.last_request_at.isoformat()
        return payload


class StatisticsService:
    """Record badge usage in the statistics tables."""

    def __init__(self, using: str | None = None) -> None:
        self.using = using or DEFAULT_DB_ALIAS

    def begin_transaction(self) -> StatisticsTransaction:
        return StatisticsTransaction(using=self.using)

    def add_request_entry(self) -> RequestEntry:
        entry = RequestEntry.objects.using(self.using).create()
        logger.debug("Recorded badge request %s", entry.pk)
        return entry

    def add_project_entry(self, account_name: str, project_name: str) -> ProjectEntry:
        entry, created = ProjectEntry.objects.using(self.using).get_or_create(
            account_name=account_name, project_name=project_name
        )
        if created:
            logger.info("Registered project %s/%s", account_name, project_name)
        return entry

    def add_badge_entry(self, badge_identifier: str) -> BadgeEntry:
        entry, _created = BadgeEntry.objects.using(self.using).get_or_create(
            badge_identifier=badge_identifier
        )
        return entry

    def get_request_count(self) -> int:
        return RequestEntry.objects.using(self.using).count()

    def get_project_count(self) -> int:
        return ProjectEntry.objects.using(self.using).count()

    def get_badge_count(self) -> int:
        return BadgeEntry.objects.using(self.using).count()

    def get_summary(self) -> StatisticsSummary:
        last_request_at = (
            RequestEntry.objects.using(self.using)
            .aggregate(last=Max("created"))
            .get("last")
        )
        return StatisticsSummary(
            requests=self.get_request_count(),
            projects=self.get_project_count(),
            badges=self.get_badge_count(),
            last_request_at=last_request_at,
        )
