"""Print badge usage statistics."""

from __future__ import annotations

import json

from django.core.management.base import BaseCommand

from apps.stats.services import StatisticsService


class Command(BaseCommand):
    """Report how many badges, projects and requests have been recorded."""

    help = "Show badge request statistics."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--json",
            action="store_true",
            default=False,
            help="Emit the statistics as JSON.",
        )
        parser.add_argument(
            "--database",
            default=None,
            help="Database alias to read statistics from.",
        )

    def handle(self, *args, **options) -> None:
        summary = StatisticsService(using=options.get("database")).get_summary()

        if options.get("json"):
            self.stdout.write(json.dumps(summary.as_dict(), indent=2))
            return

        last_request = (
            summary.last_request_at.isoformat() if summary.last_request_at else "never"
        )
        self.stdout.write(f"Requests: {summary.requests}")
        self.stdout.write(f"Projects: {summary.projects}")
        self.stdout.write(f"Badges: {summary.badges}")
        self.stdout.write(f"Last request: {last_request}")
