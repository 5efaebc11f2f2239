import json
from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.stats.services import StatisticsService


class BadgeStatsCommandTests(TestCase):
    def setUp(self):
        service = StatisticsService()
        service.add_request_entry()
        service.add_project_entry("spatialfocus", "nabble")

    def test_prints_plain_summary(self):
        out = StringIO()

        call_command("badge_stats", stdout=out)

        output = out.getvalue()
        self.assertIn("Requests: 1", output)
        self.assertIn("Projects: 1", output)
        self.assertIn("Badges: 0", output)
        self.assertNotIn("Last request: never", output)

    def test_prints_json_summary(self):
        out = StringIO()

        call_command("badge_stats", "--json", stdout=out)

        payload = json.loads(out.getvalue())
        self.assertEqual(payload["requests"], 1)
        self.assertEqual(payload["badges"], 0)
        self.assertIsNotNone(payload["last_request_at"])
