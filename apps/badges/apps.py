"""App configuration for the badge decision engine."""

from django.apps import AppConfig


class BadgesConfig(AppConfig):
    """Register badge building services."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.badges"
    label = "badges"
    verbose_name = "Badges"
