"""Models recording badge usage statistics."""

from __future__ import annotations

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class RequestEntry(models.Model):
    """A badge that was built successfully."""

    created = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        verbose_name = _("Request Entry")
        verbose_name_plural = _("Request Entries")
        ordering = ("-created", "-pk")

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return f"Request at {self.created:%Y-%m-%d %H:%M:%S}"


class ProjectEntry(models.Model):
    """A project whose analysis results were turned into badges."""

    account_name = models.CharField(max_length=200)
    project_name = models.CharField(max_length=200)
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Project Entry")
        verbose_name_plural = _("Project Entries")
        ordering = ("account_name", "project_name")
        constraints = [
            models.UniqueConstraint(
                fields=("account_name", "project_name"),
                name="stats_projectentry_unique_project",
            )
        ]

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return f"{self.account_name}/{self.project_name}"


class BadgeEntry(models.Model):
    """A distinct badge identifier that has been served."""

    badge_identifier = models.CharField(max_length=255, unique=True)
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Badge Entry")
        verbose_name_plural = _("Badge Entries")
        ordering = ("badge_identifier",)

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.badge_identifier
