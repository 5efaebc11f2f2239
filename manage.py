#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys
from typing import Sequence

from config.loadenv import loadenv


def main(argv: Sequence[str] | None = None) -> None:
    """Run administrative tasks."""

    loadenv()
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:  # pragma: no cover - Django bootstrap
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line(["manage.py", *(argv or sys.argv[1:])])


if __name__ == "__main__":  # pragma: no cover - script entry
    main(sys.argv[1:])
