"""Log file handlers for the badge service."""

from __future__ import annotations

import logging
import os
import socket
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from django.conf import settings

from .filenames import normalize_log_filename


def running_tests() -> bool:
    return "test" in sys.argv or "pytest" in sys.modules


class ServiceFileHandler(TimedRotatingFileHandler):
    """File handler that follows ``LOG_DIR`` and survives log deletion."""

    def _current_file(self) -> Path:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        if running_tests():
            return log_dir / "tests.log"
        return log_dir / f"{normalize_log_filename(socket.gethostname())}.log"

    def emit(self, record: logging.LogRecord) -> None:
        current = str(self._current_file())
        should_reopen = self.baseFilename != current
        if self.stream and not os.path.exists(self.baseFilename):
            should_reopen = True

        if should_reopen:
            self.baseFilename = current
            Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
            if self.stream:
                self.stream.close()
            self.stream = self._open()
        super().emit(record)


class ErrorFileHandler(ServiceFileHandler):
    """File handler dedicated to capturing warnings and errors."""

    def _current_file(self) -> Path:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        if running_tests():
            return log_dir / "tests-error.log"
        return log_dir / "error.log"
