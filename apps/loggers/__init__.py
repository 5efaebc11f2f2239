"""Logging configuration for the badge service."""

from .config import build_logging_settings, configure_library_loggers
from .handlers import ErrorFileHandler, ServiceFileHandler

__all__ = [
    "ErrorFileHandler",
    "ServiceFileHandler",
    "build_logging_settings",
    "configure_library_loggers",
]
