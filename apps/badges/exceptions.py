"""Exceptions raised while building badges."""

from __future__ import annotations


class NabbleError(Exception):
    """Base class for badge service errors."""


class BuildPendingError(NabbleError):
    """Raised when the analysis backing a badge has not finished yet."""


class AnalyzerResultError(NabbleError):
    """Raised when an analyzer report cannot be interpreted."""
