"""Errors raised by a capture pass."""

from __future__ import annotations

from snapcompare.models.capture import Artifact


class ComparisonError(Exception):
    """Base error for a capture pass. Carries any artifacts written before the failure."""

    def __init__(self, message: str, artifacts: list[Artifact] | None = None):
        super().__init__(message)
        self.artifacts = list(artifacts or [])


class NavigationError(ComparisonError):
    """Target unreachable, missing, or navigation timed out."""


class CaptureError(ComparisonError):
    """Screenshot could not be rendered or written."""
