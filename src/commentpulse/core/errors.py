"""Exceptions raised by CommentPulse."""

from typing import Any, Optional


class CommentPulseError(Exception):
    """Base class for CommentPulse errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(CommentPulseError):
    """Required credentials or settings are missing or unusable."""


class CommentFetchError(CommentPulseError):
    """A comment listing page failed; carries the upstream status."""

    def __init__(self, status_code: int, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        return f"YouTube API error {self.status_code}: {self.message}"
