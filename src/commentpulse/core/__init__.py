"""Core modules for CommentPulse."""

from .models import *
from .config import settings
from .errors import CommentPulseError, ConfigurationError, CommentFetchError
from .themes import extract_themes, classify_sentiment

__all__ = [
    "settings",
    "SentimentScore",
    "Entity",
    "AnalyzedComment",
    "Theme",
    "CommentPage",
    "InsightsResponse",
    "CommentPulseError",
    "ConfigurationError",
    "CommentFetchError",
    "extract_themes",
    "classify_sentiment",
]
