"""CommentPulse - sentiment and theme analysis for YouTube comments."""

__version__ = "1.0.0"
__author__ = "CommentPulse Team"

from .core.models import *
from .core.config import settings
from .services.youtube_client import YouTubeService
from .services.language_client import CommentAnalyzer
from .services.pipeline import CommentInsightsPipeline

__all__ = [
    "settings",
    "YouTubeService",
    "CommentAnalyzer",
    "CommentInsightsPipeline",
]
