"""Services for CommentPulse."""

from .youtube_client import YouTubeService
from .language_client import CommentAnalyzer, create_language_client
from .pipeline import CommentInsightsPipeline, build_pipeline, validate_request

__all__ = [
    "YouTubeService",
    "CommentAnalyzer",
    "create_language_client",
    "CommentInsightsPipeline",
    "build_pipeline",
    "validate_request",
]
