"""Fetch, analyze and aggregate comments into a single response."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from ..core.constants import UNKNOWN_CATEGORY, MessageConstants, ThemeConstants
from ..core.errors import CommentFetchError
from ..core.models import InsightsResponse
from ..core.themes import extract_themes
from .language_client import CommentAnalyzer
from .youtube_client import YouTubeService

logger = logging.getLogger(__name__)


def validate_request(
    video_id: Optional[str],
    youtube_api_key: str,
    language_client_provider: Callable[[], Any],
) -> Optional[InsightsResponse]:
    """Return an error response when the request cannot be served, else None.

    The language client is only resolved once the cheaper checks pass.
    """
    if not video_id:
        return InsightsResponse(400, {
            "message": MessageConstants.MISSING_VIDEO_ID,
            "category": UNKNOWN_CATEGORY,
        })

    if not youtube_api_key:
        logger.error("YOUTUBE_API_KEY environment variable is not set!")
        return InsightsResponse(500, {
            "message": MessageConstants.MISSING_API_KEY,
            "category": UNKNOWN_CATEGORY,
        })

    if language_client_provider() is None:
        logger.error("Natural Language client is not initialized")
        return InsightsResponse(500, {
            "message": MessageConstants.MISSING_NLP_CLIENT,
            "category": UNKNOWN_CATEGORY,
        })

    return None


def _category_so_far(future: Future) -> str:
    if future.done() and not future.cancelled() and future.exception() is None:
        return future.result()
    return UNKNOWN_CATEGORY


class CommentInsightsPipeline:
    """Comment fetch, analysis, theme extraction and response assembly for one video."""

    def __init__(
        self,
        youtube: YouTubeService,
        analyzer: CommentAnalyzer,
        salience_threshold: float = ThemeConstants.SALIENCE_THRESHOLD,
        min_theme_occurrences: int = ThemeConstants.MIN_OCCURRENCES,
        max_themes: int = ThemeConstants.MAX_THEMES,
    ):
        self.youtube = youtube
        self.analyzer = analyzer
        self.salience_threshold = salience_threshold
        self.min_theme_occurrences = min_theme_occurrences
        self.max_themes = max_themes

    def run(self, video_id: str, page_token: Optional[str] = None) -> InsightsResponse:
        """Build the response for a video. Never raises."""
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="category")
        category_future = executor.submit(self.youtube.get_video_category, video_id)

        try:
            comments = self.youtube.fetch_comments(video_id, page_token)

            if not comments:
                return InsightsResponse(200, {
                    "message": MessageConstants.NO_COMMENTS,
                    "comments": [],
                    "category": category_future.result(),
                    "themes": [],
                })

            analyzed = self.analyzer.analyze(comments)
            themes = extract_themes(
                analyzed,
                salience_threshold=self.salience_threshold,
                min_occurrences=self.min_theme_occurrences,
                limit=self.max_themes,
            )
            failed = sum(1 for comment in analyzed if comment.failed)

            if failed:
                message = (
                    f"Fetched {len(analyzed)} comments; analysis failed for {failed} of them."
                )
            else:
                message = f"Successfully fetched and analyzed {len(analyzed)} comments."

            return InsightsResponse(200, {
                "message": message,
                "comments": [comment.to_dict() for comment in analyzed],
                "category": category_future.result(),
                "themes": [theme.to_dict() for theme in themes],
                "failedAnalyses": failed,
            })

        except CommentFetchError as e:
            return InsightsResponse(e.status_code, {
                "message": e.message,
                "details": e.details,
                "category": _category_so_far(category_future),
            })
        except Exception as e:
            logger.exception(f"Error in backend comment fetch for video {video_id}: {e}")
            return InsightsResponse(500, {
                "message": MessageConstants.INTERNAL_ERROR,
                "error": str(e),
                "category": _category_so_far(category_future),
            })
        finally:
            executor.shutdown(wait=False)


def build_pipeline(settings, language_client: Any, youtube: Optional[YouTubeService] = None) -> CommentInsightsPipeline:
    """Wire a pipeline from settings and an initialized language client."""
    if youtube is None:
        youtube = YouTubeService(
            settings.youtube_api_key,
            page_size=settings.page_size,
            max_comments=settings.max_comments,
            page_delay=settings.page_delay,
        )
    return CommentInsightsPipeline(
        youtube,
        CommentAnalyzer(language_client, max_workers=settings.analysis_workers),
        salience_threshold=settings.salience_threshold,
        min_theme_occurrences=settings.min_theme_occurrences,
        max_themes=settings.max_themes,
    )
