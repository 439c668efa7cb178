"""FastAPI application for CommentPulse."""

import logging
from functools import lru_cache
from typing import Annotated, Any, Callable, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .core.config import Settings, get_settings
from .core.constants import UNKNOWN_CATEGORY, MessageConstants
from .services.language_client import create_language_client
from .services.pipeline import build_pipeline, validate_request
from .services.youtube_client import YouTubeService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def shared_language_client() -> Optional[Any]:
    """Natural Language client shared by all requests, or None if it cannot be built."""
    try:
        return create_language_client(get_settings())
    except Exception as e:
        logger.error(f"Failed to initialize Natural Language client: {e}")
        return None


def get_language_client_provider() -> Callable[[], Optional[Any]]:
    """Dependency returning a callable that yields the language client."""
    return shared_language_client


def get_youtube_service(settings: Annotated[Settings, Depends(get_settings)]) -> YouTubeService:
    """Dependency to get a YouTube service for one request."""
    return YouTubeService(
        settings.youtube_api_key,
        page_size=settings.page_size,
        max_comments=settings.max_comments,
        page_delay=settings.page_delay,
    )


def create_app() -> FastAPI:
    """Create the API application."""
    app = FastAPI(
        title="CommentPulse API",
        description="Sentiment and theme analysis for YouTube video comments",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def root():
        """Liveness check."""
        return MessageConstants.LIVENESS

    @app.get("/comments")
    def get_comments(
        settings: Annotated[Settings, Depends(get_settings)],
        language_client_provider: Annotated[Callable[[], Optional[Any]], Depends(get_language_client_provider)],
        youtube: Annotated[YouTubeService, Depends(get_youtube_service)],
        video_id: Annotated[Optional[str], Query(alias="videoId", description="YouTube video ID")] = None,
        page_token: Annotated[Optional[str], Query(alias="pageToken", description="Cursor to start from")] = None,
    ):
        """Fetch a video's comments and return sentiment, entities, category and themes.

        Runs in FastAPI's threadpool; the pipeline itself fans out to worker
        threads for category lookup and per-comment analysis.
        """
        try:
            result = validate_request(video_id, settings.youtube_api_key, language_client_provider)
            if result is None:
                pipeline = build_pipeline(settings, language_client_provider(), youtube=youtube)
                result = pipeline.run(video_id, page_token)
        except Exception as e:
            logger.exception(f"Error in backend comment fetch: {e}")
            return JSONResponse(
                status_code=500,
                content={
                    "message": MessageConstants.INTERNAL_ERROR,
                    "error": str(e),
                    "category": UNKNOWN_CATEGORY,
                },
            )
        return JSONResponse(status_code=result.status_code, content=result.body)

    return app


app = create_app()
