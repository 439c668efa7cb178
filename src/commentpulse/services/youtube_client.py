"""YouTube data collection service for CommentPulse."""

import json
import logging
import threading
import time
from typing import Any, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.constants import (
    ERROR_CATEGORY,
    UNKNOWN_CATEGORY,
    FetchConstants,
    MessageConstants,
    category_label,
)
from ..core.errors import CommentFetchError
from ..core.models import CommentPage

logger = logging.getLogger(__name__)


def _fetch_error_from_http(error: HttpError) -> CommentFetchError:
    """Convert a googleapiclient HttpError into a CommentFetchError."""
    status = error.resp.status
    message = MessageConstants.UPSTREAM_ERROR
    details = None
    try:
        payload = json.loads(error.content.decode("utf-8"))
        upstream = payload.get("error") or {}
        message = upstream.get("message") or message
        details = upstream.get("errors")
    except (ValueError, AttributeError):
        if getattr(error, "reason", None):
            message = error.reason
    return CommentFetchError(int(status), message, details)


class YouTubeService:
    """YouTube data collection service using YouTube Data API v3."""

    def __init__(
        self,
        api_key: str,
        client: Any = None,
        page_size: int = FetchConstants.PAGE_SIZE,
        max_comments: int = FetchConstants.MAX_COMMENTS,
        page_delay: float = FetchConstants.PAGE_DELAY,
    ):
        self.api_key = api_key
        self.page_size = page_size
        self.max_comments = max_comments
        self.page_delay = page_delay
        self._client = client
        self._local = threading.local()

    @property
    def youtube(self):
        """Discovery resource for the calling thread.

        httplib2 transports are not thread safe, so every thread gets its own
        resource unless a client was injected.
        """
        if self._client is not None:
            return self._client
        if getattr(self._local, "youtube", None) is None:
            self._local.youtube = build(
                "youtube", "v3", developerKey=self.api_key, cache_discovery=False
            )
            logger.debug(f"YouTube client initialized for thread {threading.current_thread().name}")
        return self._local.youtube

    def fetch_page(self, video_id: str, page_token: Optional[str] = None) -> CommentPage:
        """Fetch one page of top-level comments."""
        try:
            response = self.youtube.commentThreads().list(
                part="snippet",
                videoId=video_id,
                maxResults=self.page_size,
                pageToken=page_token,
                textFormat="plainText",
            ).execute()
        except HttpError as e:
            error = _fetch_error_from_http(e)
            logger.error(f"YouTube API responded with error for video {video_id}: {error}")
            raise error from e

        comments = []
        for item in response.get("items", []):
            text = item["snippet"]["topLevelComment"]["snippet"].get("textOriginal")
            if text:
                comments.append(text)

        return CommentPage(comments=comments, next_page_token=response.get("nextPageToken"))

    def fetch_comments(self, video_id: str, page_token: Optional[str] = None) -> List[str]:
        """Page through a video's comments until the cap or the last page.

        Raises CommentFetchError on the first failed page; nothing fetched
        before the failure is returned.
        """
        all_comments: List[str] = []
        fetched = 0

        while True:
            page = self.fetch_page(video_id, page_token)
            all_comments.extend(page.comments)
            fetched += len(page.comments)
            page_token = page.next_page_token

            if not page_token or fetched >= self.max_comments:
                break

            # Rate limiting
            time.sleep(self.page_delay)

        logger.info(f"Retrieved {len(all_comments)} comments for video {video_id}")
        return all_comments

    def get_video_category(self, video_id: str) -> str:
        """Look up the human-readable category of a video. Never raises."""
        try:
            response = self.youtube.videos().list(part="snippet", id=video_id).execute()
            items = response.get("items", [])
            if not items:
                logger.warning(f"No metadata found for video {video_id}")
                return UNKNOWN_CATEGORY
            return category_label(items[0]["snippet"]["categoryId"])
        except HttpError as e:
            logger.warning(f"YouTube video lookup failed for {video_id}: {e}")
            return UNKNOWN_CATEGORY
        except Exception as e:
            logger.error(f"Failed to resolve category for video {video_id}: {e}")
            return ERROR_CATEGORY
