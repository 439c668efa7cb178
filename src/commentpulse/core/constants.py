"""Constants and configuration values for CommentPulse."""

from types import MappingProxyType

# YouTube video category codes (videoCategories.list, region US)
VIDEO_CATEGORIES = MappingProxyType({
    "1": "Film & Animation",
    "2": "Autos & Vehicles",
    "10": "Music",
    "15": "Pets & Animals",
    "17": "Sports",
    "18": "Short Movies",
    "19": "Travel & Events",
    "20": "Gaming",
    "21": "Videoblogging",
    "22": "People & Blogs",
    "23": "Comedy",
    "24": "Entertainment",
    "25": "News & Politics",
    "26": "Howto & Style",
    "27": "Education",
    "28": "Science & Technology",
    "29": "Nonprofits & Activism",
    "30": "Movies",
    "31": "Anime/Animation",
    "32": "Action/Adventure",
    "33": "Classics",
    "34": "Comedy",
    "35": "Documentary",
    "36": "Drama",
    "37": "Family",
    "38": "Foreign",
    "39": "Horror",
    "40": "Sci-Fi/Fantasy",
    "41": "Thriller",
    "42": "Shorts",
    "43": "Shows",
    "44": "Trailers",
})

UNKNOWN_CATEGORY = "Unknown"
ERROR_CATEGORY = "Error"


def category_label(category_id) -> str:
    """Translate a numeric category code into its label."""
    return VIDEO_CATEGORIES.get(str(category_id), f"{UNKNOWN_CATEGORY} ({category_id})")


# Fetch Constants
class FetchConstants:
    """Constants related to YouTube comment paging."""

    PAGE_SIZE = 100  # maxResults accepted by commentThreads.list
    MAX_COMMENTS = 500  # default per-request cap
    PAGE_DELAY = 0.2  # seconds between page requests


# Theme Constants
class ThemeConstants:
    """Constants for theme extraction."""

    # Entity types that describe discussion topics rather than people or places
    ELIGIBLE_ENTITY_TYPES = frozenset({
        "WORK_OF_ART",
        "CONSUMER_GOOD",
        "OTHER",
        "EVENT",
        "PRODUCT",
        "UNKNOWN",
    })
    SALIENCE_THRESHOLD = 0.05  # entity must be strictly above this
    MIN_OCCURRENCES = 2  # mentions required across comments
    MAX_THEMES = 5  # themes returned

    POSITIVE_THRESHOLD = 0.2
    NEGATIVE_THRESHOLD = -0.2


# Message Constants
class MessageConstants:
    """Response messages."""

    LIVENESS = "Youtube comment analyzer backend is running."
    MISSING_VIDEO_ID = "Missing videoId parameter"
    MISSING_API_KEY = "Server configuration error: API Key missing."
    MISSING_NLP_CLIENT = "Server configuration error: Natural Language client not initialized."
    NO_COMMENTS = "No comments found or fetched."
    UPSTREAM_ERROR = "Error from YouTube API"
    INTERNAL_ERROR = "Internal Server Error"


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
