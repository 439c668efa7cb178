"""Shared fakes for the YouTube and Natural Language clients."""

import json
import threading
from types import SimpleNamespace

import httplib2
import pytest
from google.cloud import language_v1
from googleapiclient.errors import HttpError


def comment_page(texts, next_page_token=None):
    """Build a commentThreads.list response."""
    page = {
        "items": [
            {"snippet": {"topLevelComment": {"snippet": {"textOriginal": text}}}}
            for text in texts
        ]
    }
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page


def http_error(status, message="Forbidden", errors=None):
    """Build a googleapiclient HttpError with a YouTube-style error body."""
    body = {"error": {"code": status, "message": message, "errors": errors or []}}
    return HttpError(httplib2.Response({"status": status}), json.dumps(body).encode("utf-8"))


class FakeRequest:
    def __init__(self, outcome):
        self.outcome = outcome

    def execute(self):
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class FakeCollection:
    """Returns the queued outcomes in order, repeating the last one."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def list(self, **kwargs):
        self.calls.append(kwargs)
        index = min(len(self.calls), len(self.outcomes)) - 1
        return FakeRequest(self.outcomes[index])


class FakeYouTube:
    """Stand-in for the googleapiclient discovery resource."""

    def __init__(self, comment_pages, video_responses=None):
        self.comment_threads = FakeCollection(comment_pages)
        self.video_collection = FakeCollection(
            video_responses or [{"items": [{"snippet": {"categoryId": "28"}}]}]
        )

    def commentThreads(self):
        return self.comment_threads

    def videos(self):
        return self.video_collection


class FakeLanguageClient:
    """Natural Language client returning canned results keyed by text.

    sentiments maps text -> (score, magnitude) or an Exception.
    entities maps text -> [(name, type name, salience), ...] or an Exception.
    """

    def __init__(self, sentiments=None, entities=None):
        self.sentiments = sentiments or {}
        self.entities = entities or {}
        self.calls = []
        self._lock = threading.Lock()

    def _record(self, kind, request):
        text = request["document"].content
        with self._lock:
            self.calls.append((kind, text))
        return text

    def analyze_sentiment(self, request):
        text = self._record("sentiment", request)
        outcome = self.sentiments.get(text, (0.0, 0.0))
        if isinstance(outcome, Exception):
            raise outcome
        score, magnitude = outcome
        return SimpleNamespace(document_sentiment=SimpleNamespace(score=score, magnitude=magnitude))

    def analyze_entities(self, request):
        text = self._record("entities", request)
        outcome = self.entities.get(text, [])
        if isinstance(outcome, Exception):
            raise outcome
        return SimpleNamespace(entities=[
            SimpleNamespace(name=name, type_=language_v1.Entity.Type[type_name], salience=salience)
            for name, type_name, salience in outcome
        ])


# Ten comments with deterministic annotations
FIXTURE_COMMENTS = [
    "The camera on this phone is amazing",
    "Camera quality is bad in low light",
    "Loved the soundtrack",
    "The Soundtrack and the camera work were great",
    "Marques explains it well",
    "Battery life is terrible",
    "battery life could be better",
    "Filmed in Tokyo?",
    "phone phone phone",
    "First!",
]

FIXTURE_SENTIMENTS = {
    FIXTURE_COMMENTS[0]: (0.8, 0.8),
    FIXTURE_COMMENTS[1]: (-0.6, 0.6),
    FIXTURE_COMMENTS[2]: (0.9, 0.9),
    FIXTURE_COMMENTS[3]: (0.7, 1.4),
    FIXTURE_COMMENTS[4]: (0.5, 0.5),
    FIXTURE_COMMENTS[5]: (-0.8, 0.8),
    FIXTURE_COMMENTS[6]: (-0.3, 0.3),
    FIXTURE_COMMENTS[7]: (0.0, 0.1),
    FIXTURE_COMMENTS[8]: (0.1, 0.3),
    FIXTURE_COMMENTS[9]: RuntimeError("quota exceeded"),
}

FIXTURE_ENTITIES = {
    FIXTURE_COMMENTS[0]: [("camera", "CONSUMER_GOOD", 0.6), ("phone", "CONSUMER_GOOD", 0.4)],
    FIXTURE_COMMENTS[1]: [("Camera", "CONSUMER_GOOD", 0.7), ("light", "OTHER", 0.3)],
    FIXTURE_COMMENTS[2]: [("soundtrack", "WORK_OF_ART", 0.9)],
    FIXTURE_COMMENTS[3]: [("Soundtrack", "WORK_OF_ART", 0.5), ("camera", "OTHER", 0.5)],
    FIXTURE_COMMENTS[4]: [("Marques", "PERSON", 0.9)],
    FIXTURE_COMMENTS[5]: [("Battery life", "OTHER", 0.8)],
    FIXTURE_COMMENTS[6]: [("battery life", "OTHER", 0.9)],
    FIXTURE_COMMENTS[7]: [("Tokyo", "LOCATION", 1.0)],
    FIXTURE_COMMENTS[8]: [("phone", "CONSUMER_GOOD", 0.5), ("phone", "CONSUMER_GOOD", 0.03)],
    FIXTURE_COMMENTS[9]: [("first", "OTHER", 1.0)],
}


@pytest.fixture
def fixture_language_client():
    return FakeLanguageClient(FIXTURE_SENTIMENTS, FIXTURE_ENTITIES)


@pytest.fixture
def fixture_youtube():
    return FakeYouTube([comment_page(FIXTURE_COMMENTS)])
