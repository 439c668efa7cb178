"""Google Cloud Natural Language integration for CommentPulse."""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, List

from google.cloud import language_v1

from ..core.config import Settings
from ..core.errors import ConfigurationError
from ..core.models import AnalyzedComment, Entity, SentimentScore

logger = logging.getLogger(__name__)


def create_language_client(settings: Settings) -> language_v1.LanguageServiceClient:
    """Build a Natural Language client from the configured credential source.

    Precedence: inline service account JSON, then a credential file path,
    then Application Default Credentials.
    """
    if settings.google_cloud_natural_language_key_json:
        try:
            info = json.loads(settings.google_cloud_natural_language_key_json)
            client = language_v1.LanguageServiceClient.from_service_account_info(info)
        except ValueError as e:
            raise ConfigurationError(f"Invalid Natural Language credentials JSON: {e}") from e
        logger.info("Natural Language client initialized using GOOGLE_CLOUD_NATURAL_LANGUAGE_KEY_JSON.")
        return client

    if settings.google_application_credentials:
        try:
            client = language_v1.LanguageServiceClient.from_service_account_file(
                settings.google_application_credentials
            )
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot load Natural Language credentials file: {e}") from e
        logger.info("Natural Language client initialized using GOOGLE_APPLICATION_CREDENTIALS.")
        return client

    client = language_v1.LanguageServiceClient()
    logger.warning(
        "Natural Language client initialized without explicit credentials. "
        "Ensure credentials are set via gcloud CLI or environment variable."
    )
    return client


def _document(text: str) -> language_v1.Document:
    return language_v1.Document(content=text, type_=language_v1.Document.Type.PLAIN_TEXT)


class CommentAnalyzer:
    """Runs sentiment and entity analysis for every comment concurrently."""

    def __init__(self, client: Any, max_workers: int = 16):
        self.client = client
        self.max_workers = max(1, max_workers)

    def analyze_sentiment(self, text: str) -> SentimentScore:
        response = self.client.analyze_sentiment(request={"document": _document(text)})
        sentiment = response.document_sentiment
        return SentimentScore(score=sentiment.score, magnitude=sentiment.magnitude)

    def analyze_entities(self, text: str) -> List[Entity]:
        response = self.client.analyze_entities(request={"document": _document(text)})
        return [
            Entity(name=entity.name, type=entity.type_.name, salience=entity.salience)
            for entity in response.entities
        ]

    def analyze(self, texts: List[str]) -> List[AnalyzedComment]:
        """Analyze comments; the result matches the input order one-to-one.

        Failures never propagate: a failed call leaves null sentiment or empty
        entities and the first error message on that comment.
        """
        if not texts:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending = [
                (
                    text,
                    executor.submit(self.analyze_sentiment, text),
                    executor.submit(self.analyze_entities, text),
                )
                for text in texts
            ]
            results = [self._collect(text, sentiment, entities) for text, sentiment, entities in pending]

        failed = sum(1 for result in results if result.failed)
        logger.info(f"Analyzed {len(results)} comments ({failed} with errors)")
        return results

    def _collect(self, text: str, sentiment_future: Future, entities_future: Future) -> AnalyzedComment:
        """Merge both analyses for one comment regardless of individual failures."""
        try:
            error = None

            try:
                sentiment = sentiment_future.result()
            except Exception as e:
                logger.warning(f"Could not analyze sentiment for comment: {text[:80]!r}. Error: {e}")
                sentiment = SentimentScore()
                error = str(e)

            try:
                entities = entities_future.result()
            except Exception as e:
                logger.warning(f"Could not analyze entities for comment: {text[:80]!r}. Error: {e}")
                entities = []
                error = error or str(e)

            return AnalyzedComment(text=text, sentiment=sentiment, entities=entities, error=error)
        except Exception as e:
            logger.error(f"Unexpected failure analyzing comment: {text[:80]!r}. Error: {e}")
            return AnalyzedComment(text=text, error=str(e))
