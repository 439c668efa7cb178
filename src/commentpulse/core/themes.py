"""Theme extraction from analyzed comments."""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .constants import ThemeConstants
from .models import AnalyzedComment, Theme

logger = logging.getLogger(__name__)


@dataclass
class _ThemeAccumulator:
    occurrences: int = 0
    sentiment_sum: float = 0.0
    sentiment_count: int = 0

    @property
    def average(self) -> float:
        if not self.sentiment_count:
            return 0.0
        return self.sentiment_sum / self.sentiment_count


def _usable_score(score: Optional[float]) -> bool:
    """True for finite numbers; None, NaN and bools are rejected."""
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    return math.isfinite(score)


def classify_sentiment(average: float) -> str:
    """Bucket an average sentiment score into positive, negative or neutral."""
    if average > ThemeConstants.POSITIVE_THRESHOLD:
        return "positive"
    if average < ThemeConstants.NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def extract_themes(
    analyzed: List[AnalyzedComment],
    salience_threshold: float = ThemeConstants.SALIENCE_THRESHOLD,
    min_occurrences: int = ThemeConstants.MIN_OCCURRENCES,
    limit: int = ThemeConstants.MAX_THEMES,
) -> List[Theme]:
    """Group salient topic entities into themes ranked by occurrences.

    Every qualifying mention counts, so a comment naming the same entity twice
    contributes two occurrences and two sentiment samples. Themes with equal
    occurrences keep the order in which they were first seen.
    """
    accumulators: Dict[str, _ThemeAccumulator] = {}

    for comment in analyzed:
        score = comment.sentiment.score
        if not _usable_score(score) or not comment.entities:
            continue

        for entity in comment.entities:
            if entity.type not in ThemeConstants.ELIGIBLE_ENTITY_TYPES:
                continue
            if entity.salience <= salience_threshold:
                continue

            acc = accumulators.setdefault(entity.name.lower(), _ThemeAccumulator())
            acc.occurrences += 1
            acc.sentiment_sum += score
            acc.sentiment_count += 1

    themes = []
    for name, acc in accumulators.items():
        if acc.occurrences < min_occurrences:
            continue
        average = round(acc.average, 2)
        themes.append(Theme(
            name=name,
            occurrences=acc.occurrences,
            average_sentiment=average,
            sentiment_category=classify_sentiment(average),
        ))

    # sorted() is stable, ties stay in first-seen order
    themes = sorted(themes, key=lambda theme: theme.occurrences, reverse=True)
    logger.debug(f"Extracted {len(themes)} themes from {len(accumulators)} candidates")
    return themes[:limit]
