"""Data models for CommentPulse."""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass(frozen=True)
class SentimentScore:
    """Document-level sentiment; both fields are None when analysis failed."""
    score: Optional[float] = None
    magnitude: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "magnitude": self.magnitude}


@dataclass(frozen=True)
class Entity:
    """An entity mentioned in a comment."""
    name: str
    type: str
    salience: float

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "salience": self.salience}


@dataclass(frozen=True)
class AnalyzedComment:
    """A comment with its sentiment and entity annotations."""
    text: str
    sentiment: SentimentScore = field(default_factory=SentimentScore)
    entities: List[Entity] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "sentiment": self.sentiment.to_dict(),
            "entities": [entity.to_dict() for entity in self.entities],
            "error": self.error,
        }


@dataclass(frozen=True)
class Theme:
    """A recurring entity across comments, ranked by occurrences."""
    name: str
    occurrences: int
    average_sentiment: float
    sentiment_category: str  # "positive", "neutral" or "negative"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "occurrences": self.occurrences,
            "averageSentiment": self.average_sentiment,
            "sentimentCategory": self.sentiment_category,
        }


@dataclass
class CommentPage:
    """One page of the comment listing."""
    comments: List[str]
    next_page_token: Optional[str] = None


@dataclass
class InsightsResponse:
    """Status code and JSON body returned to the caller."""
    status_code: int
    body: Dict[str, Any]
