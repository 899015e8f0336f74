from enum import Enum
from typing import Iterable, Optional

from autoreply.classifier import normalize_text

NEGATIVE_KEYWORDS = ("bad", "not", "worst", "cancel")
POSITIVE_KEYWORDS = ("thanks", "thank", "great", "good")


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class SentimentTagger:
    """Three-bucket keyword heuristic; negative wins over positive."""

    def __init__(
        self,
        negative: Iterable[str] = NEGATIVE_KEYWORDS,
        positive: Iterable[str] = POSITIVE_KEYWORDS,
    ) -> None:
        self.negative = tuple(k.lower() for k in negative)
        self.positive = tuple(k.lower() for k in positive)

    def tag(self, text: Optional[str]) -> Sentiment:
        lowered = normalize_text(text)
        if any(k in lowered for k in self.negative):
            return Sentiment.NEGATIVE
        if any(k in lowered for k in self.positive):
            return Sentiment.POSITIVE
        return Sentiment.NEUTRAL
