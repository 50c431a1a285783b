"""
Chat Sentiment Aggregation - Chat-wide mood over many messages.

Feeds analytics overlays: label distribution, percentages and the
average score/magnitude of a window of chat.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from .engine import SentimentEngine, get_engine
from .models import Label, SentimentResult


@dataclass(frozen=True)
class SentimentSummary:
    """Label counts and averages over a set of results."""
    total: int = 0
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    average_score: float = 0.0
    average_magnitude: float = 0.0

    @property
    def positive_pct(self) -> float:
        return self._pct(self.positive)

    @property
    def negative_pct(self) -> float:
        return self._pct(self.negative)

    @property
    def neutral_pct(self) -> float:
        return self._pct(self.neutral)

    @property
    def dominant_label(self) -> Label:
        """Most common label; ties and empty input resolve to neutral."""
        counts = {
            Label.POSITIVE: self.positive,
            Label.NEGATIVE: self.negative,
            Label.NEUTRAL: self.neutral,
        }
        best = max(counts.values())
        leaders = [label for label, count in counts.items() if count == best]
        if len(leaders) == 1:
            return leaders[0]
        return Label.NEUTRAL

    def _pct(self, count: int) -> float:
        if self.total == 0:
            return 0.0
        return round(count / self.total * 100, 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
            "positive_pct": self.positive_pct,
            "negative_pct": self.negative_pct,
            "neutral_pct": self.neutral_pct,
            "average_score": self.average_score,
            "average_magnitude": self.average_magnitude,
            "dominant_label": self.dominant_label.value,
        }


def summarize_results(results: Iterable[SentimentResult]) -> SentimentSummary:
    """Aggregate already-computed results."""
    results = list(results)
    if not results:
        return SentimentSummary()

    n = len(results)
    labels = Counter(r.label for r in results)

    return SentimentSummary(
        total=n,
        positive=labels[Label.POSITIVE],
        negative=labels[Label.NEGATIVE],
        neutral=labels[Label.NEUTRAL],
        average_score=sum(r.score for r in results) / n,
        average_magnitude=sum(r.magnitude for r in results) / n,
    )


def summarize_messages(
    messages: Sequence[str],
    engine: Optional[SentimentEngine] = None,
) -> SentimentSummary:
    """Score messages (through the cache) and aggregate them."""
    engine = engine or get_engine()
    return summarize_results(engine.batch_analyze(messages))
