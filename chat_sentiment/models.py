"""
Chat Sentiment Data Models - Result and lexicon structures.

SentimentResult is the only object handed to consumers (chat rendering,
overlays, analytics). It is frozen so a cached instance can be shared.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Label(Enum):
    """Discrete sentiment label derived from the score."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ModifierKind(Enum):
    """Intensity modifier classes for lexicon tokens."""
    AMPLIFIER = "amplifier"
    DIMINISHER = "diminisher"


@dataclass(frozen=True)
class LexiconEntry:
    """
    A single lexicon token.

    weight is the signed polarity contribution; pure modifiers
    ("very", "slightly") carry weight 0.0 and a modifier kind.
    """
    token: str
    weight: float = 0.0
    modifier: Optional[ModifierKind] = None

    @property
    def is_polar(self) -> bool:
        return self.weight != 0.0

    @property
    def is_modifier(self) -> bool:
        return self.modifier is not None


@dataclass(frozen=True)
class SentimentResult:
    """
    Sentiment of one chat message.

    score:      -1.0 (very negative) to +1.0 (very positive)
    magnitude:  0.0 to 1.0, unsigned intensity regardless of direction
    confidence: 0.0 to 1.0, grows with message length and share of polar words
    """
    label: Label
    score: float
    magnitude: float
    confidence: float = 1.0

    def __post_init__(self) -> None:
        """Clamp values into their documented ranges."""
        if not -1.0 <= self.score <= 1.0:
            object.__setattr__(self, "score", max(-1.0, min(1.0, self.score)))
        if not 0.0 <= self.magnitude <= 1.0:
            object.__setattr__(self, "magnitude", max(0.0, min(1.0, self.magnitude)))
        if not 0.0 <= self.confidence <= 1.0:
            object.__setattr__(self, "confidence", max(0.0, min(1.0, self.confidence)))

    @classmethod
    def neutral(cls) -> "SentimentResult":
        """Fixed result for empty or unscored messages."""
        return cls(label=Label.NEUTRAL, score=0.0, magnitude=0.0, confidence=1.0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label.value,
            "score": self.score,
            "magnitude": self.magnitude,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SentimentResult":
        """Create from dictionary."""
        return cls(
            label=Label(data["label"]),
            score=float(data["score"]),
            magnitude=float(data["magnitude"]),
            confidence=float(data.get("confidence", 1.0)),
        )
