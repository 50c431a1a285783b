"""
Chat Sentiment Scorer - Lexicon scoring with windowed negation.

============================================================
SCORING POLICY
============================================================
Input is normalized first (strip, casefold, U+2019 to apostrophe), so
the result depends only on the normalized key.

1. Tokenize on whitespace; strip everything except word characters,
   apostrophes and hyphens. Each non-empty token counts as one word.
2. Walk the tokens:
   - negation marker  -> the next `negation_window` (3) tokens are
                         multiplied by `negation_factor` (-0.8)
   - amplifier        -> next ordinary token x `amplifier_multiplier` (1.5)
   - diminisher       -> next ordinary token x `diminisher_multiplier` (0.5)
   - ordinary token   -> lexicon weight, negation then modifier applied;
                         added to score, |value| added to magnitude
   Markers and modifiers contribute nothing themselves. The last
   modifier before a token wins.
3. Emotes and emoji: mean weight of all matches added to score,
   its absolute value to magnitude.
4. More than one "!" multiplies score and magnitude by 1.2.
5. Divide by max(words, 1) * 1.5; clamp score to [-1, 1],
   magnitude to [0, 1].
6. Label: > 0.15 positive, < -0.15 negative, otherwise neutral.

"not good" therefore scores -0.8 / 3 = -0.27 (negative) while
"good" scores 1 / 1.5 = 0.67 (positive).
============================================================
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .config import ScorerConfig, get_config
from .lexicon import Lexicon
from .models import Label, ModifierKind, SentimentResult


logger = logging.getLogger(__name__)


_STRIP_PATTERN = re.compile(r"[^\w'-]")


def normalize_text(text: str) -> str:
    """Trim surrounding whitespace, case-fold and straighten apostrophes."""
    return text.strip().casefold().replace("\u2019", "'")


def tokenize(text: str) -> list[str]:
    """Split normalized text into word tokens."""
    tokens = []
    for chunk in text.split():
        token = _STRIP_PATTERN.sub("", chunk)
        if token:
            tokens.append(token)
    return tokens


@dataclass
class _Tally:
    """Running totals while walking a message."""
    score: float = 0.0
    magnitude: float = 0.0
    polar_words: int = 0
    words: int = 0


class SentimentScorer:
    """
    Pure lexicon scorer.

    Holds references to an immutable lexicon and config; scoring has no
    side effects, so one scorer can be shared freely.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        config: Optional[ScorerConfig] = None,
    ) -> None:
        self.lexicon = lexicon if lexicon is not None else Lexicon.default()
        self.config = config if config is not None else get_config()

    def score(self, text: str) -> SentimentResult:
        """Score one message."""
        normalized = normalize_text(text)
        if not normalized:
            return SentimentResult.neutral()

        tally = self._score_tokens(tokenize(normalized))

        emote_score = self._score_emotes(normalized)
        tally.score += emote_score
        tally.magnitude += abs(emote_score)

        if normalized.count("!") > 1:
            tally.score *= self.config.exclamation_amplifier
            tally.magnitude *= self.config.exclamation_amplifier

        max_possible = max(tally.words, 1) * self.config.normalization_factor
        score = max(-1.0, min(1.0, tally.score / max_possible))
        magnitude = min(1.0, tally.magnitude / max_possible)

        return SentimentResult(
            label=self.classify(score),
            score=score,
            magnitude=magnitude,
            confidence=self._confidence(tally),
        )

    def classify(self, score: float) -> Label:
        """Map a normalized score to a label."""
        if score > self.config.positive_threshold:
            return Label.POSITIVE
        if score < self.config.negative_threshold:
            return Label.NEGATIVE
        return Label.NEUTRAL

    def _score_tokens(self, tokens: list[str]) -> _Tally:
        tally = _Tally()
        negation_remaining = 0
        multiplier = 1.0

        for token in tokens:
            tally.words += 1

            if self.lexicon.is_negation(token):
                negation_remaining = self.config.negation_window
                continue

            modifier = self.lexicon.modifier(token)
            if modifier == ModifierKind.AMPLIFIER:
                multiplier = self.config.amplifier_multiplier
                continue
            if modifier == ModifierKind.DIMINISHER:
                multiplier = self.config.diminisher_multiplier
                continue

            value = self.lexicon.weight(token)
            if value:
                tally.polar_words += 1

            if negation_remaining > 0:
                value *= self.config.negation_factor
                negation_remaining -= 1

            value *= multiplier
            multiplier = 1.0

            tally.score += value
            tally.magnitude += abs(value)

        return tally

    def _score_emotes(self, text: str) -> float:
        matches = self.lexicon.match_emotes(text)
        if not matches:
            return 0.0
        return sum(matches) / len(matches)

    def _confidence(self, tally: _Tally) -> float:
        cap = self.config.confidence_word_cap
        words = max(tally.words, 1)
        length_part = min(tally.words, cap) / cap * 0.6
        polar_part = tally.polar_words / words * 0.4
        return min(1.0, length_part + polar_part)
