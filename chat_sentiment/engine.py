"""
Sentiment Engine - Cached single-message and batch evaluation.

The engine:
1. Validates input at the boundary (strings only)
2. Normalizes each message into a cache key
3. Returns the cached result on a hit
4. Scores and stores on a miss
5. Evaluates batches sequentially in input order

Module-level functions operate on one process-wide default engine.
"""

import logging
from typing import Any, Optional, Sequence

from .cache import SentimentCache, normalize_key
from .config import ScorerConfig
from .exceptions import InvalidInputError
from .lexicon import Lexicon
from .models import SentimentResult
from .scorer import SentimentScorer


logger = logging.getLogger(__name__)


class SentimentEngine:
    """
    Scorer + cache with the public analysis operations.

    Usage:
        engine = SentimentEngine()
        result = engine.analyze("Amazing play GG")
        results = engine.batch_analyze(["love this stream", "this is terrible"])
        engine.clear_cache()
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        config: Optional[ScorerConfig] = None,
        cache: Optional[SentimentCache] = None,
    ) -> None:
        self._scorer = SentimentScorer(lexicon=lexicon, config=config)
        self._cache = cache if cache is not None else SentimentCache()

        # Statistics
        self._stats = {
            "analyze_calls": 0,
            "batch_calls": 0,
            "messages_scored": 0,
        }

    @property
    def scorer(self) -> SentimentScorer:
        return self._scorer

    @property
    def lexicon(self) -> Lexicon:
        return self._scorer.lexicon

    @property
    def config(self) -> ScorerConfig:
        return self._scorer.config

    def analyze(self, text: str) -> SentimentResult:
        """
        Get the sentiment of one message.

        Args:
            text: Raw chat message; empty or whitespace-only is allowed

        Returns:
            SentimentResult (the cached instance on a repeat)

        Raises:
            InvalidInputError: If text is not a string
        """
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Message must be a string, got {type(text).__name__}",
                received_type=type(text).__name__,
            )

        self._stats["analyze_calls"] += 1
        key = normalize_key(text)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._scorer.score(text)
        self._cache.put(key, result)
        self._stats["messages_scored"] += 1
        logger.debug(
            f"Scored message (len={len(key)}): {result.label.value} "
            f"score={result.score:.3f} magnitude={result.magnitude:.3f}"
        )
        return result

    def batch_analyze(self, texts: Sequence[str]) -> list[SentimentResult]:
        """
        Get the sentiment of many messages, in input order.

        Each message goes through analyze(), so a duplicate later in the
        batch reuses the first occurrence's cached result.

        Raises:
            InvalidInputError: If texts is a bare string or holds a non-string
        """
        if isinstance(texts, (str, bytes)):
            raise InvalidInputError(
                "batch_analyze expects a sequence of messages, not a single string",
                received_type=type(texts).__name__,
            )

        self._stats["batch_calls"] += 1
        results: list[SentimentResult] = []
        for index, text in enumerate(texts):
            if not isinstance(text, str):
                raise InvalidInputError(
                    f"Message at index {index} must be a string, got {type(text).__name__}",
                    received_type=type(text).__name__,
                    index=index,
                )
            results.append(self.analyze(text))
        return results

    def clear_cache(self) -> None:
        """Empty the result cache. Idempotent."""
        self._cache.clear()

    def cache_stats(self) -> dict[str, int]:
        """Current cache entry count. Never computes or mutates."""
        return {"size": self._cache.size}

    def get_stats(self) -> dict[str, Any]:
        """Get engine and cache statistics."""
        return {
            **self._stats,
            "cache": self._cache.stats(),
        }


# Singleton instance for convenience
_default_engine: Optional[SentimentEngine] = None


def get_engine() -> SentimentEngine:
    """Get the default sentiment engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = SentimentEngine()
    return _default_engine


def set_engine(engine: SentimentEngine) -> None:
    """Replace the default sentiment engine."""
    global _default_engine
    _default_engine = engine


def reset_engine() -> None:
    """Drop the default engine; the next call builds a fresh one."""
    global _default_engine
    _default_engine = None


def analyze_sentiment(message: str) -> SentimentResult:
    """Analyze one message with the default engine."""
    return get_engine().analyze(message)


def batch_analyze_sentiment(messages: Sequence[str]) -> list[SentimentResult]:
    """Analyze many messages, in order, with the default engine."""
    return get_engine().batch_analyze(messages)


def clear_sentiment_cache() -> None:
    """Clear the default engine's cache."""
    get_engine().clear_cache()


def get_cache_stats() -> dict[str, int]:
    """Get the default engine's cache size."""
    return get_engine().cache_stats()
