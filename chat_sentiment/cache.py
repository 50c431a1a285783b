"""
Sentiment Result Cache - Memoizes scorer output by normalized message.

Lifecycle:
- Created empty with its engine
- Grows by one entry per distinct normalized message
- Emptied only by clear() - no TTL, no size-based eviction

Single-threaded by contract. Run one engine (and cache) per worker if
the host ever becomes multi-threaded.
"""

import logging
from typing import Any, Optional

from .models import SentimentResult
from .scorer import normalize_text


logger = logging.getLogger(__name__)


def normalize_key(text: str) -> str:
    """Cache key for a message: trimmed and case-folded."""
    return normalize_text(text)


class SentimentCache:
    """
    Unbounded normalized-key -> SentimentResult map.

    Usage:
        cache = SentimentCache()
        key = normalize_key("  GG  ")
        result = cache.get(key)
        if result is None:
            result = scorer.score("  GG  ")
            cache.put(key, result)
    """

    def __init__(self) -> None:
        self._entries: dict[str, SentimentResult] = {}

        # Statistics
        self._stats = {
            "hits": 0,
            "misses": 0,
            "clears": 0,
        }

    def get(self, key: str) -> Optional[SentimentResult]:
        """Get the stored result for a key, counting the hit or miss."""
        result = self._entries.get(key)
        if result is None:
            self._stats["misses"] += 1
        else:
            self._stats["hits"] += 1
        return result

    def put(self, key: str, result: SentimentResult) -> None:
        """Store a result; the last write for a key wins."""
        self._entries[key] = result

    def clear(self) -> None:
        """Remove every entry."""
        removed = len(self._entries)
        self._entries.clear()
        self._stats["clears"] += 1
        logger.info(f"Sentiment cache cleared ({removed} entries removed)")

    @property
    def size(self) -> int:
        return len(self._entries)

    def stats(self) -> dict[str, Any]:
        """Get cache statistics. Read-only."""
        lookups = self._stats["hits"] + self._stats["misses"]
        hit_rate = self._stats["hits"] / lookups * 100 if lookups > 0 else 0

        return {
            **self._stats,
            "size": self.size,
            "hit_rate_pct": round(hit_rate, 2),
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
