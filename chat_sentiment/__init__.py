"""
Chat Sentiment - Real-time sentiment for live stream chat messages.

This package provides:
- Lexicon scoring tuned for chat/gaming slang, emotes and emoji
- Windowed negation ("not good" flips to negative)
- Result cache keyed by trimmed, case-folded message
- Ordered batch evaluation and chat-wide aggregation

Usage:
    from chat_sentiment import analyze_sentiment, batch_analyze_sentiment

    result = analyze_sentiment("Amazing play GG")
    print(result.label.value, result.score, result.magnitude)

    results = batch_analyze_sentiment(["love this stream", "this is terrible"])

Output Schema:
- label: positive / neutral / negative
- score: -1.0 (very negative) to +1.0 (very positive)
- magnitude: 0.0 to 1.0, intensity regardless of direction
- confidence: 0.0 to 1.0
"""

from .aggregate import SentimentSummary, summarize_messages, summarize_results
from .cache import SentimentCache, normalize_key
from .config import ScorerConfig, get_config, set_config
from .display import sentiment_color, sentiment_emoji
from .engine import (
    SentimentEngine,
    analyze_sentiment,
    batch_analyze_sentiment,
    clear_sentiment_cache,
    get_cache_stats,
    get_engine,
    reset_engine,
    set_engine,
)
from .exceptions import (
    ChatSentimentError,
    ConfigurationError,
    InvalidInputError,
    LexiconError,
)
from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import Label, LexiconEntry, ModifierKind, SentimentResult
from .scorer import SentimentScorer, normalize_text, tokenize


__all__ = [
    # Public API
    "analyze_sentiment",
    "batch_analyze_sentiment",
    "clear_sentiment_cache",
    "get_cache_stats",

    # Engine
    "SentimentEngine",
    "get_engine",
    "set_engine",
    "reset_engine",

    # Scorer & Lexicon
    "SentimentScorer",
    "Lexicon",
    "DEFAULT_LEXICON",
    "normalize_text",
    "tokenize",

    # Cache
    "SentimentCache",
    "normalize_key",

    # Config
    "ScorerConfig",
    "get_config",
    "set_config",

    # Aggregation & display
    "SentimentSummary",
    "summarize_results",
    "summarize_messages",
    "sentiment_color",
    "sentiment_emoji",

    # Models
    "Label",
    "LexiconEntry",
    "ModifierKind",
    "SentimentResult",

    # Exceptions
    "ChatSentimentError",
    "ConfigurationError",
    "InvalidInputError",
    "LexiconError",
]


# Version
__version__ = "1.0.0"
