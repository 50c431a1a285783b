"""
Display helpers for chat rendering: colour and emoji per result.
"""

from .models import Label, SentimentResult


STRONG_MAGNITUDE = 0.7
MEDIUM_MAGNITUDE = 0.4

# (strong, medium, light)
POSITIVE_COLORS = ("#10b981", "#34d399", "#6ee7b7")  # emerald 500/400/300
NEGATIVE_COLORS = ("#ef4444", "#f87171", "#fca5a5")  # red 500/400/300
NEUTRAL_COLOR = "#9ca3af"  # gray-400

POSITIVE_EMOJIS = ("😄", "🙂", "😊")
NEGATIVE_EMOJIS = ("😠", "😟", "😐")
NEUTRAL_EMOJI = "😐"


def _band(magnitude: float) -> int:
    if magnitude > STRONG_MAGNITUDE:
        return 0
    if magnitude > MEDIUM_MAGNITUDE:
        return 1
    return 2


def sentiment_color(result: SentimentResult) -> str:
    """Hex colour for a message, shaded by magnitude."""
    if result.label == Label.POSITIVE:
        return POSITIVE_COLORS[_band(result.magnitude)]
    if result.label == Label.NEGATIVE:
        return NEGATIVE_COLORS[_band(result.magnitude)]
    return NEUTRAL_COLOR


def sentiment_emoji(result: SentimentResult) -> str:
    """Emoji indicator for a message."""
    if result.label == Label.POSITIVE:
        return POSITIVE_EMOJIS[_band(result.magnitude)]
    if result.label == Label.NEGATIVE:
        return NEGATIVE_EMOJIS[_band(result.magnitude)]
    return NEUTRAL_EMOJI
