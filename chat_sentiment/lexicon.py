"""
Chat Sentiment Lexicon - Immutable token weights for chat/gaming text.

The lexicon is built once and never mutated. Extending it (for tests or
a channel-specific YAML file) returns a new Lexicon, so nothing holding
a reference to the old one sees the change.

Contents:
- Polarity words: +1.0 / -1.0 (custom weights allowed)
- Modifiers: amplifiers ("very") and diminishers ("slightly")
- Negation markers: "not", "never", "don't", ...
- Emotes: Twitch/BTTV emote names with their own weights
- Emoji: +/-0.5 each
"""

import logging
import math
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

import yaml

from .exceptions import LexiconError
from .models import LexiconEntry, ModifierKind


logger = logging.getLogger(__name__)


# Polarity words - optimized for chat/gaming context
POSITIVE_WORDS: frozenset[str] = frozenset({
    "love", "great", "good", "awesome", "amazing", "excellent", "fantastic", "wonderful",
    "best", "perfect", "nice", "happy", "joy", "beautiful", "brilliant", "cool",
    "epic", "pog", "poggers", "pogchamp", "hype", "hyped", "fire", "lit", "clutch",
    "gg", "wp", "gj", "gz", "gratz", "congrats", "win", "won", "winning",
    "lol", "lmao", "funny", "hilarious", "like", "liked", "appreciate", "thanks",
    "thank", "helpful", "useful", "impressive", "skilled", "clean", "smooth",
    "gorgeous", "stunning", "incredible", "insane", "crazy", "wild", "sick",
})

NEGATIVE_WORDS: frozenset[str] = frozenset({
    "bad", "terrible", "awful", "hate", "worst", "horrible", "trash", "garbage",
    "stupid", "dumb", "idiot", "sucks", "boring", "lame", "cringe", "yikes",
    "sad", "angry", "mad", "annoying", "irritating", "frustrating", "fail", "failed",
    "toxic", "troll", "trolling", "grief", "griefing", "throw", "throwing", "threw",
    "inting", "int", "feeding", "noob", "scrub", "bot", "reported", "report",
    "ban", "banned", "timeout", "muted", "wrong", "mistake", "error", "mess",
    "disappointing", "disappointed", "embarrassing", "shameful", "pathetic",
    "useless", "pointless", "waste", "wasted", "rip", "dead", "ded",
})

AMPLIFIERS: frozenset[str] = frozenset({
    "very", "really", "extremely", "super", "incredibly", "absolutely", "totally",
    "completely", "utterly", "so", "too", "mega", "ultra", "hella",
})

DIMINISHERS: frozenset[str] = frozenset({
    "slightly", "somewhat", "kinda", "sorta", "mildly", "fairly",
})

NEGATIONS: frozenset[str] = frozenset({
    "not", "no", "never", "neither", "none", "nobody", "nothing", "nowhere",
    "n't", "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "couldn't",
    "shouldn't", "isn't", "aren't", "wasn't", "weren't",
})

# Matched case-insensitively on word boundaries
EMOTE_WEIGHTS: dict[str, float] = {
    # Positive emotes
    "PogChamp": 0.8, "Pog": 0.8, "PogU": 0.8, "POGGERS": 0.9,
    "Kreygasm": 0.7, "Kappa": 0.3, "LUL": 0.6, "LULW": 0.6, "OMEGALUL": 0.7,
    "PepeLaugh": 0.5, "KEKW": 0.7, "Clap": 0.6, "GG": 0.7, "EZ": 0.5,
    "widepeepoHappy": 0.8, "peepoHappy": 0.7, "Okayge": 0.4,
    "CoolCat": 0.5, "CoolStoryBob": 0.3, "FeelsGoodMan": 0.7, "FeelsAmazingMan": 0.8,
    "catJAM": 0.6, "JAM": 0.6, "PauseChamp": 0.4, "TriHard": 0.3,
    "KappaPride": 0.5, "VoHiYo": 0.4, "SourPls": 0.5, "RareParrot": 0.6,

    # Negative emotes
    "BibleThump": -0.5, "FeelsBadMan": -0.6, "FeelsWeirdMan": -0.4, "WeirdChamp": -0.5,
    "PepeHands": -0.7, "Sadge": -0.6, "FeelsDankMan": -0.3, "monkaW": -0.5,
    "monkaS": -0.4, "ResidentSleeper": -0.4, "DansGame": -0.3,
    "NotLikeThis": -0.5, "FailFish": -0.4, "SMOrc": -0.2,
}

POSITIVE_EMOJI: frozenset[str] = frozenset({
    "😊", "😄", "😃", "😀", "🙂", "😍", "🥰", "😻", "💕", "❤", "🔥", "💯", "✨", "🎉", "👏", "🙌",
})

NEGATIVE_EMOJI: frozenset[str] = frozenset({
    "😢", "😭", "😞", "😔", "😟", "😠", "😡", "💀", "☠", "👎",
})

EMOJI_WEIGHT = 0.5


class Lexicon:
    """
    Read-only token lookup for the scorer.

    All tokens are stored case-folded. Lookups are expected to receive
    already case-folded tokens.

    Usage:
        lexicon = Lexicon.default()
        entry = lexicon.get("good")        # LexiconEntry(token="good", weight=1.0)
        custom = lexicon.extend(positive=["based"], negative=["mid"])
    """

    def __init__(
        self,
        weights: Mapping[str, float],
        modifiers: Optional[Mapping[str, ModifierKind]] = None,
        negations: Iterable[str] = (),
        emotes: Optional[Mapping[str, float]] = None,
        emoji: Optional[Mapping[str, float]] = None,
    ) -> None:
        self._weights = MappingProxyType(_finite_map(weights, "weights"))
        self._modifiers = MappingProxyType(
            {k.casefold(): v for k, v in (modifiers or {}).items()}
        )
        self._negations = frozenset(n.casefold() for n in negations)
        self._emotes = MappingProxyType(_finite_map(emotes or {}, "emotes"))
        self._emoji = MappingProxyType(_finite_map(emoji or {}, "emoji", fold=False))

        self._emote_patterns = tuple(
            (re.compile(rf"(?<!\w){re.escape(name)}(?!\w)", re.IGNORECASE), weight)
            for name, weight in self._emotes.items()
        )

    # ─────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────

    @classmethod
    def default(cls) -> "Lexicon":
        """Get the built-in chat lexicon (shared instance)."""
        return DEFAULT_LEXICON

    @classmethod
    def from_yaml(
        cls,
        path: Union[str, Path],
        base: Optional["Lexicon"] = None,
    ) -> "Lexicon":
        """
        Load lexicon additions from a YAML file on top of base.

        Expected shape (every key optional):

            positive: [based, goated]
            negative: [mid]
            weights: {washed: -0.7}
            amplifiers: [mad]
            diminishers: [lowkey]
            negations: [aint]
            emotes: {Copium: -0.3}
            emoji: {"😎": 0.5}
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LexiconError(f"Failed to read lexicon file: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            raise LexiconError("Lexicon file must contain a mapping", path=str(path))

        if base is None:
            base = cls.default()
        try:
            lexicon = base.extend(
                positive=_str_list(data, "positive"),
                negative=_str_list(data, "negative"),
                weights=_float_map(data, "weights"),
                amplifiers=_str_list(data, "amplifiers"),
                diminishers=_str_list(data, "diminishers"),
                negations=_str_list(data, "negations"),
                emotes=_float_map(data, "emotes"),
                emoji=_float_map(data, "emoji"),
            )
        except LexiconError as e:
            e.path = str(path)
            raise

        logger.info(f"Loaded lexicon from {path}: {len(lexicon)} tokens")
        return lexicon

    def extend(
        self,
        positive: Iterable[str] = (),
        negative: Iterable[str] = (),
        weights: Optional[Mapping[str, float]] = None,
        amplifiers: Iterable[str] = (),
        diminishers: Iterable[str] = (),
        negations: Iterable[str] = (),
        emotes: Optional[Mapping[str, float]] = None,
        emoji: Optional[Mapping[str, float]] = None,
    ) -> "Lexicon":
        """Return a new lexicon with additions; later values win."""
        new_weights = dict(self._weights)
        new_weights.update({w: 1.0 for w in positive})
        new_weights.update({w: -1.0 for w in negative})
        new_weights.update(weights or {})

        new_modifiers = dict(self._modifiers)
        new_modifiers.update({w: ModifierKind.AMPLIFIER for w in amplifiers})
        new_modifiers.update({w: ModifierKind.DIMINISHER for w in diminishers})

        new_emotes = dict(self._emotes)
        new_emotes.update(emotes or {})

        new_emoji = dict(self._emoji)
        new_emoji.update(emoji or {})

        return Lexicon(
            weights=new_weights,
            modifiers=new_modifiers,
            negations=self._negations | frozenset(negations),
            emotes=new_emotes,
            emoji=new_emoji,
        )

    # ─────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────

    def get(self, token: str) -> Optional[LexiconEntry]:
        """Get the entry for a token, or None."""
        weight = self._weights.get(token)
        modifier = self._modifiers.get(token)
        if weight is None and modifier is None:
            return None
        return LexiconEntry(token=token, weight=weight or 0.0, modifier=modifier)

    def weight(self, token: str) -> float:
        return self._weights.get(token, 0.0)

    def modifier(self, token: str) -> Optional[ModifierKind]:
        return self._modifiers.get(token)

    def is_negation(self, token: str) -> bool:
        return token in self._negations

    def match_emotes(self, text: str) -> list[float]:
        """Weights of every emote and emoji occurrence in text."""
        matches: list[float] = []
        for pattern, weight in self._emote_patterns:
            matches.extend(weight for _ in pattern.finditer(text))
        for symbol, weight in self._emoji.items():
            matches.extend(weight for _ in range(text.count(symbol)))
        return matches

    @property
    def weights(self) -> Mapping[str, float]:
        return self._weights

    @property
    def emotes(self) -> Mapping[str, float]:
        return self._emotes

    def __contains__(self, token: object) -> bool:
        return token in self._weights or token in self._modifiers

    def __len__(self) -> int:
        return len(set(self._weights) | set(self._modifiers))

    def __repr__(self) -> str:
        return (
            f"Lexicon(words={len(self._weights)}, modifiers={len(self._modifiers)}, "
            f"negations={len(self._negations)}, emotes={len(self._emotes)})"
        )


def _finite_map(
    values: Mapping[str, float], key: str, fold: bool = True
) -> dict[str, float]:
    result = {}
    for token, weight in values.items():
        weight = float(weight)
        if not math.isfinite(weight):
            raise LexiconError(f"'{key}' weight for {token!r} must be finite, got {weight}")
        result[token.casefold() if fold else token] = weight
    return result


def _str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise LexiconError(f"'{key}' must be a list of strings")
    return value


def _float_map(data: dict[str, Any], key: str) -> dict[str, float]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise LexiconError(f"'{key}' must be a mapping of token to weight")
    try:
        return {str(k): float(v) for k, v in value.items()}
    except (TypeError, ValueError) as e:
        raise LexiconError(f"'{key}' has a non-numeric weight: {e}") from e


def _build_default() -> Lexicon:
    weights: dict[str, float] = {w: 1.0 for w in POSITIVE_WORDS}
    weights.update({w: -1.0 for w in NEGATIVE_WORDS})

    modifiers: dict[str, ModifierKind] = {w: ModifierKind.AMPLIFIER for w in AMPLIFIERS}
    modifiers.update({w: ModifierKind.DIMINISHER for w in DIMINISHERS})

    emoji: dict[str, float] = {e: EMOJI_WEIGHT for e in POSITIVE_EMOJI}
    emoji.update({e: -EMOJI_WEIGHT for e in NEGATIVE_EMOJI})

    return Lexicon(
        weights=weights,
        modifiers=modifiers,
        negations=NEGATIONS,
        emotes=EMOTE_WEIGHTS,
        emoji=emoji,
    )


DEFAULT_LEXICON: Lexicon = _build_default()
