"""
Chat Sentiment - Configuration.

============================================================
TUNABLE SCORING POLICY
============================================================

Every numeric knob of the scorer lives here:
- Negation window width and flip/dampen factor
- Amplifier / diminisher multipliers
- Exclamation amplification
- Label thresholds

Configuration can be loaded from:
- Default values
- Environment variables (.env supported)
- YAML config file

============================================================
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


# Environment variable -> (field, cast)
_ENV_FIELDS: dict[str, tuple[str, type]] = {
    "SENTIMENT_NEGATION_WINDOW": ("negation_window", int),
    "SENTIMENT_NEGATION_FACTOR": ("negation_factor", float),
    "SENTIMENT_AMPLIFIER_MULTIPLIER": ("amplifier_multiplier", float),
    "SENTIMENT_DIMINISHER_MULTIPLIER": ("diminisher_multiplier", float),
    "SENTIMENT_EXCLAMATION_AMPLIFIER": ("exclamation_amplifier", float),
    "SENTIMENT_POSITIVE_THRESHOLD": ("positive_threshold", float),
    "SENTIMENT_NEGATIVE_THRESHOLD": ("negative_threshold", float),
}


# =============================================================
# SCORER POLICY
# =============================================================


@dataclass(frozen=True)
class ScorerConfig:
    """
    Scoring policy for the lexicon scorer.

    Labels:
    - POSITIVE:  score >  positive_threshold
    - NEGATIVE:  score <  negative_threshold
    - NEUTRAL:   otherwise
    """
    # Negation: the next N tokens after a marker are multiplied by the factor.
    # A negative factor flips the token's direction and dampens it.
    negation_window: int = 3
    negation_factor: float = -0.8

    # Applied to the next ordinary token only
    amplifier_multiplier: float = 1.5
    diminisher_multiplier: float = 0.5

    # Applied when a message has more than one "!"
    exclamation_amplifier: float = 1.2

    # Score is divided by max(words, 1) * normalization_factor
    normalization_factor: float = 1.5

    # Confidence saturates at this many words
    confidence_word_cap: int = 20

    positive_threshold: float = 0.15
    negative_threshold: float = -0.15

    def __post_init__(self) -> None:
        """Validate policy."""
        if self.negation_window < 0:
            raise ConfigurationError(
                "negation_window must be >= 0",
                field_name="negation_window",
                value=self.negation_window,
            )
        if self.negation_factor >= 0:
            raise ConfigurationError(
                "negation_factor must be negative so negated words cross zero",
                field_name="negation_factor",
                value=self.negation_factor,
            )
        if self.negative_threshold >= self.positive_threshold:
            raise ConfigurationError(
                "negative_threshold must be < positive_threshold",
                field_name="negative_threshold",
                value=self.negative_threshold,
            )
        if self.normalization_factor <= 0:
            raise ConfigurationError(
                "normalization_factor must be positive",
                field_name="normalization_factor",
                value=self.normalization_factor,
            )
        if self.confidence_word_cap < 1:
            raise ConfigurationError(
                "confidence_word_cap must be at least 1",
                field_name="confidence_word_cap",
                value=self.confidence_word_cap,
            )

    @classmethod
    def from_env(cls) -> "ScorerConfig":
        """
        Load configuration from environment variables.

        A .env file in the working directory is loaded first. Unset
        variables keep their defaults.
        """
        load_dotenv()

        overrides: dict[str, Any] = {}
        for env_name, (field_name, cast) in _ENV_FIELDS.items():
            raw = os.getenv(env_name)
            if raw:
                try:
                    overrides[field_name] = cast(raw)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid value for {env_name}: {raw!r}",
                        field_name=field_name,
                        value=raw,
                    ) from e

        return cls(**overrides)

    @classmethod
    def from_yaml(cls, path: Path, strict: bool = False) -> "ScorerConfig":
        """
        Load configuration from YAML file.

        An unreadable file falls back to defaults with a warning, unless
        strict is set, in which case it raises ConfigurationError.
        """
        try:
            import yaml
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            # Accept either a flat mapping or one nested under "scorer"
            if "scorer" in data:
                data = data["scorer"]

            known = {f.name for f in fields(cls)}
            unknown = set(data) - known
            if unknown:
                logger.warning(f"Ignoring unknown scorer config keys: {sorted(unknown)}")

            return cls(**{k: v for k, v in data.items() if k in known})

        except ConfigurationError:
            raise
        except Exception as e:
            if strict:
                raise ConfigurationError(
                    f"Failed to load YAML config from {path}: {e}",
                    details={"path": str(path)},
                ) from e
            logger.warning(f"Failed to load YAML config from {path}: {e}")
            return cls()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


# =============================================================
# GLOBAL CONFIG SINGLETON
# =============================================================


_default_config: Optional[ScorerConfig] = None


def get_config() -> ScorerConfig:
    """Get the global scorer configuration."""
    global _default_config
    if _default_config is None:
        _default_config = ScorerConfig.from_env()
    return _default_config


def set_config(config: Optional[ScorerConfig]) -> None:
    """Set the global scorer configuration (None restores lazy loading)."""
    global _default_config
    _default_config = config
