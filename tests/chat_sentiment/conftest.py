"""Shared fixtures for chat sentiment tests."""

import pytest

from chat_sentiment import SentimentEngine, reset_engine, set_config
from chat_sentiment.config import ScorerConfig
from chat_sentiment.lexicon import Lexicon


@pytest.fixture(autouse=True)
def fresh_default_engine():
    """Every test starts with an empty process-wide engine."""
    reset_engine()
    set_config(ScorerConfig())
    yield
    reset_engine()
    set_config(None)


@pytest.fixture
def engine():
    """Isolated engine with default lexicon and policy."""
    return SentimentEngine(lexicon=Lexicon.default(), config=ScorerConfig())


@pytest.fixture
def lexicon_file(tmp_path):
    """Channel lexicon YAML with a few slang additions."""
    path = tmp_path / "channel.yaml"
    path.write_text(
        "positive: [based, goated]\n"
        "negative: [mid]\n"
        "weights:\n"
        "  washed: -0.7\n"
        "diminishers: [lowkey]\n"
        "emotes:\n"
        "  Copium: -0.3\n",
        encoding="utf-8",
    )
    return path
