"""
Tests for the immutable lexicon.

Tests cover:
- Default word lists, modifiers and negations
- Read-only views
- Extension without touching the original
- YAML loading and malformed files
"""

import pytest

from chat_sentiment import SentimentEngine
from chat_sentiment.exceptions import LexiconError
from chat_sentiment.lexicon import DEFAULT_LEXICON, Lexicon
from chat_sentiment.models import Label, LexiconEntry, ModifierKind


# =============================================================
# TEST: Default lexicon
# =============================================================

class TestDefaultLexicon:
    """Built-in chat lexicon."""

    def test_default_is_shared_instance(self):
        assert Lexicon.default() is DEFAULT_LEXICON

    def test_polarity_entries(self):
        assert DEFAULT_LEXICON.get("good") == LexiconEntry(token="good", weight=1.0)
        assert DEFAULT_LEXICON.weight("terrible") == -1.0
        assert DEFAULT_LEXICON.weight("stream") == 0.0

    def test_modifier_entries(self):
        entry = DEFAULT_LEXICON.get("very")

        assert entry.is_modifier
        assert not entry.is_polar
        assert entry.modifier == ModifierKind.AMPLIFIER
        assert DEFAULT_LEXICON.modifier("slightly") == ModifierKind.DIMINISHER

    def test_negations(self):
        for token in ["not", "never", "no", "don't", "isn't"]:
            assert DEFAULT_LEXICON.is_negation(token)
        assert not DEFAULT_LEXICON.is_negation("good")

    def test_unknown_token(self):
        assert DEFAULT_LEXICON.get("xyzzy") is None
        assert "xyzzy" not in DEFAULT_LEXICON

    def test_views_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_LEXICON.weights["good"] = -1.0
        with pytest.raises(TypeError):
            DEFAULT_LEXICON.emotes["kappa"] = -1.0

    def test_match_emotes_counts_every_occurrence(self):
        assert DEFAULT_LEXICON.match_emotes("kekw kekw") == [0.7, 0.7]
        assert DEFAULT_LEXICON.match_emotes("no emotes here") == []

    def test_emotes_need_word_boundaries(self):
        # "Pog" must not match inside "PogChamp"
        assert DEFAULT_LEXICON.match_emotes("pogchamp") == [0.8]


# =============================================================
# TEST: Extension
# =============================================================

class TestExtend:
    """Lexicon.extend returns a new lexicon."""

    def test_extend_does_not_mutate_original(self):
        extended = DEFAULT_LEXICON.extend(positive=["based"])

        assert "based" in extended
        assert "based" not in DEFAULT_LEXICON
        assert extended is not DEFAULT_LEXICON

    def test_extend_casefolds_tokens(self):
        extended = DEFAULT_LEXICON.extend(positive=["Based"], emotes={"Copium": -0.3})

        assert extended.weight("based") == 1.0
        assert extended.match_emotes("copium") == [-0.3]

    def test_extend_overrides_weight(self):
        extended = DEFAULT_LEXICON.extend(weights={"crazy": -1.0})

        assert extended.weight("crazy") == -1.0
        assert DEFAULT_LEXICON.weight("crazy") == 1.0

    def test_extend_adds_negations_and_modifiers(self):
        extended = DEFAULT_LEXICON.extend(negations=["aint"], amplifiers=["mad"])

        assert extended.is_negation("aint")
        assert extended.modifier("mad") == ModifierKind.AMPLIFIER

    def test_extend_symbol_emotes(self):
        extended = DEFAULT_LEXICON.extend(emotes={"<3": 0.5, ":)": 0.5})

        assert extended.match_emotes("love you <3 :)") == [0.5, 0.5]
        assert extended.match_emotes("x<3y") == []

    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test_extend_rejects_non_finite_weight(self, weight):
        with pytest.raises(LexiconError):
            DEFAULT_LEXICON.extend(weights={"meh": weight})
        with pytest.raises(LexiconError):
            DEFAULT_LEXICON.extend(emotes={"copium": weight})

    def test_empty_lexicon_scores_nothing(self):
        engine = SentimentEngine(lexicon=Lexicon(weights={}))
        result = engine.analyze("good game, love it")

        assert result.label == Label.NEUTRAL
        assert result.score == 0
        assert result.magnitude == 0

    def test_engine_uses_extended_lexicon(self):
        engine = SentimentEngine(lexicon=DEFAULT_LEXICON.extend(negative=["mid"]))

        assert engine.analyze("this run is mid").label == Label.NEGATIVE


# =============================================================
# TEST: YAML loading
# =============================================================

class TestFromYaml:
    """Lexicon.from_yaml."""

    def test_loads_additions(self, lexicon_file):
        lexicon = Lexicon.from_yaml(lexicon_file)

        assert lexicon.weight("based") == 1.0
        assert lexicon.weight("mid") == -1.0
        assert lexicon.weight("washed") == -0.7
        assert lexicon.modifier("lowkey") == ModifierKind.DIMINISHER
        assert lexicon.weight("good") == 1.0

    def test_loads_on_top_of_custom_base(self, lexicon_file):
        base = Lexicon(weights={"hype": 1.0})
        lexicon = Lexicon.from_yaml(lexicon_file, base=base)

        assert lexicon.weight("hype") == 1.0
        assert lexicon.weight("good") == 0.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(LexiconError) as exc_info:
            Lexicon.from_yaml(tmp_path / "missing.yaml")

        assert exc_info.value.path.endswith("missing.yaml")

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- good\n- bad\n", encoding="utf-8")

        with pytest.raises(LexiconError):
            Lexicon.from_yaml(path)

    def test_word_list_must_be_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("positive: based\n", encoding="utf-8")

        with pytest.raises(LexiconError) as exc_info:
            Lexicon.from_yaml(path)

        assert exc_info.value.path == str(path)

    def test_weights_must_be_finite(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("weights:\n  meh: .nan\n", encoding="utf-8")

        with pytest.raises(LexiconError) as exc_info:
            Lexicon.from_yaml(path)

        assert exc_info.value.path == str(path)

    def test_symbol_emotes_from_yaml(self, tmp_path):
        path = tmp_path / "emotes.yaml"
        path.write_text("emotes:\n  \"<3\": 0.6\n", encoding="utf-8")

        lexicon = Lexicon.from_yaml(path)

        assert lexicon.match_emotes("nice <3") == [0.6]

    def test_weights_must_be_numeric(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("weights:\n  washed: very\n", encoding="utf-8")

        with pytest.raises(LexiconError):
            Lexicon.from_yaml(path)

    def test_empty_file_keeps_base(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        lexicon = Lexicon.from_yaml(path)

        assert len(lexicon) == len(DEFAULT_LEXICON)
