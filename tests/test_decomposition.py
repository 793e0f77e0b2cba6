"""
單字拆解測試

驗證：
1. 參考詞庫命中時直接使用
2. decoding_notes 音節提示的解析與驗證
3. prefix / root / suffix 的定位拆解
4. 任何不確定的情況退回整字
5. 輸出串接後等於原單字
"""

import pytest

from wordparts.core.models import join_segments
from wordparts.decomposition import (
    FallbackDecomposer,
    WordDecompositionEngine,
    meaning_of,
    parse_syllable_hint,
)
from wordparts.decomposition.lexicon_data import LEXICON_DATA


@pytest.fixture
def engine():
    return WordDecompositionEngine()


def pairs(segments):
    return [(s.text, s.role) for s in segments]


class TestLexiconPath:
    """參考詞庫優先"""

    def test_transport_morphemes(self, engine, make_card):
        """即使卡片欄位指向別的拆法，詞庫仍然優先"""
        card = make_card("transport", prefix="tra-", root="nsport")
        segments = engine.decompose("transport", "morpheme", card)
        assert pairs(segments) == [("trans", "prefix"), ("port", "root")]

    def test_interrupt_syllables(self, engine):
        segments = engine.decompose("interrupt", "sound")
        assert [s.text for s in segments] == ["in", "ter", "rupt"]
        assert segments[0].pronunciation_cue == "/in/"

    def test_morpheme_meanings_attached(self, engine):
        segments = engine.decompose("transport", "morpheme")
        assert [s.meaning for s in segments] == ["across", "carry"]

    def test_syllables_have_no_meaning(self, engine):
        assert all(s.meaning is None for s in engine.decompose("transport", "sound"))

    def test_invalid_axis(self, engine):
        with pytest.raises(ValueError, match="axis"):
            engine.decompose("transport", "letters")


class TestSyllableHint:
    """decoding_notes 音節提示解析"""

    def test_prefixed_hint(self):
        hint = parse_syllable_hint("Syllables: spec|u|la|tive. Stress on the first part.", "speculative")
        assert hint.ok
        assert hint.syllables == ("spec", "u", "la", "tive")

    def test_hint_with_spaces(self):
        hint = parse_syllable_hint("Break it up: spec | u | la | tive", "speculative")
        assert hint.syllables == ("spec", "u", "la", "tive")

    def test_hint_keeps_word_casing(self):
        hint = parse_syllable_hint("SPEC|U|LA|TIVE", "Speculative")
        assert hint.syllables == ("Spec", "u", "la", "tive")

    def test_no_notes(self):
        assert not parse_syllable_hint("", "speculative").ok
        assert not parse_syllable_hint(None, "speculative").ok

    def test_no_pipes(self):
        hint = parse_syllable_hint("Say it slowly.", "speculative")
        assert not hint.ok
        assert hint.reason == "no pipe-delimited hint"

    def test_hint_spells_other_word(self):
        hint = parse_syllable_hint("spe|cu|la|tiv", "speculative")
        assert not hint.ok
        assert "speculativ" in hint.reason

    def test_never_raises_on_garbage(self):
        assert not parse_syllable_hint("|||", "word").ok


class TestSoundFallback:
    def test_valid_hint_used(self, engine, make_card):
        card = make_card("speculative", decoding_notes="Syllables: spec|u|la|tive")
        segments = engine.decompose(card.word, "sound", card)
        assert [s.text for s in segments] == ["spec", "u", "la", "tive"]
        assert all(s.role == "syllable" and s.pronunciation_cue is None for s in segments)

    def test_invalid_hint_gives_whole_word(self, engine, make_card):
        card = make_card("speculative", decoding_notes="spec|ul|ive")
        assert pairs(engine.decompose(card.word, "sound", card)) == [("speculative", "syllable")]

    def test_no_card_gives_whole_word(self, engine):
        assert pairs(engine.decompose("speculative", "sound")) == [("speculative", "syllable")]


class TestMorphemeFallback:
    """prefix / root / suffix 定位"""

    def test_prefix_and_root(self, engine, make_card):
        card = make_card("preheat", prefix="pre-", root="heat")
        segments = engine.decompose(card.word, "morpheme", card)
        assert pairs(segments) == [("pre", "prefix"), ("heat", "root")]
        assert segments[0].meaning == "before"
        assert segments[1].meaning is None

    def test_all_three_fragments(self, make_card):
        card = make_card("rebuilding", prefix="re-", root="build", suffix="-ing")
        assert pairs(FallbackDecomposer().morphemes(card)) == [
            ("re", "prefix"),
            ("build", "root"),
            ("ing", "suffix"),
        ]

    def test_trailing_leftover_is_suffix(self, make_card):
        card = make_card("teachers", root="teach", suffix="-er")
        assert pairs(FallbackDecomposer().morphemes(card)) == [
            ("teach", "root"),
            ("er", "suffix"),
            ("s", "suffix"),
        ]

    def test_leading_leftover_is_root(self, make_card):
        card = make_card("airport", root="port")
        assert pairs(FallbackDecomposer().morphemes(card)) == [("air", "root"), ("port", "root")]

    def test_gap_between_fragments_is_root(self, make_card):
        card = make_card("speculative", root="spec", suffix="-ive")
        assert pairs(FallbackDecomposer().morphemes(card)) == [
            ("spec", "root"),
            ("ulat", "root"),
            ("ive", "suffix"),
        ]

    def test_root_alternates_use_first(self, make_card):
        card = make_card("evident", prefix="e-", root="vid/vis")
        assert pairs(FallbackDecomposer().morphemes(card)) == [
            ("e", "prefix"),
            ("vid", "root"),
            ("ent", "suffix"),
        ]

    def test_root_backslash_alternates(self, make_card):
        card = make_card("scribble", root="scrib\\script")
        assert pairs(FallbackDecomposer().morphemes(card))[0] == ("scrib", "root")

    def test_preserves_original_casing(self, make_card):
        card = make_card("Preheat", prefix=" PRE- ", root="Heat")
        assert pairs(FallbackDecomposer().morphemes(card)) == [("Pre", "prefix"), ("heat", "root")]

    def test_unlocatable_fragment_gives_whole_word(self, engine, make_card):
        """root 找不到時放棄結構化拆解"""
        card = make_card("speculative", prefix=None, root="spect", suffix="-ive")
        assert pairs(engine.decompose(card.word, "morpheme", card)) == [("speculative", "root")]

    def test_fragment_after_end_gives_whole_word(self, make_card):
        card = make_card("speculative", root="spec", suffix="-ion")
        assert pairs(FallbackDecomposer().morphemes(card)) == [("speculative", "root")]

    def test_out_of_order_fragments_give_whole_word(self, make_card):
        card = make_card("preheat", prefix="heat", root="pre")
        assert pairs(FallbackDecomposer().morphemes(card)) == [("preheat", "root")]

    def test_empty_fragment_gives_whole_word(self, make_card):
        card = make_card("preheat", prefix="-", root="heat")
        assert pairs(FallbackDecomposer().morphemes(card)) == [("preheat", "root")]

    def test_no_fragments(self, make_card):
        card = make_card("preheat")
        assert pairs(FallbackDecomposer().morphemes(card)) == [("preheat", "root")]

    def test_card_for_other_word_ignored(self, engine, make_card):
        card = make_card("preheat", prefix="pre-", root="heat")
        assert pairs(engine.decompose("overheat", "morpheme", card)) == [("overheat", "root")]


class TestConcatenation:
    """任何路徑的輸出都能串回原單字"""

    @pytest.mark.parametrize("word", sorted(LEXICON_DATA))
    @pytest.mark.parametrize("axis", ["sound", "morpheme"])
    def test_lexicon_words(self, engine, word, axis):
        assert join_segments(engine.decompose(word, axis)).lower() == word

    @pytest.mark.parametrize(
        "fields",
        [
            dict(word="speculative", root="spec", suffix="-ive", decoding_notes="spec|u|la|tive"),
            dict(word="Rebuilding", prefix="re-", root="build", suffix="-ing"),
            dict(word="evident", prefix="e-", root="vid/vis", decoding_notes="ev|i|dent"),
            dict(word="misread", prefix="mis", root="reed", decoding_notes="mis|red"),
            dict(word="preheat", prefix="-", root="", suffix=None),
        ],
    )
    @pytest.mark.parametrize("axis", ["sound", "morpheme"])
    def test_fallback_words(self, engine, make_card, fields, axis):
        card = make_card(**fields)
        segments = engine.decompose(card.word, axis, card)
        assert segments
        assert join_segments(segments).lower() == card.word.lower()


class TestMeanings:
    def test_meaning_lookup_normalizes(self):
        assert meaning_of("-able") == "able to be"
        assert meaning_of(" Trans ") == "across"
        assert meaning_of("heat") is None
