"""
釋義選擇題測試
"""

import random

import pytest

from wordparts.quiz import QuizOptionBuilder, is_quiz_available


@pytest.fixture
def builder():
    return QuizOptionBuilder(rng=random.Random(7))


def texts(options):
    return sorted(o.text for o in options)


def check_options(options):
    assert sum(o.is_correct for o in options) == 1
    assert len(options) <= 4
    assert len({o.text for o in options}) == len(options)


class TestBuildOptions:
    def test_four_options_from_own_distractors(self, builder, make_card):
        card = make_card(
            "transport",
            student_friendly_meaning="to carry across",
            distractor_meanings=["to see clearly", "to break apart", "to write down"],
        )
        options = builder.build_options(card, [card])
        check_options(options)
        assert texts(options) == sorted(
            ["to carry across", "to see clearly", "to break apart", "to write down"]
        )
        correct = [o for o in options if o.is_correct]
        assert correct[0].text == "to carry across"

    def test_duplicate_of_correct_dropped_and_refilled(self, builder, make_card):
        """本卡干擾項含正解時丟掉，並從其他卡補一個"""
        card = make_card(
            "transport",
            student_friendly_meaning="to carry across",
            distractor_meanings=["to carry across", "to see clearly"],
        )
        other = make_card("vision", distractor_meanings=["to see clearly", "to break apart"])
        options = builder.build_options(card, [card, other])
        check_options(options)
        assert texts(options) == sorted(["to carry across", "to see clearly", "to break apart"])

    def test_refill_up_to_three(self, builder, make_card):
        card = make_card(
            "transport",
            student_friendly_meaning="to carry across",
            distractor_meanings=["to carry across", "to see clearly"],
        )
        others = [
            make_card("vision", distractor_meanings=["to see clearly", "to break apart"]),
            make_card("scribe", distractor_meanings=["to write down", "to build up"]),
        ]
        options = builder.build_options(card, [card] + others)
        check_options(options)
        assert texts(options) == sorted(
            ["to carry across", "to see clearly", "to break apart", "to write down"]
        )

    def test_other_cards_in_given_order(self, builder, make_card):
        card = make_card("transport", distractor_meanings=[])
        others = [
            make_card("a", distractor_meanings=["first", "second"]),
            make_card("b", distractor_meanings=["third", "fourth"]),
        ]
        assert builder.collect_distractors(card, others) == ["first", "second", "third"]

    def test_skips_current_card_in_pool(self, builder, make_card):
        card = make_card("transport", distractor_meanings=["to see clearly"])
        same_id = make_card("transport", id=card.id, distractor_meanings=["from myself"])
        assert builder.collect_distractors(card, [same_id]) == ["to see clearly"]

    def test_truncates_to_three(self, builder, make_card):
        card = make_card("transport", distractor_meanings=["a", "b", "c", "d", "e"])
        assert builder.collect_distractors(card, [card]) == ["a", "b", "c"]

    def test_own_duplicates_removed(self, builder, make_card):
        card = make_card("transport", distractor_meanings=["a", "a", "b"])
        assert builder.collect_distractors(card, [card]) == ["a", "b"]

    def test_degenerate_dataset(self, builder, make_card):
        card = make_card("transport", student_friendly_meaning="to carry across")
        options = builder.build_options(card, [card])
        assert len(options) == 1
        assert options[0].is_correct
        assert not is_quiz_available(options)

    def test_quiz_available(self, builder, make_card):
        card = make_card("transport", distractor_meanings=["to see clearly"])
        assert is_quiz_available(builder.build_options(card, [card]))


class TestShuffle:
    def test_correct_answer_lands_in_every_position(self, make_card):
        card = make_card(
            "transport",
            student_friendly_meaning="to carry across",
            distractor_meanings=["b", "c", "d"],
        )
        positions = set()
        for seed in range(200):
            options = QuizOptionBuilder(rng=random.Random(seed)).build_options(card, [card])
            positions.add(next(i for i, o in enumerate(options) if o.is_correct))
        assert positions == {0, 1, 2, 3}

    def test_same_seed_same_order(self, make_card):
        card = make_card("transport", distractor_meanings=["b", "c", "d"])
        first = QuizOptionBuilder(rng=random.Random(3)).build_options(card, [card])
        second = QuizOptionBuilder(rng=random.Random(3)).build_options(card, [card])
        assert first == second
