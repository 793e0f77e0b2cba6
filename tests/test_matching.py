"""
編輯距離比對測試
"""

import pytest

from wordparts.config import TrainerConfig
from wordparts.speech import is_close_enough, match_threshold, token_distances


class TestThreshold:
    @pytest.mark.parametrize(
        "target, expected",
        [("act", 1), ("port", 1), ("report", 1), ("portable", 2), ("interrupt", 2), ("transportation", 3)],
    )
    def test_threshold(self, target, expected):
        assert match_threshold(target) == expected

    def test_custom_ratio(self):
        assert match_threshold("interrupt", TrainerConfig(match_ratio=0.5)) == 4


class TestIsCloseEnough:
    @pytest.mark.parametrize("target", ["act", "interrupt", "transportation", "a"])
    def test_exact_target_matches(self, target):
        assert is_close_enough(target, target)

    def test_one_edit(self):
        assert is_close_enough("interrupt", "interupt")

    def test_boundary_distance_matches(self):
        """interrupted 與 interrupt 距離 2 = 門檻"""
        assert is_close_enough("interrupt", "interrupted")

    def test_beyond_threshold(self):
        assert not is_close_enough("interrupt", "interruptedly")

    def test_appended_letter(self):
        assert is_close_enough("cat", "catz")
        assert not is_close_enough("cat", "catzz")

    def test_any_token_in_phrase(self):
        assert is_close_enough("interrupt", "I said Interrupt just now")

    def test_case_and_whitespace(self):
        assert is_close_enough(" Interrupt ", "INTERRUPT")

    def test_empty_transcript(self):
        assert not is_close_enough("interrupt", "")
        assert not is_close_enough("interrupt", "   ")

    def test_token_distances(self):
        assert token_distances("port", "sport Port") == [("sport", 1), ("port", 0)]
