"""
共用 fixture
"""

import itertools

import pytest

from wordparts.core.models import WordCard


@pytest.fixture
def make_card():
    """建立測試用 WordCard，未指定的欄位給合理預設值"""
    counter = itertools.count(1)

    def _make(word="sample", **kwargs):
        kwargs.setdefault("id", f"card-{next(counter)}")
        kwargs.setdefault("student_friendly_meaning", f"meaning of {word}")
        kwargs.setdefault("grade_band", "3-4")
        if "distractor_meanings" in kwargs:
            kwargs["distractor_meanings"] = tuple(kwargs["distractor_meanings"])
        return WordCard(word=word, **kwargs)

    return _make
