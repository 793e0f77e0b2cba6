"""
語音模組

- PhoneticRenderer / to_speech_text: 拼寫片段 -> 朗讀文字
- Speaker: 語音合成包裝
- FuzzyVoiceMatcher: 口說比對狀態機
- is_close_enough / match_threshold: 編輯距離比對
"""

from .matching import is_close_enough, match_threshold, token_distances
from .phonetic import SPEECH_OVERRIDES, PhoneticRenderer, to_speech_text
from .recognition import FuzzyVoiceMatcher
from .synthesis import Speaker

__all__ = [
    "PhoneticRenderer",
    "SPEECH_OVERRIDES",
    "to_speech_text",
    "Speaker",
    "FuzzyVoiceMatcher",
    "is_close_enough",
    "match_threshold",
    "token_distances",
]
