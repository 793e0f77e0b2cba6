"""
口說比對

以 Levenshtein 編輯距離判斷轉錄文字中是否有任何一個詞「夠接近」目標單字。
門檻 = max(1, floor(0.25 × 目標長度))，兩個數字都來自 TrainerConfig。
"""

import math
from typing import List, Optional, Tuple

import Levenshtein

from wordparts.config import DEFAULT_CONFIG, TrainerConfig


def match_threshold(target: str, config: Optional[TrainerConfig] = None) -> int:
    """
    可接受的最大編輯距離

    >>> match_threshold("interrupt")
    2
    >>> match_threshold("act")
    1
    """
    config = config or DEFAULT_CONFIG
    length = len(target.strip())
    return max(config.min_match_distance, math.floor(length * config.match_ratio))


def token_distances(target: str, transcript: str) -> List[Tuple[str, int]]:
    """轉錄文字以空白切詞，回傳每個詞與目標的編輯距離"""
    goal = target.lower().strip()
    return [(token, Levenshtein.distance(goal, token)) for token in transcript.lower().split()]


def is_close_enough(target: str, transcript: str, config: Optional[TrainerConfig] = None) -> bool:
    """
    轉錄文字中是否有任何一個詞在門檻內

    Args:
        target: 目標單字
        transcript: 一個辨識候選（可能含多個詞）
        config: 門檻設定

    Returns:
        bool
    """
    threshold = match_threshold(target, config)
    return any(distance <= threshold for _, distance in token_distances(target, transcript))
