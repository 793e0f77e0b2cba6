"""
釋義選擇題 (QuizOptionBuilder)

選項 = 1 個正解 + 最多 3 個干擾項，文字不重複，順序隨機。

干擾項來源順序:
1. 本卡作者撰寫的 distractor_meanings
2. 不足 3 個時，依序取其他卡片的 distractor_meanings
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from wordparts.config import DEFAULT_CONFIG, TrainerConfig
from wordparts.core.models import QuizOption, WordCard
from wordparts.utils.logger import get_logger


class QuizOptionBuilder:
    """
    選項產生器

    Args:
        config: quiz_size 決定干擾項上限
        rng: 洗牌用的亂數產生器；測試時可傳入固定種子
    """

    def __init__(self, config: Optional[TrainerConfig] = None, rng: Optional[random.Random] = None):
        self._config = config or DEFAULT_CONFIG
        self._rng = rng or random.Random()
        self._logger = get_logger("quiz")

    def collect_distractors(self, card: WordCard, all_cards: Sequence[WordCard]) -> List[str]:
        """依來源順序收集不重複的干擾項（不含正解）"""
        limit = self._config.max_distractors
        seen = {card.student_friendly_meaning}
        pool: List[str] = []

        for text in card.distractor_meanings:
            if text not in seen:
                pool.append(text)
                seen.add(text)

        if len(pool) < limit:
            for other in all_cards:
                if other.id == card.id:
                    continue
                for text in other.distractor_meanings:
                    if text in seen:
                        continue
                    pool.append(text)
                    seen.add(text)
                    if len(pool) >= limit:
                        break
                if len(pool) >= limit:
                    break

        return pool[:limit]

    def build_options(self, card: WordCard, all_cards: Sequence[WordCard]) -> List[QuizOption]:
        """
        產生洗牌後的選項

        Returns:
            List[QuizOption]: 恰有一個 is_correct=True；只有正解時由呼叫端決定是否顯示
        """
        distractors = self.collect_distractors(card, all_cards)
        if not distractors:
            self._logger.debug(f"[Quiz] no distractors available for '{card.word}'")

        options = [QuizOption(text=card.student_friendly_meaning, is_correct=True)]
        options.extend(QuizOption(text=text, is_correct=False) for text in distractors)
        self._rng.shuffle(options)
        return options


def is_quiz_available(options: Sequence[QuizOption]) -> bool:
    """少於兩個選項時沒有可作答的題目"""
    return len(options) >= 2
