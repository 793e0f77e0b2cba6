"""
卡片篩選 (CardSelectionFilter)

依年級區間與焦點篩選卡片，結果不足 min_cards 時依序放寬:
1. 年級 + 焦點
2. 只套焦點（忽略年級）
3. 全部卡片

先放棄年級，再放棄焦點，永遠不會讓學生只剩太少卡片。
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Sequence

from wordparts.config import DEFAULT_CONFIG, TrainerConfig
from wordparts.core.models import ALL_GRADES, FOCUSES, SessionConfig, WordCard
from wordparts.utils.logger import get_logger, log_timing

_FOCUS_PREDICATES: Dict[str, Callable[[WordCard], bool]] = {
    "Roots": lambda card: card.root is not None,
    "Prefixes": lambda card: card.prefix is not None,
    "Suffixes": lambda card: card.suffix is not None,
    "Mixed": lambda card: True,
}


def apply_focus(cards: Sequence[WordCard], focus: str) -> List[WordCard]:
    if focus not in FOCUSES:
        raise ValueError(f"focus must be one of {FOCUSES}, got {focus!r}")
    predicate = _FOCUS_PREDICATES[focus]
    return [card for card in cards if predicate(card)]


def apply_grade_band(cards: Sequence[WordCard], grade_band: str) -> List[WordCard]:
    if grade_band == ALL_GRADES:
        return list(cards)
    return [card for card in cards if card.grade_band == grade_band]


class CardSelectionFilter:
    def __init__(self, config: Optional[TrainerConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._logger = get_logger("selection")

    @property
    def min_cards(self) -> int:
        return self._config.min_cards

    @log_timing("CardSelectionFilter.select")
    def select(self, all_cards: Sequence[WordCard], grade_band: str, focus: str) -> List[WordCard]:
        """
        篩選卡片

        Args:
            all_cards: 完整卡片集
            grade_band: "3-4" / "5-6" / "7-8" 或 "All"
            focus: "Roots" / "Prefixes" / "Suffixes" / "Mixed"

        Returns:
            List[WordCard]: 保持原本順序；洗牌由呼叫端另外處理
        """
        by_focus = apply_focus(apply_grade_band(all_cards, grade_band), focus)
        if len(by_focus) >= self.min_cards:
            return by_focus

        focus_only = apply_focus(all_cards, focus)
        if len(focus_only) >= self.min_cards:
            self._logger.debug(
                f"[Select] {grade_band}/{focus} gave {len(by_focus)} cards, dropped grade band "
                f"({len(focus_only)} cards)"
            )
            return focus_only

        self._logger.debug(
            f"[Select] {grade_band}/{focus} gave {len(by_focus)} cards, returning all {len(all_cards)}"
        )
        return list(all_cards)


def shuffle_cards(cards: Sequence[WordCard], rng: Optional[random.Random] = None) -> List[WordCard]:
    """回傳洗牌後的新 list（不修改輸入）"""
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def prepare_session(
    all_cards: Sequence[WordCard],
    session: SessionConfig,
    *,
    config: Optional[TrainerConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[WordCard]:
    """篩選後洗牌，得到本次練習的卡片順序"""
    selected = CardSelectionFilter(config).select(all_cards, session.grade_band, session.focus)
    return shuffle_cards(selected, rng)
