"""
全域配置模組

集中管理練習流程中經過調校的常數，並提供日誌開關。

使用方式:
    from wordparts.config import TrainerConfig

    config = TrainerConfig(min_cards=5, verbose=True)
    selector = CardSelectionFilter(config=config)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("wordparts").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌；False 時不動既有設定，交給標準 logging 控制
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass(frozen=True)
class TrainerConfig:
    """
    練習配置 (不可變)

    屬性:
        verbose: 是否開啟詳細日誌（所有使用此配置的元件都會生效）
        min_cards: 篩選後至少要保留的卡片數，不足時依序放寬條件
        quiz_size: 選擇題選項總數（1 個正解 + quiz_size - 1 個干擾項）
        match_ratio: 口說比對容許的編輯距離比例（相對目標字長）
        min_match_distance: 編輯距離門檻的下限
        language: 語音辨識 / 合成使用的語言標籤
        max_alternatives: 每批辨識結果最多的候選數
        interim_results: 是否接收未定稿 (interim) 的辨識結果
        continuous: 是否持續聆聽直到手動停止
        normal_rate: 一般語速
        slow_rate: 慢速朗讀語速
    """

    min_cards: int = 10
    quiz_size: int = 4
    match_ratio: float = 0.25
    min_match_distance: int = 1
    language: str = "en-US"
    max_alternatives: int = 3
    interim_results: bool = True
    continuous: bool = True
    normal_rate: float = 1.0
    slow_rate: float = 0.75
    verbose: bool = False

    def __post_init__(self):
        configure_logging(self.verbose)

    @property
    def max_distractors(self) -> int:
        return max(0, self.quiz_size - 1)


# 預設配置實例
DEFAULT_CONFIG = TrainerConfig()
