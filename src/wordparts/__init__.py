"""
wordparts - 英文單字拆解練習核心 (Word-Study Core)

核心概念：
- 單字拆成音節（怎麼唸）與詞素（什麼意思），參考詞庫優先、後備推測為輔
- 單獨朗讀拼寫片段前先改寫成較準確的朗讀文字
- 學生唸出單字後，以編輯距離容忍小誤差判斷是否唸對
- 產生不重複的釋義選擇題

官方入口（穩定 API）：
- `wordparts.WordDecompositionEngine`
- `wordparts.FuzzyVoiceMatcher`
- `wordparts.Speaker`
- `wordparts.QuizOptionBuilder`
- `wordparts.CardSelectionFilter`
"""

# =============================================================================
# 設定與資料模型
# =============================================================================
from wordparts.config import DEFAULT_CONFIG, TrainerConfig
from wordparts.core.errors import (
    DatasetError,
    LexiconIntegrityError,
    RecognitionUnavailableError,
    WordPartsError,
)
from wordparts.core.models import QuizOption, Segment, SessionConfig, SessionProgress, WordCard

# =============================================================================
# 核心元件
# =============================================================================
from wordparts.decomposition import ReferenceLexicon, WordDecompositionEngine
from wordparts.quiz import QuizOptionBuilder
from wordparts.selection import CardSelectionFilter, prepare_session, shuffle_cards
from wordparts.speech import FuzzyVoiceMatcher, PhoneticRenderer, Speaker, is_close_enough

# =============================================================================
# 資料集與日誌工具
# =============================================================================
from wordparts.dataset import load_dataset, parse_dataset
from wordparts.utils.logger import enable_debug_logging, get_logger

__all__ = [
    # Config / models
    "TrainerConfig",
    "DEFAULT_CONFIG",
    "WordCard",
    "Segment",
    "QuizOption",
    "SessionConfig",
    "SessionProgress",
    # Errors
    "WordPartsError",
    "LexiconIntegrityError",
    "DatasetError",
    "RecognitionUnavailableError",
    # Components
    "WordDecompositionEngine",
    "ReferenceLexicon",
    "PhoneticRenderer",
    "Speaker",
    "FuzzyVoiceMatcher",
    "is_close_enough",
    "QuizOptionBuilder",
    "CardSelectionFilter",
    "prepare_session",
    "shuffle_cards",
    # Dataset / logging
    "load_dataset",
    "parse_dataset",
    "get_logger",
    "enable_debug_logging",
]

__version__ = "0.1.0"
