"""
核心層

資料模型、事件型別、例外與外部協作者介面。
"""

from .errors import (
    DatasetError,
    LexiconIntegrityError,
    RecognitionUnavailableError,
    WordPartsError,
)
from .events import RecognitionEvent, RecognitionEventHandler, RecognitionState, SpeechEvent
from .models import (
    ALL_GRADES,
    AXES,
    FOCUSES,
    GRADE_BANDS,
    LexiconEntry,
    MorphologyDataset,
    QuizOption,
    Segment,
    SessionConfig,
    SessionProgress,
    WordCard,
    join_segments,
)

__all__ = [
    "WordPartsError",
    "LexiconIntegrityError",
    "DatasetError",
    "RecognitionUnavailableError",
    "RecognitionEvent",
    "RecognitionEventHandler",
    "RecognitionState",
    "SpeechEvent",
    "ALL_GRADES",
    "AXES",
    "FOCUSES",
    "GRADE_BANDS",
    "LexiconEntry",
    "MorphologyDataset",
    "QuizOption",
    "Segment",
    "SessionConfig",
    "SessionProgress",
    "WordCard",
    "join_segments",
]
