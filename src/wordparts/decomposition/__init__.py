"""
單字拆解模組

- WordDecompositionEngine: 拆解入口（詞庫優先，後備推測）
- ReferenceLexicon: 參考詞庫
- FallbackDecomposer: 後備拆解器
- parse_syllable_hint: decoding_notes 音節提示解析
- meaning_of: 詞素意義查詢
"""

from .engine import WordDecompositionEngine
from .fallback import FallbackDecomposer
from .lexicon import ReferenceLexicon, get_default_lexicon
from .meanings import MORPHEME_MEANINGS, meaning_of, normalize_morpheme
from .notes_parser import SyllableHint, parse_syllable_hint

__all__ = [
    "WordDecompositionEngine",
    "FallbackDecomposer",
    "ReferenceLexicon",
    "get_default_lexicon",
    "MORPHEME_MEANINGS",
    "meaning_of",
    "normalize_morpheme",
    "SyllableHint",
    "parse_syllable_hint",
]
