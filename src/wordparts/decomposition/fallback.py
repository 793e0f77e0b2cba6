"""
後備拆解 (FallbackDecomposer)

單字不在參考詞庫時使用：
- 音節：解析 decoding_notes 的 "|" 提示
- 詞素：把 prefix / root / suffix 依序定位在單字中

任何一步不確定就退回整個單字為單一 segment，寧可不拆也不拆錯。
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from wordparts.core.models import Segment, WordCard, join_segments
from wordparts.utils.logger import get_logger

from .meanings import normalize_morpheme
from .notes_parser import parse_syllable_hint

# root 欄位可能寫成 "vis/vid" 或 "scrib\\script"，只取第一個拼法
_ALTERNATE_SPLIT = re.compile(r"[/\\]")


class _SplitFailed(Exception):
    """內部使用：定位失敗，改用整字"""


class FallbackDecomposer:
    """
    後備拆解器

    功能:
    - syllables(): 音節提示通過驗證才使用，否則整字
    - morphemes(): 左到右定位詞素片段；定位失敗、零長度片段、大小寫無法對應都視為失敗
    """

    def __init__(self) -> None:
        self._logger = get_logger("decomposition.fallback")

    def syllables(self, word: str, notes: Optional[str]) -> List[Segment]:
        hint = parse_syllable_hint(notes, word)
        if not hint.ok:
            self._logger.debug(f"[Fallback] '{word}' syllable hint rejected: {hint.reason}")
            return [Segment(text=word, role="syllable")]
        return [Segment(text=text, role="syllable") for text in hint.syllables]

    def morphemes(self, card: WordCard) -> List[Segment]:
        word = card.word
        fragments = self._fragments(card)
        if not fragments:
            return [Segment(text=word, role="root")]

        try:
            return self._locate(word, fragments)
        except _SplitFailed as exc:
            self._logger.debug(f"[Fallback] '{word}' morpheme split abandoned: {exc}")
            return [Segment(text=word, role="root")]

    @staticmethod
    def _fragments(card: WordCard) -> List[Tuple[str, str]]:
        fragments = []
        if card.prefix is not None:
            fragments.append((normalize_morpheme(card.prefix), "prefix"))
        if card.root is not None:
            first = _ALTERNATE_SPLIT.split(normalize_morpheme(card.root))[0]
            fragments.append((first.strip(), "root"))
        if card.suffix is not None:
            fragments.append((normalize_morpheme(card.suffix), "suffix"))
        return fragments

    @staticmethod
    def _locate(word: str, fragments: List[Tuple[str, str]]) -> List[Segment]:
        lowered = word.lower()
        if len(lowered) != len(word):
            raise _SplitFailed("lower-casing changes word length")

        pieces: List[Segment] = []
        pos = 0
        for key, role in fragments:
            if not key:
                raise _SplitFailed(f"empty {role} fragment")

            idx = lowered.find(key, pos)
            if idx == -1:
                raise _SplitFailed(f"{role} {key!r} not found after position {pos}")

            if idx > pos:
                pieces.append(Segment(text=word[pos:idx], role="root"))

            text = word[idx:idx + len(key)]
            if text.lower() != key:
                raise _SplitFailed(f"{role} {key!r} does not map back to {text!r}")
            pieces.append(Segment(text=text, role=role))
            pos = idx + len(key)

        if pos < len(word):
            pieces.append(Segment(text=word[pos:], role="suffix"))

        if join_segments(pieces).lower() != lowered:
            raise _SplitFailed("pieces do not rebuild the word")
        return pieces
