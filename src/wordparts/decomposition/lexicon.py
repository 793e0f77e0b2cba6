"""
參考詞庫 (ReferenceLexicon)

單字（小寫）-> 人工撰寫的拆解結果。唯讀查詢，命中時優先於任何推測。
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Union

from wordparts.core.models import LexiconEntry, Segment

from .lexicon_data import LEXICON_DATA

RawEntry = Union[LexiconEntry, Sequence[Sequence[str]]]


def _to_entry(raw: RawEntry) -> LexiconEntry:
    if isinstance(raw, LexiconEntry):
        return raw
    syllables, sound_cues, morphemes, morph_cues, morph_roles = raw
    return LexiconEntry(
        syllables=tuple(syllables),
        sound_cues=tuple(sound_cues),
        morphemes=tuple(morphemes),
        morph_cues=tuple(morph_cues),
        morph_roles=tuple(morph_roles),
    )


def _slice_like(word: str, chunks: Sequence[str]) -> List[str]:
    """依 chunks 的長度切 word，保留 word 原本的大小寫"""
    pieces = []
    pos = 0
    for chunk in chunks:
        pieces.append(word[pos:pos + len(chunk)])
        pos += len(chunk)
    return pieces


class ReferenceLexicon:
    """
    參考詞庫

    功能:
    - 以不分大小寫的單字查詢 LexiconEntry
    - 將條目轉成音節或詞素維度的 Segment 序列
    - validate() 檢查所有條目的不變式

    Args:
        data: 單字 -> 條目；None 時使用內建詞庫
        strict: 建立時立即驗證所有條目
    """

    def __init__(self, data: Optional[Mapping[str, RawEntry]] = None, *, strict: bool = False):
        source = LEXICON_DATA if data is None else data
        self._entries: Dict[str, LexiconEntry] = {
            word.lower(): _to_entry(raw) for word, raw in source.items()
        }
        if strict:
            self.validate()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, word: str) -> Optional[LexiconEntry]:
        return self._entries.get(word.lower())

    def validate(self) -> None:
        """任何一個條目違反不變式就拋出 LexiconIntegrityError"""
        for word, entry in self._entries.items():
            entry.validate(word)

    def segments(self, word: str, axis: str) -> Optional[List[Segment]]:
        """
        查詢並轉為 Segment 序列

        Args:
            word: 單字（不分大小寫）
            axis: "sound" 或 "morpheme"

        Returns:
            Optional[List[Segment]]: 查無單字時為 None
        """
        entry = self.get(word)
        if entry is None:
            return None

        if axis == "sound":
            texts = _slice_like(word, entry.syllables)
            return [
                Segment(text=text, role="syllable", pronunciation_cue=cue)
                for text, cue in zip(texts, entry.sound_cues)
            ]

        texts = _slice_like(word, entry.morphemes)
        return [
            Segment(text=text, role=role, pronunciation_cue=cue)
            for text, cue, role in zip(texts, entry.morph_cues, entry.morph_roles)
        ]


@lru_cache(maxsize=1)
def get_default_lexicon() -> ReferenceLexicon:
    """共用的內建詞庫實例（唯讀，可安全共用）"""
    return ReferenceLexicon()
