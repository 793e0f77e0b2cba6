"""
單字拆解引擎 (WordDecompositionEngine)

參考詞庫優先，查無時交給 FallbackDecomposer。
輸出的 Segment 串接後一定等於原單字（不分大小寫）。

使用方式:
    from wordparts import WordDecompositionEngine

    engine = WordDecompositionEngine()
    engine.decompose("transport", "morpheme")
    # [Segment(text='trans', role='prefix', ...), Segment(text='port', role='root', ...)]
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional

from wordparts.core.component import LoggingComponent
from wordparts.core.models import AXES, Segment, WordCard

from .fallback import FallbackDecomposer
from .lexicon import ReferenceLexicon, get_default_lexicon
from .meanings import meaning_of


class WordDecompositionEngine(LoggingComponent):
    """
    拆解引擎

    職責:
    - 持有參考詞庫與後備拆解器
    - decompose(word, axis, card) 依維度回傳 Segment 序列
    - 詞素維度附上詞素意義
    """

    _component_name = "decomposition"

    def __init__(
        self,
        lexicon: Optional[ReferenceLexicon] = None,
        fallback: Optional[FallbackDecomposer] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._setup_component(verbose=verbose, on_timing=on_timing)
        self._lexicon = lexicon if lexicon is not None else get_default_lexicon()
        self._fallback = fallback or FallbackDecomposer()

    @property
    def lexicon(self) -> ReferenceLexicon:
        return self._lexicon

    def decompose(self, word: str, axis: str, card: Optional[WordCard] = None) -> List[Segment]:
        """
        拆解單字

        Args:
            word: 目標單字
            axis: "sound"（音節）或 "morpheme"（詞素）
            card: 單字卡；提供 decoding_notes 與 prefix/root/suffix 作為後備資訊

        Returns:
            List[Segment]

        Raises:
            ValueError: axis 不是 "sound" / "morpheme"
        """
        if axis not in AXES:
            raise ValueError(f"axis must be one of {AXES}, got {axis!r}")

        with self._log_timing(f"decompose({word}, {axis})"):
            segments = self._lexicon.segments(word, axis)
            if segments is not None:
                self._logger.debug(f"[Lexicon] hit '{word}' ({axis})")
            else:
                self._logger.debug(f"[Lexicon] miss '{word}' ({axis}), using fallback")
                segments = self._fallback_segments(word, axis, card)

        if axis == "morpheme":
            segments = [replace(seg, meaning=meaning_of(seg.text)) for seg in segments]
        return segments

    def decompose_card(self, card: WordCard, axis: str) -> List[Segment]:
        return self.decompose(card.word, axis, card)

    def _fallback_segments(self, word: str, axis: str, card: Optional[WordCard]) -> List[Segment]:
        if axis == "sound":
            notes = card.decoding_notes if card is not None else None
            return self._fallback.syllables(word, notes)

        if card is None or card.word.lower() != word.lower():
            return [Segment(text=word, role="root")]
        return self._fallback.morphemes(card)
