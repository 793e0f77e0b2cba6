"""
Speech Protocols

平台語音合成 / 語音辨識引擎的最小介面。
元件以注入方式取得實作，測試時可替換成假的 synthesizer / recognizer。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, Tuple, runtime_checkable


@dataclass(frozen=True)
class HypothesisBatch:
    """
    一批辨識結果

    Attributes:
        alternatives: 候選轉錄文字（依信心排序，第一個為最佳）
        is_final: 是否為定稿結果；False 表示 interim
    """

    alternatives: Tuple[str, ...]
    is_final: bool = False

    @classmethod
    def of(cls, *alternatives: str, is_final: bool = False) -> "HypothesisBatch":
        return cls(alternatives=tuple(alternatives), is_final=is_final)

    @property
    def best(self) -> str:
        return self.alternatives[0] if self.alternatives else ""


@dataclass(frozen=True)
class Voice:
    name: str
    lang: str
    default: bool = False


@dataclass(frozen=True)
class Utterance:
    text: str
    rate: float = 1.0
    lang: str = "en-US"
    voice: Optional[Voice] = None


@runtime_checkable
class RecognitionSession(Protocol):
    """單次聆聽的 handle；stop() 必須可重複呼叫"""

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


@runtime_checkable
class SpeechRecognizer(Protocol):
    def is_supported(self) -> bool:
        ...

    def create_session(
        self,
        *,
        language: str,
        interim_results: bool,
        continuous: bool,
        max_alternatives: int,
        on_result: Callable[[Sequence[HypothesisBatch]], None],
        on_error: Callable[[Exception], None],
        on_end: Callable[[], None],
    ) -> RecognitionSession:
        """建立（尚未開始的）辨識 session，結果透過回呼非同步送達"""
        ...


@runtime_checkable
class SpeechSynthesizer(Protocol):
    def is_available(self) -> bool:
        ...

    def get_voices(self) -> Sequence[Voice]:
        ...

    def speak(
        self,
        utterance: Utterance,
        on_start: Callable[[], None],
        on_end: Callable[[], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        """非同步朗讀（fire-and-forget）"""
        ...

    def cancel(self) -> None:
        ...
