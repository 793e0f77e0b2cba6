"""
事件模型（Event Model）

語音相關元件不直接操作 UI，狀態變化一律透過事件回呼（event handler）通知。

設計原則：
- 回呼拋出例外時只記錄，不影響練習流程。
- 事件內容只描述「發生了什麼」，不帶 UI 細節。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict

RecognitionState = Literal["idle", "listening", "success", "retry"]


class RecognitionEvent(TypedDict, total=False):
    type: Literal["state_change", "transcript", "error"]
    target: str

    # state_change
    previous: RecognitionState
    state: RecognitionState
    reason: str

    # transcript
    transcript: str
    is_final: bool

    # error
    exception_type: str
    exception_message: str


class SpeechEvent(TypedDict, total=False):
    type: Literal["start", "end", "error", "cancel"]
    text: str
    rate: float
    exception_message: str


RecognitionEventHandler = Callable[[RecognitionEvent], None]
SpeechEventHandler = Callable[[SpeechEvent], None]
