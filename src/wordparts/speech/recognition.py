"""
口說比對狀態機 (FuzzyVoiceMatcher)

持有目前的目標單字與一個辨識 session，把辨識器陸續送來的結果轉成
idle / listening / success / retry 四種狀態。

狀態轉移:
    idle ──start()──> listening
    listening ──任一候選命中──> success（立刻停止辨識）
    listening ──定稿且未命中──> retry
    listening ──辨識器結束且未命中──> retry
    listening ──辨識器錯誤──> idle
    listening ──stop()──> idle
    success / retry ──start()──> listening
    任何狀態 ──目標單字改變──> idle

每次 start() 都會先拆掉舊的 session；舊 session 晚到的回呼會被丟棄。

使用方式:
    matcher = FuzzyVoiceMatcher(recognizer, "interrupt", on_event=print)
    matcher.start()
    ...  # recognizer 透過回呼送來結果
    matcher.state  # "success"
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence

from wordparts.config import TrainerConfig
from wordparts.core.component import LoggingComponent
from wordparts.core.errors import RecognitionUnavailableError
from wordparts.core.events import RecognitionEventHandler, RecognitionState
from wordparts.core.protocols.speech import HypothesisBatch, RecognitionSession, SpeechRecognizer

from .matching import is_close_enough


class FuzzyVoiceMatcher(LoggingComponent):
    """
    口說比對器

    功能:
    - start(): 建立新的辨識 session 並進入 listening
    - stop(): 使用者手動停止；listening 時回到 idle
    - reset(): 清除轉錄與狀態
    - set_target(): 換單字時強制回到 idle
    - state / transcript: 目前狀態與最佳轉錄文字
    """

    _component_name = "speech.recognition"

    def __init__(
        self,
        recognizer: Optional[SpeechRecognizer],
        target_word: str = "",
        *,
        config: Optional[TrainerConfig] = None,
        on_event: Optional[RecognitionEventHandler] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._setup_component(config, on_event=on_event, verbose=verbose, on_timing=on_timing)
        self._recognizer = recognizer

        self._target = target_word
        self._state: RecognitionState = "idle"
        self._transcript = ""
        self._matched = False
        self._session: Optional[RecognitionSession] = None
        # 每個 session 一個世代編號，用來丟棄已拆掉 session 的回呼
        self._generation = 0

    @property
    def state(self) -> RecognitionState:
        return self._state

    @property
    def transcript(self) -> str:
        return self._transcript

    @property
    def target_word(self) -> str:
        return self._target

    @property
    def matched(self) -> bool:
        return self._matched

    @property
    def supported(self) -> bool:
        if self._recognizer is None:
            return False
        try:
            return bool(self._recognizer.is_supported())
        except Exception:
            self._logger.exception("recognizer.is_supported() 執行失敗")
            return False

    @property
    def is_listening(self) -> bool:
        return self._state == "listening"

    def set_target(self, target_word: str) -> None:
        if target_word == self._target:
            return
        self._logger.debug(f"[Target] '{self._target}' -> '{target_word}'")
        self.reset()
        self._target = target_word

    def start(self) -> bool:
        """
        開始一次聆聽

        Returns:
            bool: 是否成功啟動；辨識器不支援或啟動失敗時為 False

        Raises:
            RecognitionUnavailableError: 沒有注入任何辨識器
        """
        if self._recognizer is None:
            raise RecognitionUnavailableError("no speech recognizer configured")
        if not self.supported:
            self._logger.debug("speech recognition not supported, start() ignored")
            return False

        self._release_session()
        self._matched = False
        self._transcript = ""

        generation = self._generation
        config = self._config
        session = self._recognizer.create_session(
            language=config.language,
            interim_results=config.interim_results,
            continuous=config.continuous,
            max_alternatives=config.max_alternatives,
            on_result=lambda batches: self._handle_results(generation, batches),
            on_error=lambda exc: self._handle_error(generation, exc),
            on_end=lambda: self._handle_end(generation),
        )
        self._session = session
        self._set_state("listening", reason="start")

        try:
            session.start()
        except Exception as exc:
            self._handle_error(generation, exc)
            return False
        return True

    def stop(self) -> None:
        """使用者手動停止（可重複呼叫）"""
        self._release_session()
        if self._state == "listening":
            self._set_state("idle", reason="stopped")

    def reset(self) -> None:
        self._release_session()
        self._matched = False
        self._transcript = ""
        self._set_state("idle", reason="reset")

    # ------------------------------------------------------------------
    # 辨識器回呼
    # ------------------------------------------------------------------

    def _handle_results(self, generation: int, batches: Sequence[HypothesisBatch]) -> None:
        if generation != self._generation or self._matched:
            return
        if self._state != "listening" or self._session is None:
            return

        with self._log_timing("FuzzyVoiceMatcher.results"):
            for batch in batches:
                self._transcript = batch.best
                self._emit({"type": "transcript", "transcript": batch.best, "is_final": batch.is_final})

                if any(is_close_enough(self._target, alt, self._config) for alt in batch.alternatives):
                    self._matched = True
                    self._logger.debug(f"[Match] '{batch.best}' accepted for '{self._target}'")
                    # 命中就立刻停止，不等靜音偵測
                    self._release_session()
                    self._set_state("success", reason="match")
                    return

                if batch.is_final:
                    self._set_state("retry", reason="final_no_match")

        if self._state == "retry":
            self._release_session()

    def _handle_error(self, generation: int, exc: Exception) -> None:
        if generation != self._generation:
            return
        self._logger.warning(f"speech recognition error: {type(exc).__name__}: {exc}")
        self._emit(
            {
                "type": "error",
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            }
        )
        self._release_session()
        self._set_state("idle", reason="error")

    def _handle_end(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._session = None
        self._generation += 1
        if self._state == "listening" and not self._matched:
            self._set_state("retry", reason="ended")

    # ------------------------------------------------------------------
    # 內部工具
    # ------------------------------------------------------------------

    def _release_session(self) -> None:
        session = self._session
        self._session = None
        self._generation += 1
        if session is None:
            return
        try:
            session.stop()
        except Exception:
            self._logger.exception("recognition session stop() 執行失敗")

    def _set_state(self, state: RecognitionState, *, reason: str) -> None:
        previous = self._state
        if previous == state:
            return
        self._state = state
        self._logger.debug(f"[State] {previous} -> {state} ({reason})")
        self._emit({"type": "state_change", "previous": previous, "state": state, "reason": reason})

    def _event_context(self) -> Dict[str, Any]:
        return {"target": self._target}
