"""
朗讀元件 (Speaker)

包裝注入的 SpeechSynthesizer：
- 每次朗讀前先取消進行中的朗讀，同一時間最多一段語音
- 優先使用 en-US 語音，其次任何 en* 語音，都沒有就用預設
- speak_chunk() 先經過 PhoneticRenderer 改寫再朗讀
- 合成器不可用時所有操作都是 no-op
"""

from __future__ import annotations

from typing import Callable, Optional

from wordparts.config import TrainerConfig
from wordparts.core.component import LoggingComponent
from wordparts.core.events import SpeechEventHandler
from wordparts.core.protocols.speech import SpeechSynthesizer, Utterance, Voice

from .phonetic import PhoneticRenderer


class Speaker(LoggingComponent):
    _component_name = "speech.synthesis"

    def __init__(
        self,
        synthesizer: Optional[SpeechSynthesizer],
        renderer: Optional[PhoneticRenderer] = None,
        *,
        config: Optional[TrainerConfig] = None,
        slow: bool = False,
        on_event: Optional[SpeechEventHandler] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._setup_component(config, on_event=on_event, verbose=verbose, on_timing=on_timing)
        self._synthesizer = synthesizer
        self._renderer = renderer or PhoneticRenderer()
        self._slow = slow
        self._speaking = False
        self._utterance_id = 0

    @property
    def available(self) -> bool:
        if self._synthesizer is None:
            return False
        try:
            return bool(self._synthesizer.is_available())
        except Exception:
            self._logger.exception("synthesizer.is_available() 執行失敗")
            return False

    @property
    def speaking(self) -> bool:
        return self._speaking

    @property
    def slow(self) -> bool:
        return self._slow

    def toggle_slow(self) -> bool:
        self._slow = not self._slow
        return self._slow

    def speak(self, text: str, slow: Optional[bool] = None) -> bool:
        """
        朗讀文字

        Args:
            text: 要交給合成器的文字
            slow: 是否慢速；None 時使用目前的慢速開關

        Returns:
            bool: 是否已送出朗讀請求
        """
        if not self.available:
            return False

        self.cancel()

        use_slow = self._slow if slow is None else slow
        rate = self._config.slow_rate if use_slow else self._config.normal_rate
        utterance = Utterance(text=text, rate=rate, lang=self._config.language, voice=self._pick_voice())

        self._utterance_id += 1
        token = self._utterance_id
        try:
            self._synthesizer.speak(
                utterance,
                on_start=lambda: self._handle_start(token, utterance),
                on_end=lambda: self._handle_end(token, utterance),
                on_error=lambda exc: self._handle_error(token, utterance, exc),
            )
        except Exception as exc:
            self._handle_error(token, utterance, exc)
            return False

        self._logger.debug(f"[Speak] '{text}' rate={rate}")
        return True

    def speak_chunk(self, chunk: str, slow: Optional[bool] = None) -> bool:
        """朗讀單一拼寫片段（先改寫成朗讀文字）"""
        return self.speak(self._renderer.to_speech_text(chunk), slow=slow)

    def cancel(self) -> None:
        """取消進行中的朗讀（可重複呼叫）"""
        if self._synthesizer is None:
            return
        # 讓舊的 utterance 晚到的回呼失效
        self._utterance_id += 1
        try:
            self._synthesizer.cancel()
        except Exception:
            self._logger.exception("synthesizer.cancel() 執行失敗")
        if self._speaking:
            self._speaking = False
            self._emit({"type": "cancel"})

    def _pick_voice(self) -> Optional[Voice]:
        try:
            voices = list(self._synthesizer.get_voices())
        except Exception:
            self._logger.exception("synthesizer.get_voices() 執行失敗")
            return None

        lang = self._config.language
        for voice in voices:
            if voice.lang == lang:
                return voice
        family = lang.split("-")[0]
        for voice in voices:
            if voice.lang.startswith(family):
                return voice
        return None

    def _handle_start(self, token: int, utterance: Utterance) -> None:
        if token != self._utterance_id:
            return
        self._speaking = True
        self._emit({"type": "start", "text": utterance.text, "rate": utterance.rate})

    def _handle_end(self, token: int, utterance: Utterance) -> None:
        if token != self._utterance_id:
            return
        self._speaking = False
        self._emit({"type": "end", "text": utterance.text, "rate": utterance.rate})

    def _handle_error(self, token: int, utterance: Utterance, exc: Exception) -> None:
        if token != self._utterance_id:
            return
        self._speaking = False
        self._logger.warning(f"speech synthesis error for '{utterance.text}': {exc}")
        self._emit({"type": "error", "text": utterance.text, "exception_message": str(exc)})
