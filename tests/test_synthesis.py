"""
朗讀元件測試

以假的 synthesizer 記錄所有請求，手動觸發 start/end 回呼。
"""

import pytest

from wordparts.config import TrainerConfig
from wordparts.core.protocols.speech import SpeechSynthesizer, Voice
from wordparts.speech import Speaker


class FakeSynthesizer:
    def __init__(self, available=True, voices=()):
        self.available = available
        self.voices = list(voices)
        self.calls = []
        self.spoken = []
        self.callbacks = []
        self.fail_with = None

    def is_available(self):
        return self.available

    def get_voices(self):
        return self.voices

    def speak(self, utterance, on_start, on_end, on_error):
        self.calls.append("speak")
        if self.fail_with is not None:
            raise self.fail_with
        self.spoken.append(utterance)
        self.callbacks.append((on_start, on_end, on_error))

    def cancel(self):
        self.calls.append("cancel")


@pytest.fixture
def synth():
    return FakeSynthesizer(
        voices=[Voice("Daniel", "en-GB"), Voice("Samantha", "en-US"), Voice("Amelie", "fr-FR")]
    )


@pytest.fixture
def events():
    return []


@pytest.fixture
def speaker(synth, events):
    return Speaker(synth, on_event=events.append)


class TestSpeak:
    def test_fake_satisfies_protocol(self, synth):
        assert isinstance(synth, SpeechSynthesizer)

    def test_cancels_before_speaking(self, speaker, synth):
        assert speaker.speak("transport") is True
        assert synth.calls == ["cancel", "speak"]

    def test_normal_rate_and_language(self, speaker, synth):
        speaker.speak("transport")
        utterance = synth.spoken[0]
        assert utterance.text == "transport"
        assert utterance.rate == 1.0
        assert utterance.lang == "en-US"

    def test_slow_rate(self, speaker, synth):
        speaker.speak("transport", slow=True)
        assert synth.spoken[0].rate == 0.75

    def test_toggle_slow(self, speaker, synth):
        assert speaker.toggle_slow() is True
        speaker.speak("port")
        assert synth.spoken[-1].rate == 0.75
        assert speaker.toggle_slow() is False

    def test_custom_rates(self, synth):
        speaker = Speaker(synth, config=TrainerConfig(slow_rate=0.5), slow=True)
        speaker.speak("port")
        assert synth.spoken[0].rate == 0.5

    def test_speak_chunk_renders_text(self, speaker, synth):
        speaker.speak_chunk("tion")
        speaker.speak_chunk("port")
        assert [u.text for u in synth.spoken] == ["shun", "port"]


class TestVoiceSelection:
    def test_prefers_exact_en_us(self, speaker, synth):
        speaker.speak("port")
        assert synth.spoken[0].voice.name == "Samantha"

    def test_falls_back_to_any_english(self):
        synth = FakeSynthesizer(voices=[Voice("Amelie", "fr-FR"), Voice("Daniel", "en-GB")])
        Speaker(synth).speak("port")
        assert synth.spoken[0].voice.name == "Daniel"

    def test_default_voice_when_no_english(self):
        synth = FakeSynthesizer(voices=[Voice("Amelie", "fr-FR")])
        Speaker(synth).speak("port")
        assert synth.spoken[0].voice is None


class TestSpeakingState:
    def test_start_and_end(self, speaker, synth, events):
        speaker.speak("port")
        on_start, on_end, _ = synth.callbacks[0]
        on_start()
        assert speaker.speaking
        on_end()
        assert not speaker.speaking
        assert [e["type"] for e in events] == ["start", "end"]

    def test_new_speech_cancels_old(self, speaker, synth, events):
        speaker.speak("port")
        synth.callbacks[0][0]()
        speaker.speak("transport")
        assert not speaker.speaking
        assert "cancel" in [e["type"] for e in events]

        # 舊 utterance 晚到的 end 不影響新的
        synth.callbacks[1][0]()
        synth.callbacks[0][1]()
        assert speaker.speaking

    def test_error_clears_speaking(self, speaker, synth, events):
        speaker.speak("port")
        on_start, _, on_error = synth.callbacks[0]
        on_start()
        on_error(RuntimeError("audio-busy"))
        assert not speaker.speaking
        assert events[-1]["type"] == "error"

    def test_speak_raising(self, speaker, synth):
        synth.fail_with = RuntimeError("engine gone")
        assert speaker.speak("port") is False
        assert not speaker.speaking


class TestUnavailable:
    def test_unavailable_synthesizer(self):
        synth = FakeSynthesizer(available=False)
        speaker = Speaker(synth)
        assert not speaker.available
        assert speaker.speak("port") is False
        assert synth.calls == []

    def test_no_synthesizer(self):
        speaker = Speaker(None)
        assert not speaker.available
        assert speaker.speak_chunk("tion") is False
        speaker.cancel()
