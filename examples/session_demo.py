"""
練習流程範例 - 拆解、朗讀、口說比對與選擇題

用假的語音引擎模擬一次完整的單字練習：
辨識結果以 interim -> final 的順序逐批送進 FuzzyVoiceMatcher。
"""

import random

from wordparts import (
    CardSelectionFilter,
    FuzzyVoiceMatcher,
    QuizOptionBuilder,
    Speaker,
    WordCard,
    WordDecompositionEngine,
)
from wordparts.core.protocols.speech import HypothesisBatch

CARDS = [
    WordCard(
        id="w001",
        word="interrupt",
        prefix="inter-",
        root="rupt",
        student_friendly_meaning="to break into what someone is doing",
        distractor_meanings=("to carry across", "to see clearly"),
        decoding_notes="in|ter|rupt",
    ),
    WordCard(
        id="w002",
        word="speculative",
        root="spec",
        suffix="-ive",
        student_friendly_meaning="based on guessing",
        distractor_meanings=("to write down", "able to be seen"),
        decoding_notes="Syllables: spec|u|la|tive",
    ),
]


class PrintSynthesizer:
    def is_available(self):
        return True

    def get_voices(self):
        return []

    def speak(self, utterance, on_start, on_end, on_error):
        on_start()
        print(f"  🔊 {utterance.text!r} (rate={utterance.rate})")
        on_end()

    def cancel(self):
        pass


class ScriptedRecognizer:
    """依序送出預先準備好的辨識結果"""

    def __init__(self, script):
        self.script = script

    def is_supported(self):
        return True

    def create_session(self, **options):
        recognizer = self

        class Session:
            stopped = False

            def start(self):
                for batch in recognizer.script:
                    if self.stopped:
                        break
                    options["on_result"]([batch])
                if not self.stopped:
                    options["on_end"]()

            def stop(self):
                self.stopped = True

        return Session()


def demo_card(card, engine, speaker, builder):
    print("=" * 60)
    print(f"單字: {card.word}")
    print("=" * 60)

    for axis in ("sound", "morpheme"):
        segments = engine.decompose_card(card, axis)
        parts = " · ".join(
            f"{s.text}[{s.role}{', ' + s.meaning if s.meaning else ''}]" for s in segments
        )
        print(f"{axis:>9}: {parts}")
        for segment in segments:
            speaker.speak_chunk(segment.text)

    script = [
        HypothesisBatch.of("in", is_final=False),
        HypothesisBatch.of("inter", "enter", is_final=False),
        HypothesisBatch.of(f"{card.word[:-1]}", is_final=True),
    ]
    matcher = FuzzyVoiceMatcher(
        ScriptedRecognizer(script),
        card.word,
        on_event=lambda e: print(f"  🎤 {e}") if e["type"] == "state_change" else None,
    )
    matcher.start()
    print(f"口說結果: {matcher.state} (transcript={matcher.transcript!r})")

    print("釋義選擇題:")
    for option in builder.build_options(card, CARDS):
        print(f"  {'✅' if option.is_correct else '  '} {option.text}")
    print()


def main():
    engine = WordDecompositionEngine()
    speaker = Speaker(PrintSynthesizer())
    builder = QuizOptionBuilder(rng=random.Random(0))

    cards = CardSelectionFilter().select(CARDS, "All", "Mixed")
    for card in cards:
        demo_card(card, engine, speaker, builder)


if __name__ == "__main__":
    main()
