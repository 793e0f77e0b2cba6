"""
外部協作者介面（Protocol）
"""

from .speech import (
    HypothesisBatch,
    RecognitionSession,
    SpeechRecognizer,
    SpeechSynthesizer,
    Utterance,
    Voice,
)

__all__ = [
    "HypothesisBatch",
    "RecognitionSession",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "Utterance",
    "Voice",
]
