"""
朗讀文字正規化 (PhoneticRenderer)

單獨朗讀某些拼寫片段時，語音合成的讀法會和它在單字中的讀法不同
（例如 "tion" 被當成一個字母串拼讀）。這裡把這些片段改寫成較接近的拼音，
只影響交給合成器的文字，不影響畫面上顯示的拼寫。
"""

from typing import Dict, Mapping, Optional

SPEECH_OVERRIDES: Dict[str, str] = {
    "tion": "shun",
    "sion": "shun",
    "ition": "ish-un",
    "ation": "ay-shun",
    "ble": "bul",
    "cle": "kul",
    "ence": "ents",
    "ance": "ants",
    "ough": "oh",
}

# "tion" 的短版本，單獨出現時讀作弱化的 /yun/
REDUCED_ION = "ion"
REDUCED_ION_SPEECH = "yun"


class PhoneticRenderer:
    """
    片段 -> 朗讀文字

    規則順序:
    1. 對照表精確比對（不分大小寫）
    2. "ion" 的弱化讀法
    3. 其他一律原樣回傳，交給合成器的預設讀法
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None):
        table = SPEECH_OVERRIDES if overrides is None else overrides
        self._overrides = {key.lower(): value for key, value in table.items()}

    def to_speech_text(self, chunk: str) -> str:
        key = chunk.lower()
        if key in self._overrides:
            return self._overrides[key]
        if key == REDUCED_ION:
            return REDUCED_ION_SPEECH
        return chunk


_DEFAULT_RENDERER = PhoneticRenderer()


def to_speech_text(chunk: str) -> str:
    """使用內建對照表的便利函式"""
    return _DEFAULT_RENDERER.to_speech_text(chunk)
