"""
解碼提示解析

decoding_notes 是老師撰寫的自由文字，可能包含以 "|" 分隔的音節提示，例如:
    "Syllables: in|vis|i|ble. The 'i' is a schwa."

解析器不拋出例外，一律回傳 SyllableHint；ok 為 False 時 reason 說明原因。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

# 可選的 "syllable(s):" 前綴 + 至少兩段以 "|" 連接的字母
_HINT_PATTERN = re.compile(r"(?:syllables?:\s+)?([a-z]+(?:\s*\|\s*[a-z]+)+)", re.IGNORECASE)


@dataclass(frozen=True)
class SyllableHint:
    syllables: Tuple[str, ...] = ()
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def failure(cls, reason: str) -> "SyllableHint":
        return cls(syllables=(), reason=reason)


def parse_syllable_hint(notes: Optional[str], word: str) -> SyllableHint:
    """
    從 decoding_notes 取出音節提示並驗證

    接受條件:
    - 每個音節非空
    - 至少兩個音節
    - 音節串接後與單字逐字母相同（不分大小寫）

    成功時音節從原單字切出，保留原本大小寫。

    Args:
        notes: decoding_notes 原文
        word: 目標單字

    Returns:
        SyllableHint
    """
    if not notes:
        return SyllableHint.failure("no decoding notes")

    match = _HINT_PATTERN.search(notes)
    if match is None:
        return SyllableHint.failure("no pipe-delimited hint")

    parts = [part.strip() for part in match.group(1).split("|")]
    if any(not part for part in parts):
        return SyllableHint.failure("empty syllable in hint")
    if len(parts) < 2:
        return SyllableHint.failure("fewer than two syllables")

    joined = "".join(parts)
    if joined.lower() != word.lower() or len(joined) != len(word):
        return SyllableHint.failure(f"hint spells {joined!r}, not {word!r}")

    syllables = []
    pos = 0
    for part in parts:
        syllables.append(word[pos:pos + len(part)])
        pos += len(part)
    return SyllableHint(syllables=tuple(syllables))
