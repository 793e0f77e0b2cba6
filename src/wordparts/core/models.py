"""
資料模型

- WordCard: 資料集中的單字卡（載入後不可變）
- RootEntry / PrefixEntry / SuffixEntry: 詞素詞彙表條目（核心不使用，只保留形狀）
- LexiconEntry: 參考詞庫條目（音節與詞素兩個維度的平行序列）
- Segment: 拆解輸出單位
- QuizOption: 選擇題選項
- SessionConfig: 練習設定（年級區間 + 焦點）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

from .errors import DatasetError, LexiconIntegrityError

GradeBand = Literal["3-4", "5-6", "7-8"]
GradeBandFilter = Literal["3-4", "5-6", "7-8", "All"]
Focus = Literal["Roots", "Prefixes", "Suffixes", "Mixed"]
Axis = Literal["sound", "morpheme"]
Role = Literal["prefix", "root", "suffix", "syllable"]

GRADE_BANDS: Tuple[str, ...] = ("3-4", "5-6", "7-8")
ALL_GRADES = "All"
FOCUSES: Tuple[str, ...] = ("Roots", "Prefixes", "Suffixes", "Mixed")
AXES: Tuple[str, ...] = ("sound", "morpheme")
MORPHEME_ROLES: Tuple[str, ...] = ("prefix", "root", "suffix")


@dataclass(frozen=True)
class WordCard:
    """
    單字卡

    Attributes:
        id: 唯一識別碼
        word: 單字本身
        prefix / root / suffix: 選填的拼寫片段（可能帶 "-"，root 可能為 "vis/vid"）
        student_friendly_meaning: 正確釋義
        distractor_meanings: 作者撰寫的干擾釋義
        grade_band: 年級區間
        decoding_notes: 自由文字的解碼提示（可能含 "syl|la|ble" 格式）
        example_sentence: 例句
        part_of_speech: 詞性
    """

    id: str
    word: str
    student_friendly_meaning: str
    grade_band: str = "3-4"
    prefix: Optional[str] = None
    root: Optional[str] = None
    suffix: Optional[str] = None
    distractor_meanings: Tuple[str, ...] = ()
    decoding_notes: str = ""
    example_sentence: str = ""
    part_of_speech: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordCard":
        """
        由資料集 JSON 物件建立單字卡

        Raises:
            KeyError: 缺少必要欄位
            DatasetError: 欄位型別不對（例如 word 不是非空字串、distractor_meanings 不是 list）
        """
        card_id = data.get("id", "?")

        def text(key: str) -> str:
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise DatasetError(f"word card {card_id!r} field {key!r} must be a non-empty string")
            return value

        def optional_text(key: str) -> Optional[str]:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise DatasetError(f"word card {card_id!r} field {key!r} must be a string or null")
            return value

        distractors = data.get("distractor_meanings")
        if distractors is None:
            distractors = []
        if not isinstance(distractors, list) or not all(isinstance(d, str) for d in distractors):
            raise DatasetError(f"word card {card_id!r} field 'distractor_meanings' must be a list of strings")

        return cls(
            id=str(data["id"]),
            word=text("word"),
            student_friendly_meaning=text("student_friendly_meaning"),
            grade_band=data.get("grade_band", "3-4"),
            prefix=optional_text("prefix"),
            root=optional_text("root"),
            suffix=optional_text("suffix"),
            distractor_meanings=tuple(distractors),
            decoding_notes=optional_text("decoding_notes") or "",
            example_sentence=optional_text("example_sentence") or "",
            part_of_speech=optional_text("part_of_speech") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "prefix": self.prefix,
            "root": self.root,
            "suffix": self.suffix,
            "student_friendly_meaning": self.student_friendly_meaning,
            "part_of_speech": self.part_of_speech,
            "grade_band": self.grade_band,
            "decoding_notes": self.decoding_notes,
            "example_sentence": self.example_sentence,
            "distractor_meanings": list(self.distractor_meanings),
        }


@dataclass(frozen=True)
class RootEntry:
    root: str
    meaning: str
    examples: Tuple[str, ...] = ()
    notes: str = ""


@dataclass(frozen=True)
class PrefixEntry:
    prefix: str
    meaning: str
    examples: Tuple[str, ...] = ()
    notes: str = ""


@dataclass(frozen=True)
class SuffixEntry:
    suffix: str
    meaning: str
    part_of_speech_effect: str = ""
    examples: Tuple[str, ...] = ()
    notes: str = ""


@dataclass(frozen=True)
class MorphologyDataset:
    """整份資料集；核心只會用到 word_cards"""

    word_cards: Tuple[WordCard, ...]
    roots: Tuple[RootEntry, ...] = ()
    prefixes: Tuple[PrefixEntry, ...] = ()
    suffixes: Tuple[SuffixEntry, ...] = ()


@dataclass(frozen=True)
class Segment:
    """
    拆解輸出單位

    一組 Segment 的 text 依序串接（不分大小寫）必須等於原單字。

    Attributes:
        text: 拼寫片段（保留原單字的大小寫）
        role: "syllable" 或 "prefix" / "root" / "suffix"
        pronunciation_cue: 發音提示，例如 "/tranz/"（僅參考詞庫提供）
        meaning: 詞素意義（僅詞素維度，查得到時才有）
    """

    text: str
    role: str
    pronunciation_cue: Optional[str] = None
    meaning: Optional[str] = None


def join_segments(segments: Sequence[Segment]) -> str:
    """把 Segment 串回單字"""
    return "".join(seg.text for seg in segments)


@dataclass(frozen=True)
class LexiconEntry:
    """
    參考詞庫條目

    不變式:
    - syllables 與 sound_cues 等長
    - morphemes、morph_cues、morph_roles 三者等長
    - syllables 串接 == 單字；morphemes 串接 == 單字（不分大小寫）
    """

    syllables: Tuple[str, ...]
    sound_cues: Tuple[str, ...]
    morphemes: Tuple[str, ...]
    morph_cues: Tuple[str, ...]
    morph_roles: Tuple[str, ...]

    def validate(self, word: str) -> None:
        """檢查不變式，違反時拋出 LexiconIntegrityError"""
        if not self.syllables or not self.morphemes:
            raise LexiconIntegrityError(word, "empty syllable or morpheme sequence")
        if len(self.syllables) != len(self.sound_cues):
            raise LexiconIntegrityError(
                word, f"{len(self.syllables)} syllables but {len(self.sound_cues)} sound cues"
            )
        if not len(self.morphemes) == len(self.morph_cues) == len(self.morph_roles):
            raise LexiconIntegrityError(
                word,
                f"{len(self.morphemes)} morphemes, {len(self.morph_cues)} cues, "
                f"{len(self.morph_roles)} roles",
            )
        if any(not part for part in self.syllables + self.morphemes):
            raise LexiconIntegrityError(word, "empty chunk")
        bad_roles = [r for r in self.morph_roles if r not in MORPHEME_ROLES]
        if bad_roles:
            raise LexiconIntegrityError(word, f"unknown morpheme roles {bad_roles}")
        if "".join(self.syllables).lower() != word.lower():
            raise LexiconIntegrityError(word, f"syllables join to {''.join(self.syllables)!r}")
        if "".join(self.morphemes).lower() != word.lower():
            raise LexiconIntegrityError(word, f"morphemes join to {''.join(self.morphemes)!r}")


@dataclass(frozen=True)
class QuizOption:
    text: str
    is_correct: bool


@dataclass(frozen=True)
class SessionConfig:
    grade_band: str = ALL_GRADES
    focus: str = "Mixed"


@dataclass(frozen=True)
class SessionProgress:
    """
    練習進度（由外部 store 持久化，核心只計算下一個值）
    """

    practiced: int = 0
    correct_meaning_checks: int = 0
    tricky_ids: Tuple[str, ...] = field(default_factory=tuple)
    session_total: int = 0


__all__: List[str] = [
    "GradeBand",
    "GradeBandFilter",
    "Focus",
    "Axis",
    "Role",
    "GRADE_BANDS",
    "ALL_GRADES",
    "FOCUSES",
    "AXES",
    "MORPHEME_ROLES",
    "WordCard",
    "RootEntry",
    "PrefixEntry",
    "SuffixEntry",
    "MorphologyDataset",
    "Segment",
    "join_segments",
    "LexiconEntry",
    "QuizOption",
    "SessionConfig",
    "SessionProgress",
]
