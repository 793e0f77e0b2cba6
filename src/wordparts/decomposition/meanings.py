"""
詞素意義對照表

以去掉 "-" 與空白、轉小寫後的詞素為 key。
涵蓋資料集中出現的字根、字首與字尾。
"""

from typing import Dict, Optional

MORPHEME_MEANINGS: Dict[str, str] = {
    # 字根
    "port": "carry",
    "vis": "see",
    "vid": "see",
    "rupt": "break",
    "scrib": "write",
    "script": "write",
    "dict": "say / tell",
    "struct": "build",
    "act": "do",
    "form": "shape",
    "mit": "send",
    "miss": "send",
    "aud": "hear",
    "spec": "look",
    "spect": "look",
    "fer": "carry",
    # 字首
    "trans": "across",
    "re": "again",
    "un": "not",
    "pre": "before",
    "dis": "not / apart",
    "im": "not",
    "in": "not / into",
    "sub": "under",
    "inter": "between",
    "ex": "out",
    "con": "together",
    "com": "together",
    "de": "down / away",
    "pro": "forward",
    # 字尾
    "tion": "act of",
    "sion": "act of",
    "ment": "result of",
    "ness": "state of",
    "ful": "full of",
    "less": "without",
    "able": "able to be",
    "ible": "able to be",
    "er": "one who",
    "or": "one who",
    "ly": "in a ___ way",
    "ist": "person who",
    "ous": "full of",
    "ion": "act of",
    "ation": "act of",
    "ition": "act of",
    "ive": "tending to",
    "ity": "state of",
    "al": "relating to",
    "ic": "relating to",
    "ize": "to make",
    "ise": "to make",
}


def normalize_morpheme(text: str) -> str:
    """去掉前後的 "-" 與空白並轉小寫"""
    return text.strip("- \t\r\n").lower()


def meaning_of(text: str) -> Optional[str]:
    """
    查詢詞素意義

    Args:
        text: 詞素拼寫，例如 "port"、"-able"、"Trans"

    Returns:
        Optional[str]: 意義；查無則為 None
    """
    return MORPHEME_MEANINGS.get(normalize_morpheme(text))
