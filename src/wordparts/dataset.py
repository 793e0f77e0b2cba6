"""
資料集讀取

在練習開始時讀一次 morphology_dataset.json:
    {"roots": [...], "prefixes": [...], "suffixes": [...], "wordCards": [...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union

from .core.errors import DatasetError
from .core.models import GRADE_BANDS, MorphologyDataset, PrefixEntry, RootEntry, SuffixEntry, WordCard
from .utils.logger import get_logger, log_timing

logger = get_logger("dataset")


def _parse_card(raw: Mapping[str, Any]) -> WordCard:
    if not isinstance(raw, Mapping):
        raise DatasetError(f"word card must be an object, got {type(raw).__name__}")
    try:
        card = WordCard.from_dict(raw)
    except KeyError as exc:
        raise DatasetError(f"word card {raw.get('id', '?')!r} is missing {exc.args[0]!r}") from exc
    if card.grade_band not in GRADE_BANDS:
        raise DatasetError(f"word card {card.id!r} has unknown grade band {card.grade_band!r}")
    return card


@log_timing("parse_dataset")
def parse_dataset(data: Mapping[str, Any]) -> MorphologyDataset:
    """
    將 JSON 物件轉成 MorphologyDataset

    Raises:
        DatasetError: 缺少 wordCards、卡片欄位不完整或型別不對
    """
    if "wordCards" not in data:
        raise DatasetError("dataset has no 'wordCards'")
    if not isinstance(data["wordCards"], list):
        raise DatasetError("dataset 'wordCards' must be a list")

    try:
        roots = tuple(
            RootEntry(r["root"], r["meaning"], tuple(r.get("examples", ())), r.get("notes", ""))
            for r in data.get("roots", ())
        )
        prefixes = tuple(
            PrefixEntry(p["prefix"], p["meaning"], tuple(p.get("examples", ())), p.get("notes", ""))
            for p in data.get("prefixes", ())
        )
        suffixes = tuple(
            SuffixEntry(
                s["suffix"],
                s["meaning"],
                s.get("part_of_speech_effect", ""),
                tuple(s.get("examples", ())),
                s.get("notes", ""),
            )
            for s in data.get("suffixes", ())
        )
    except KeyError as exc:
        raise DatasetError(f"glossary entry is missing {exc.args[0]!r}") from exc

    cards = tuple(_parse_card(raw) for raw in data["wordCards"])
    logger.debug(f"loaded {len(cards)} word cards")
    return MorphologyDataset(word_cards=cards, roots=roots, prefixes=prefixes, suffixes=suffixes)


def load_dataset(path: Union[str, Path]) -> MorphologyDataset:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{path} is not valid JSON: {exc}") from exc
    return parse_dataset(data)
