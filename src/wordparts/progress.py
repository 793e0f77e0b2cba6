"""
練習進度計算

只提供純函式：給定目前進度與一個事件，回傳下一個進度。
持久化（localStorage、檔案、資料庫…）由外部 store 負責，
to_dict() / from_dict() 提供與 store 交換的格式。
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Mapping, Optional

from .core.models import SessionProgress
from .utils.logger import get_logger

logger = get_logger("progress")


def default_progress() -> SessionProgress:
    return SessionProgress()


def start_session(progress: SessionProgress, total: int) -> SessionProgress:
    return replace(progress, session_total=total)


def mark_practiced(progress: SessionProgress, correct: bool) -> SessionProgress:
    """完成一題釋義檢查"""
    return replace(
        progress,
        practiced=progress.practiced + 1,
        correct_meaning_checks=progress.correct_meaning_checks + (1 if correct else 0),
    )


def toggle_tricky(progress: SessionProgress, card_id: str) -> SessionProgress:
    """標記 / 取消標記困難單字"""
    if card_id in progress.tricky_ids:
        tricky = tuple(i for i in progress.tricky_ids if i != card_id)
    else:
        tricky = progress.tricky_ids + (card_id,)
    return replace(progress, tricky_ids=tricky)


def is_tricky(progress: SessionProgress, card_id: str) -> bool:
    return card_id in progress.tricky_ids


def to_dict(progress: SessionProgress) -> Dict[str, Any]:
    return {
        "practiced": progress.practiced,
        "correctMeaningChecks": progress.correct_meaning_checks,
        "trickyIds": list(progress.tricky_ids),
        "sessionTotal": progress.session_total,
    }


def from_dict(data: Optional[Mapping[str, Any]]) -> SessionProgress:
    """store 讀回的內容；格式不對時回到預設進度"""
    if not data:
        return default_progress()
    tricky_ids = data.get("trickyIds", []) if isinstance(data, Mapping) else None
    if not isinstance(tricky_ids, list):
        logger.warning("stored progress has no valid trickyIds list, starting from default")
        return default_progress()
    try:
        return SessionProgress(
            practiced=int(data.get("practiced", 0)),
            correct_meaning_checks=int(data.get("correctMeaningChecks", 0)),
            tricky_ids=tuple(str(i) for i in tricky_ids),
            session_total=int(data.get("sessionTotal", 0)),
        )
    except (TypeError, ValueError, AttributeError):
        logger.warning("stored progress is malformed, starting from default")
        return default_progress()
