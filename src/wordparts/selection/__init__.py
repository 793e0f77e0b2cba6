"""
卡片篩選模組
"""

from .filter import CardSelectionFilter, apply_focus, apply_grade_band, prepare_session, shuffle_cards

__all__ = [
    "CardSelectionFilter",
    "apply_focus",
    "apply_grade_band",
    "prepare_session",
    "shuffle_cards",
]
