"""
釋義選擇題模組
"""

from .options import QuizOptionBuilder, is_quiz_available

__all__ = ["QuizOptionBuilder", "is_quiz_available"]
