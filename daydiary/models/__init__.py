"""Data models for DayDiary."""

from daydiary.models.emotion import Emotion, EmotionCategory, validate_emotion
from daydiary.models.entry import DiaryEntry, EntryPatch

__all__ = [
    "DiaryEntry",
    "EntryPatch",
    "Emotion",
    "EmotionCategory",
    "validate_emotion",
]
