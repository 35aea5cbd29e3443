"""Emotion classification and summaries."""

from typing import Iterable

from daydiary.models import DiaryEntry, Emotion, EmotionCategory, validate_emotion

EMOTION_CATEGORIES = {
    Emotion.GREAT: EmotionCategory.GOOD,
    Emotion.GOOD: EmotionCategory.GOOD,
    Emotion.SO_SO: EmotionCategory.NEUTRAL,
    Emotion.BAD: EmotionCategory.BAD,
    Emotion.TERRIBLE: EmotionCategory.BAD,
}


def classify(emotion: int) -> EmotionCategory:
    """Map an emotion code to its display category.

    Raises:
        ValidationError: If the code is outside 1..5.
    """
    return EMOTION_CATEGORIES[validate_emotion(emotion)]


def summarize(entries: Iterable[DiaryEntry]) -> dict[EmotionCategory, int]:
    """Count entries per category.

    Every category is present in the result, with 0 when no entry
    falls into it.
    """
    counts = {category: 0 for category in EmotionCategory}
    for entry in entries:
        counts[classify(entry.emotion)] += 1
    return counts
