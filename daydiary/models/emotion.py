"""Emotion codes and the shared emotion validator."""

from enum import Enum, IntEnum
from typing import Any

from daydiary.errors import ValidationError


class Emotion(IntEnum):
    """Closed emotion scale. 1 is the best day, 5 the worst."""

    GREAT = 1
    GOOD = 2
    SO_SO = 3
    BAD = 4
    TERRIBLE = 5

    @property
    def label(self) -> str:
        """Human readable label."""
        return EMOTION_LABELS[self]


class EmotionCategory(str, Enum):
    """Display category an emotion code falls into."""

    GOOD = "GOOD"
    NEUTRAL = "NEUTRAL"
    BAD = "BAD"


EMOTION_LABELS = {
    Emotion.GREAT: "Great",
    Emotion.GOOD: "Good",
    Emotion.SO_SO: "So-so",
    Emotion.BAD: "Bad",
    Emotion.TERRIBLE: "Terrible",
}

MIN_EMOTION = min(Emotion)
MAX_EMOTION = max(Emotion)


def validate_emotion(value: Any) -> Emotion:
    """Validate a raw emotion code.

    This is the single validation boundary for emotion values: the
    entry model, the store mutations and the classifier all call it.

    Args:
        value: Raw emotion code (int or Emotion).

    Returns:
        The matching Emotion member.

    Raises:
        ValidationError: If the value is not an integer in 1..5.
    """
    # bool is an int subclass; True must not pass as GREAT
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Emotion must be an integer between {int(MIN_EMOTION)} and "
            f"{int(MAX_EMOTION)}, got {value!r}"
        )
    try:
        return Emotion(value)
    except ValueError:
        raise ValidationError(
            f"Emotion must be between {int(MIN_EMOTION)} and {int(MAX_EMOTION)}, got {value}"
        ) from None
