"""DiaryEntry and EntryPatch data models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from daydiary.models.emotion import Emotion, validate_emotion


class DiaryEntry(BaseModel):
    """Represents a single diary record."""

    id: int = Field(..., gt=0, description="Unique entry id assigned by the store")
    content: str = Field(default="", description="Free-form entry text")
    emotion: Emotion = Field(..., description="Emotion code (1 = best, 5 = worst)")
    created_date: int = Field(
        ...,
        alias="createdDate",
        strict=True,
        description="Creation timestamp in milliseconds since epoch",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("emotion", mode="before")
    @classmethod
    def _check_emotion(cls, value):
        return validate_emotion(value)


class EntryPatch(BaseModel):
    """Partial update for an entry.

    Only fields explicitly set are applied. Unknown keys such as
    ``id`` or ``createdDate`` are ignored.
    """

    content: Optional[str] = Field(default=None, description="New entry text")
    emotion: Optional[Emotion] = Field(default=None, description="New emotion code")

    model_config = {"frozen": True}

    @field_validator("emotion", mode="before")
    @classmethod
    def _check_emotion(cls, value):
        return validate_emotion(value)

    def changes(self) -> dict:
        """Return the fields that were explicitly set on this patch."""
        return {name: getattr(self, name) for name in self.model_fields_set}
