"""Pydantic schemas for quiz attempts."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

ANSWERS_MAX_ITEMS = 500


class QuizAttemptSubmit(BaseModel):
    """Answers submitted at the end of a quiz."""

    answers: dict[int, str] = Field(
        default_factory=dict,
        max_length=ANSWERS_MAX_ITEMS,
        description="Chosen answer keyed by question index",
    )
    time_taken_seconds: int | None = Field(default=None, ge=0)


class QuizAttemptOut(BaseModel):
    """Scored quiz attempt."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    quiz_id: UUID
    score: int
    max_score: int
    time_taken: int | None = None
    completed_at: datetime | None = None


class ProgressSummaryOut(BaseModel):
    """Quiz totals for the acting learner."""

    model_config = ConfigDict(from_attributes=True)

    total_attempts: int
    average_score: int = Field(..., ge=0, le=100, description="Mean attempt score in percent")
    total_time_minutes: int
