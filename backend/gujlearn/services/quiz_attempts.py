"""Quiz timing, scoring, attempt persistence and learner progress."""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from fastapi import status
from sqlalchemy import select
from sqlalchemy.orm import Session

from gujlearn.core.errors import raise_app_error
from gujlearn.models.content import Quiz
from gujlearn.models.progress import QuizAttempt

logger = logging.getLogger(__name__)

ATTEMPT_HISTORY_LIMIT = 100


@dataclass
class QuizTimer:
    """Time limit of a quiz. A missing or zero limit means untimed."""

    time_limit_minutes: int | None

    @property
    def total_seconds(self) -> int | None:
        if not self.time_limit_minutes:
            return None
        return self.time_limit_minutes * 60

    def is_expired(self, elapsed_seconds: int) -> bool:
        total = self.total_seconds
        return total is not None and elapsed_seconds >= total

    def clamp(self, elapsed_seconds: int) -> int:
        """Elapsed seconds, never negative and never past the limit."""
        elapsed_seconds = max(0, elapsed_seconds)
        total = self.total_seconds
        if total is None:
            return elapsed_seconds
        return min(elapsed_seconds, total)


@dataclass
class ProgressSummary:
    """Quiz totals for one learner."""

    total_attempts: int
    average_score: int  # percent
    total_time_minutes: int


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def score_answers(questions: list[dict[str, Any]], answers: dict[int, str]) -> tuple[int, int]:
    """
    Score answers against a quiz's question documents.

    Args:
        questions: Question documents from ``Quiz.questions``
        answers: Chosen answer per question index; unanswered questions are absent

    Returns:
        (score, max_score)
    """
    score = 0
    for index, question in enumerate(questions):
        answer = answers.get(index)
        if answer is not None and answer == question.get("correct_answer"):
            score += 1
    return score, len(questions)


def submit_attempt(
    db: Session,
    quiz_id: UUID,
    user_id: UUID,
    answers: dict[int, str],
    time_taken_seconds: int | None = None,
) -> QuizAttempt:
    """
    Score and record a quiz attempt.

    Args:
        db: Database session
        quiz_id: Quiz being attempted
        user_id: Learner submitting the attempt
        answers: Chosen answer per question index
        time_taken_seconds: Time spent, as measured by the client; capped at the quiz limit

    Returns:
        Persisted attempt

    Raises:
        AppError: If the quiz does not exist
    """
    quiz = db.get(Quiz, quiz_id)
    if quiz is None:
        raise_app_error(
            status.HTTP_404_NOT_FOUND,
            "QUIZ_NOT_FOUND",
            f"Quiz {quiz_id} not found",
        )

    time_taken = None
    if time_taken_seconds is not None:
        timer = QuizTimer(quiz.time_limit)
        if timer.is_expired(time_taken_seconds):
            logger.info(
                "Quiz attempt reached the time limit",
                extra={
                    "quiz_id": str(quiz.id),
                    "reported_seconds": time_taken_seconds,
                    "limit_seconds": timer.total_seconds,
                },
            )
        time_taken = timer.clamp(time_taken_seconds)

    score, max_score = score_answers(quiz.questions or [], answers)

    attempt = QuizAttempt(
        quiz_id=quiz.id,
        user_id=user_id,
        score=score,
        max_score=max_score,
        time_taken=time_taken,
        answers={str(index): answer for index, answer in answers.items()},
        completed_at=datetime.now(timezone.utc),
    )
    db.add(attempt)
    db.commit()
    db.refresh(attempt)

    logger.info(
        "Quiz attempt recorded",
        extra={
            "quiz_id": str(quiz.id),
            "user_id": str(user_id),
            "score": score,
            "max_score": max_score,
        },
    )
    return attempt


def list_attempts(db: Session, user_id: UUID, limit: int = ATTEMPT_HISTORY_LIMIT) -> list[QuizAttempt]:
    """A learner's attempts, most recently completed first."""
    stmt = (
        select(QuizAttempt)
        .where(QuizAttempt.user_id == user_id)
        .order_by(QuizAttempt.completed_at.desc(), QuizAttempt.created_at.desc())
        .limit(limit)
    )
    return list(db.execute(stmt).scalars().all())


def progress_summary(db: Session, user_id: UUID) -> ProgressSummary:
    """
    Summarize a learner's quiz attempts.

    The average is the mean of per-attempt percentages, rounded half up; an
    attempt with no questions counts as 0%. Total time is rounded to whole
    minutes. A learner with no attempts gets zeros.
    """
    rows = db.execute(
        select(QuizAttempt.score, QuizAttempt.max_score, QuizAttempt.time_taken).where(
            QuizAttempt.user_id == user_id
        )
    ).all()

    if not rows:
        return ProgressSummary(total_attempts=0, average_score=0, total_time_minutes=0)

    percentages = [
        (score / max_score) * 100 if max_score else 0.0 for score, max_score, _ in rows
    ]
    total_seconds = sum(time_taken or 0 for _, _, time_taken in rows)

    return ProgressSummary(
        total_attempts=len(rows),
        average_score=_round_half_up(sum(percentages) / len(rows)),
        total_time_minutes=_round_half_up(total_seconds / 60),
    )
