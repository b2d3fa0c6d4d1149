"""Quiz attempt endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from gujlearn.core.dependencies import get_current_user_id
from gujlearn.db.session import get_db
from gujlearn.schemas.quiz import QuizAttemptOut, QuizAttemptSubmit
from gujlearn.services.quiz_attempts import ATTEMPT_HISTORY_LIMIT, list_attempts, submit_attempt

router = APIRouter(prefix="/quizzes", tags=["Quizzes"])


@router.get("/attempts", response_model=list[QuizAttemptOut])
async def get_attempts(
    limit: int = Query(ATTEMPT_HISTORY_LIMIT, ge=1, le=ATTEMPT_HISTORY_LIMIT),
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> list[QuizAttemptOut]:
    """The acting learner's attempt history, newest first."""
    return [QuizAttemptOut.model_validate(a) for a in list_attempts(db, user_id, limit)]


@router.post(
    "/{quiz_id}/attempts",
    response_model=QuizAttemptOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_attempt(
    quiz_id: UUID,
    payload: QuizAttemptSubmit,
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> QuizAttemptOut:
    """Score and record a finished quiz."""
    attempt = submit_attempt(db, quiz_id, user_id, payload.answers, payload.time_taken_seconds)
    return QuizAttemptOut.model_validate(attempt)
