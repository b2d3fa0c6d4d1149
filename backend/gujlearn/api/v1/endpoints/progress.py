"""Learner progress endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gujlearn.core.dependencies import get_current_user_id
from gujlearn.db.session import get_db
from gujlearn.schemas.quiz import ProgressSummaryOut
from gujlearn.services.quiz_attempts import progress_summary

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get("/summary", response_model=ProgressSummaryOut)
async def get_progress_summary(
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ProgressSummaryOut:
    """Attempt count, average score and total quiz time for the acting learner."""
    return ProgressSummaryOut.model_validate(progress_summary(db, user_id))
