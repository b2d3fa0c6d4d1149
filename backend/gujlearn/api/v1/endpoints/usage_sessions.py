"""App usage session endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gujlearn.core.dependencies import get_current_user_id
from gujlearn.core.errors import raise_app_error
from gujlearn.db.session import get_db
from gujlearn.models.progress import AppUsageSession
from gujlearn.schemas.usage import UsageSessionOut, UsageSessionStart, UsageSessionUpdate
from gujlearn.services.usage_tracking import UsageSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/usage-sessions", tags=["Usage Sessions"])


def _open_session(db: Session, session_id: UUID, user_id: UUID) -> UsageSession:
    tracker = UsageSession.resume(db, session_id, user_id)
    if tracker is None:
        raise_app_error(
            status.HTTP_404_NOT_FOUND,
            "USAGE_SESSION_NOT_FOUND",
            f"No open usage session {session_id}",
        )
    return tracker


def _session_out(db: Session, session_id: UUID) -> UsageSessionOut:
    row = db.get(AppUsageSession, session_id)
    db.refresh(row)
    return UsageSessionOut.model_validate(row)


@router.post("", response_model=UsageSessionOut, status_code=status.HTTP_201_CREATED)
async def start_session(
    payload: UsageSessionStart,
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> UsageSessionOut:
    """Open a usage session for the acting learner."""
    session_id = UsageSession(db, user_id).start(payload.page_name)
    if session_id is None:
        raise_app_error(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "USAGE_SESSION_UNAVAILABLE",
            "Usage session could not be started",
        )
    return _session_out(db, session_id)


@router.patch("/{session_id}", response_model=UsageSessionOut)
async def update_session(
    session_id: UUID,
    payload: UsageSessionUpdate,
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> UsageSessionOut:
    """Add page views and completed activities to an open session."""
    tracker = _open_session(db, session_id, user_id)
    tracker.record(page_names=payload.page_visits, activities=payload.activities_completed)
    return _session_out(db, session_id)


@router.post("/{session_id}/end", response_model=UsageSessionOut)
async def end_session(
    session_id: UUID,
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> UsageSessionOut:
    """Close an open session."""
    tracker = _open_session(db, session_id, user_id)
    tracker.end()
    logger.info(
        "Usage session ended",
        extra={"session_id": str(session_id), "user_id": str(user_id)},
    )
    return _session_out(db, session_id)
