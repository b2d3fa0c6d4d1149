"""App usage session tracking.

IMPORTANT: Tracking is best-effort. A failed write is logged and the learner's
activity carries on; nothing here raises into the caller.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gujlearn.models.progress import AppUsageSession

logger = logging.getLogger(__name__)

UNKNOWN_PAGE = "unknown"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands timestamps back without tzinfo
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class UsageStats:
    """Snapshot of a usage session."""

    is_tracking: bool
    session_id: UUID | None
    total_minutes: int
    activities_completed: int
    page_visits: dict[str, int] = field(default_factory=dict)
    last_update: datetime | None = None


class UsageSession:
    """Per-visit usage tracker with an explicit start/update/end lifecycle.

    One instance belongs to one learner visit. Within a request it can be
    started directly; across requests, ``resume`` rebuilds it from the stored row.
    """

    def __init__(
        self,
        db: Session,
        user_id: UUID,
        track_activities: bool = True,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.db = db
        self.user_id = user_id
        self.track_activities = track_activities
        self.clock = clock

        self.session_id: UUID | None = None
        self.started_at: datetime | None = None
        self.last_update: datetime | None = None
        self.page_visits: dict[str, int] = {}
        self.activities_completed = 0

    @classmethod
    def resume(
        cls,
        db: Session,
        session_id: UUID,
        user_id: UUID,
        track_activities: bool = True,
        clock: Callable[[], datetime] = _utcnow,
    ) -> "UsageSession | None":
        """
        Rebuild a tracker from a stored, still open session row.

        Returns:
            Tracker, or None if the user has no open session with that id
        """
        row = db.get(AppUsageSession, session_id)
        if row is None or row.user_id != user_id or row.session_end is not None:
            return None

        tracker = cls(db, user_id, track_activities=track_activities, clock=clock)
        tracker.session_id = row.id
        tracker.started_at = _as_utc(row.session_start)
        tracker.last_update = _as_utc(row.updated_at) or tracker.started_at
        tracker.page_visits = dict(row.page_visits or {})
        tracker.activities_completed = row.activities_completed or 0
        return tracker

    def __enter__(self) -> "UsageSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()

    @property
    def is_tracking(self) -> bool:
        return self.session_id is not None and self.started_at is not None

    def _minutes_since_start(self, now: datetime) -> int:
        if self.started_at is None:
            return 0
        return math.floor((now - self.started_at).total_seconds() / 60)

    def start(self, page_name: str = UNKNOWN_PAGE) -> UUID | None:
        """
        Open a usage session row.

        Returns:
            Session id, or None if the row could not be written
        """
        if self.is_tracking:
            return self.session_id

        now = self.clock()
        self.page_visits = {page_name: 1}
        self.activities_completed = 0

        row = AppUsageSession(
            user_id=self.user_id,
            session_start=now,
            page_visits=dict(self.page_visits),
            activities_completed=0,
            total_time_minutes=0,
        )
        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                "Failed to start usage session",
                extra={"user_id": str(self.user_id), "error": str(e)},
            )
            return None

        self.session_id = row.id
        self.started_at = now
        self.last_update = now
        return self.session_id

    def record(self, page_names: Iterable[str] = (), activities: int = 0) -> None:
        """
        Count page views and completed activities, then flush once.

        Args:
            page_names: Pages visited, one entry per view
            activities: Number of activities (quiz, game, practice) completed
        """
        if not self.is_tracking:
            return
        for page_name in page_names:
            if page_name != UNKNOWN_PAGE:
                self.page_visits[page_name] = self.page_visits.get(page_name, 0) + 1
        if self.track_activities:
            self.activities_completed += max(0, activities)
        self.update()

    def record_page_visit(self, page_name: str) -> None:
        """Count a page view and flush it immediately."""
        if page_name == UNKNOWN_PAGE:
            return
        self.record(page_names=[page_name])

    def increment_activity(self) -> None:
        """Count a completed activity and flush it."""
        if not self.track_activities:
            return
        self.record(activities=1)

    def _write(self, now: datetime, **extra_values) -> bool:
        row = self.db.get(AppUsageSession, self.session_id)
        if row is None:
            logger.warning("Usage session row missing", extra={"session_id": str(self.session_id)})
            return False

        row.total_time_minutes = self._minutes_since_start(now)
        row.page_visits = dict(self.page_visits)
        row.activities_completed = self.activities_completed
        row.updated_at = now
        for key, value in extra_values.items():
            setattr(row, key, value)
        self.db.commit()
        return True

    def update(self) -> None:
        """Flush elapsed minutes, page visits and activity count."""
        if not self.is_tracking:
            return
        now = self.clock()
        try:
            if self._write(now):
                self.last_update = now
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                "Failed to update usage session",
                extra={"session_id": str(self.session_id), "error": str(e)},
            )

    def end(self) -> None:
        """Close the session row and reset this tracker."""
        if not self.is_tracking:
            return
        now = self.clock()
        try:
            self._write(now, session_end=now)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                "Failed to end usage session",
                extra={"session_id": str(self.session_id), "error": str(e)},
            )
            return

        self.session_id = None
        self.started_at = None
        self.last_update = None

    def stats(self) -> UsageStats:
        """Current totals, computed against the clock."""
        return UsageStats(
            is_tracking=self.is_tracking,
            session_id=self.session_id,
            total_minutes=self._minutes_since_start(self.clock()) if self.is_tracking else 0,
            activities_completed=self.activities_completed,
            page_visits=dict(self.page_visits),
            last_update=self.last_update,
        )
