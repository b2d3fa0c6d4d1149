"""Learner progress models: quiz attempts and app usage sessions."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Uuid
from sqlalchemy.sql import func

from gujlearn.db.base import Base
from gujlearn.db.types import JSONDocument


class QuizAttempt(Base):
    """A submitted quiz attempt and its score."""

    __tablename__ = "quiz_attempts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Uuid, nullable=False)

    score = Column(Integer, nullable=False)
    max_score = Column(Integer, nullable=False)
    time_taken = Column(Integer, nullable=True)  # seconds
    answers = Column(JSONDocument, nullable=True)  # {"<question index>": "<answer>"}

    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_quiz_attempts_user_id", "user_id"),
        Index("ix_quiz_attempts_quiz_id", "quiz_id"),
    )


class AppUsageSession(Base):
    """Time spent in the app during one visit."""

    __tablename__ = "app_usage_sessions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False)

    session_start = Column(DateTime(timezone=True), nullable=False)
    session_end = Column(DateTime(timezone=True), nullable=True)
    total_time_minutes = Column(Integer, nullable=False, default=0)
    page_visits = Column(JSONDocument, nullable=False, default=dict)  # {page_name: count}
    activities_completed = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (Index("ix_app_usage_sessions_user_id", "user_id"),)
