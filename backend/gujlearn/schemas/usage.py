"""Pydantic schemas for app usage sessions."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

PAGE_NAME_MAX_LENGTH = 100
PAGE_VISITS_MAX_ITEMS = 200


class UsageSessionStart(BaseModel):
    """Page the learner landed on."""

    page_name: str = Field(default="unknown", min_length=1, max_length=PAGE_NAME_MAX_LENGTH)


class UsageSessionUpdate(BaseModel):
    """Activity since the last update."""

    page_visits: list[str] = Field(
        default_factory=list,
        max_length=PAGE_VISITS_MAX_ITEMS,
        description="Pages viewed, one entry per view",
    )
    activities_completed: int = Field(default=0, ge=0, le=1000)


class UsageSessionOut(BaseModel):
    """Stored usage session."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    session_start: datetime
    session_end: datetime | None = None
    total_time_minutes: int
    page_visits: dict[str, int]
    activities_completed: int
    updated_at: datetime | None = None
