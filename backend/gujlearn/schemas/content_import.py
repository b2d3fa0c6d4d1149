"""Pydantic schemas for bulk content import."""

from pydantic import BaseModel, Field

from gujlearn.services.importer import ContentKind, ImportResult


class ImportResultOut(BaseModel):
    """Outcome of a CSV upload."""

    kind: ContentKind
    created_count: int = Field(..., ge=0)
    updated_count: int = Field(..., ge=0)
    message: str

    @classmethod
    def from_result(cls, result: ImportResult) -> "ImportResultOut":
        return cls(
            kind=result.kind,
            created_count=result.created_count,
            updated_count=result.updated_count,
            message=result.summary_message(),
        )
