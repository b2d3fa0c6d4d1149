"""Bulk content import endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from gujlearn.core.config import settings
from gujlearn.core.dependencies import get_current_user_id
from gujlearn.core.errors import raise_app_error
from gujlearn.db.session import get_db
from gujlearn.schemas.content_import import ImportResultOut
from gujlearn.services.importer import (
    ContentKind,
    CSVParseError,
    CSVTokenizer,
    EmptyInputError,
    get_layout,
    import_content,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content/import", tags=["Content Import"])

CSV_CONTENT_TYPES = {"text/csv", "application/csv"}


def _is_csv(file: UploadFile) -> bool:
    if file.content_type in CSV_CONTENT_TYPES:
        return True
    return (file.filename or "").lower().endswith(".csv")


@router.get("/{kind}/template")
async def download_template(kind: ContentKind) -> Response:
    """Download the CSV template (header row) for a content kind."""
    layout = get_layout(kind)
    return Response(
        content=layout.template_header() + "\n",
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{kind.value}_template.csv"'},
    )


@router.post("/{kind}", response_model=ImportResultOut)
async def upload_content(
    kind: ContentKind,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ImportResultOut:
    """Create or update content of one kind from an uploaded CSV file."""
    if not _is_csv(file):
        raise_app_error(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_FILE_TYPE",
            "Please select a CSV file",
            {"filename": file.filename, "content_type": file.content_type},
        )

    file_content = await file.read()
    if len(file_content) > settings.MAX_BODY_BYTES_IMPORT:
        raise_app_error(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            "PAYLOAD_TOO_LARGE",
            "File too large",
            {"limit": settings.MAX_BODY_BYTES_IMPORT},
        )

    tokenizer = CSVTokenizer()
    try:
        text = tokenizer.decode(file_content)
        result = import_content(db, text, kind, user_id)
    except EmptyInputError as e:
        raise_app_error(status.HTTP_400_BAD_REQUEST, "EMPTY_CSV", str(e))
    except CSVParseError as e:
        raise_app_error(status.HTTP_400_BAD_REQUEST, "CSV_PARSE_ERROR", str(e))

    logger.info(
        "CSV upload processed",
        extra={"kind": kind.value, "filename": file.filename, "user_id": str(user_id)},
    )
    return ImportResultOut.from_result(result)
