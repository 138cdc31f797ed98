"""
CSV data uploads: header validation against the fixed file schemas and upload history.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, Form, Header, Query, UploadFile

from mapping_dashboard.core.errors import InvalidInput
from mapping_dashboard.core.upload_validation import missing_headers, parse_csv
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.models.upload_record import UploadRecord
from mapping_dashboard.schemas.upload import (
    HeaderValidationRequest,
    HeaderValidationResponse,
    UploadOut,
    UploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["uploads"])


def to_out(u: UploadRecord) -> UploadOut:
    return UploadOut(
        id=u.id,
        file_type=u.file_type,
        file_name=u.file_name,
        uploaded_at=u.uploaded_at,
        month=u.month,
        record_count=u.record_count,
        status=u.status,
        uploaded_by=u.uploaded_by,
    )


@router.post("/validate-headers", response_model=HeaderValidationResponse)
def validate_headers(payload: HeaderValidationRequest):
    missing = missing_headers(payload.header_row, payload.file_type)
    return HeaderValidationResponse(file_type=payload.file_type, valid=not missing, missing_headers=missing)


@router.post("", response_model=UploadResponse)
def upload_file(
    file: UploadFile = File(None),
    file_type: str = Form(None),
    x_user_email: str | None = Header(default=None),
    store: MappingStore = Depends(get_store),
):
    """
    Validate and record a CSV upload.

    The header row must contain every column of the file type's schema; the
    response carries `missing_headers` otherwise.
    """
    if not file:
        raise InvalidInput("No file provided")
    if not file_type:
        raise InvalidInput("Invalid file type")
    if not (file.filename or "").lower().endswith(".csv"):
        raise InvalidInput("Only CSV files are supported", file_name=file.filename)

    try:
        content = file.file.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise InvalidInput("File must be UTF-8 encoded", file_name=file.filename) from None

    header, rows = parse_csv(content)
    if not header:
        raise InvalidInput("File is empty", file_name=file.filename)

    missing = missing_headers(header, file_type)
    if missing:
        raise InvalidInput("Missing required headers", missing_headers=missing)

    now = datetime.now(timezone.utc)
    upload = store.add_upload(
        file_type=file_type,
        file_name=file.filename,
        month=now.strftime("%B %Y"),
        record_count=len(rows),
        status="Completed",
        uploaded_by=x_user_email or "anonymous",
        uploaded_at=now,
    )
    logger.info("Recorded %s upload %s (%d rows)", file_type, upload.id, len(rows))

    return UploadResponse(
        success=True,
        message="File uploaded and processed successfully",
        row_count=len(rows),
        upload=to_out(upload),
    )


@router.get("", response_model=list[UploadOut])
def list_uploads(
    file_type: str | None = Query(default=None, description="travel, donations or meetings"),
    store: MappingStore = Depends(get_store),
):
    """Upload history, newest first."""
    return [to_out(u) for u in store.list_uploads(file_type=file_type)]
