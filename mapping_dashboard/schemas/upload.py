from datetime import datetime
from pydantic import BaseModel, Field


class HeaderValidationRequest(BaseModel):
    file_type: str = Field(min_length=1)
    header_row: str = Field(description="First line of the CSV file, comma separated")


class HeaderValidationResponse(BaseModel):
    """Result of checking a header row against a file type's schema"""
    file_type: str
    valid: bool
    missing_headers: list[str]


class UploadOut(BaseModel):
    id: str
    file_type: str
    file_name: str
    uploaded_at: datetime
    month: str
    record_count: int
    status: str
    uploaded_by: str


class UploadResponse(BaseModel):
    success: bool
    message: str
    row_count: int
    upload: UploadOut
