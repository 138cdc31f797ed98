from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mapping_dashboard.db.base import Base


class UploadRecord(Base):
    __tablename__ = "upload_records"
    __table_args__ = (
        CheckConstraint(
            "status IN ('Completed','Failed')",
            name="ck_upload_records_status",
        ),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True, default=0)

    file_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    file_name: Mapped[str] = mapped_column(String(300), nullable=False)
    month: Mapped[str] = mapped_column(String(30), nullable=False)  # e.g. "October 2026"

    record_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Completed")
    uploaded_by: Mapped[str] = mapped_column(String(320), nullable=False)

    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
