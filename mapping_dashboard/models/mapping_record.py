from sqlalchemy import CheckConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mapping_dashboard.db.base import Base


class MappingRecord(Base):
    """Aggregate criterion of a report: (mapping_type, mapping_id) plus lifecycle flags."""

    __tablename__ = "mappings"
    __table_args__ = (
        CheckConstraint("inclusion_flag IN ('Yes','No')", name="ck_mappings_inclusion_flag"),
        CheckConstraint("active_flag IN ('Y','N')", name="ck_mappings_active_flag"),
        Index("ix_mappings_report_key", "report_name", "mapping_type", "mapping_id"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True, default=0)

    report_name: Mapped[str] = mapped_column(String(200), nullable=False)
    mapping_type: Mapped[str] = mapped_column(String(20), nullable=False)  # snake_case, e.g. team_id
    mapping_id: Mapped[str] = mapped_column(String(100), nullable=False)

    inclusion_flag: Mapped[str] = mapped_column(String(3), nullable=False, default="Yes")
    active_flag: Mapped[str] = mapped_column(String(1), nullable=False, default="Y")
