from sqlalchemy import CheckConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mapping_dashboard.db.base import Base


class EmployeeMapping(Base):
    """Per-employee materialisation of a report criterion, with its own inclusion override."""

    __tablename__ = "employee_mappings"
    __table_args__ = (
        CheckConstraint("inclusion_flag IN ('Yes','No')", name="ck_employee_mappings_inclusion_flag"),
        Index("ix_employee_mappings_report_employee", "report_name", "employee_id"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True, default=0)

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    # snapshot taken when the mapping was created, not re-synced on rename
    employee_name: Mapped[str] = mapped_column(String(200), nullable=False)

    report_name: Mapped[str] = mapped_column(String(200), nullable=False)
    mapping_type: Mapped[str] = mapped_column(String(20), nullable=False)  # camelCase, e.g. teamId
    mapping_value: Mapped[str] = mapped_column(String(100), nullable=False)

    inclusion_flag: Mapped[str] = mapped_column(String(3), nullable=False, default="Yes")
