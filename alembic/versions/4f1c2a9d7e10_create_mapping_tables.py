"""create mapping tables

Revision ID: 4f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:41.208113
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "4f1c2a9d7e10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("team_id", sa.String(100), nullable=False),
        sa.Column("team_name", sa.String(200), nullable=False),
        sa.Column("area_id", sa.String(100), nullable=False),
        sa.Column("city_id", sa.String(100), nullable=False),
        sa.Column("city_name", sa.String(200), nullable=False),
        sa.Column("country_id", sa.String(100), nullable=False),
        sa.Column("country_name", sa.String(200), nullable=False),
        sa.Column("location", sa.String(300), nullable=False),
        sa.Column(
            "supervisor_id",
            sa.String(50),
            sa.ForeignKey("employees.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("join_date", sa.Date(), nullable=True),
    )
    for col in ("seq", "team_id", "area_id", "city_id", "country_id", "supervisor_id"):
        op.create_index(f"ix_employees_{col}", "employees", [col])

    op.create_table(
        "reports",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("region", sa.String(50), nullable=False),
        sa.Column("supervisors", sa.JSON(), nullable=False),
    )
    op.create_index("ix_reports_seq", "reports", ["seq"])
    op.create_index("ix_reports_name", "reports", ["name"], unique=True)

    op.create_table(
        "mappings",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("report_name", sa.String(200), nullable=False),
        sa.Column("mapping_type", sa.String(20), nullable=False),
        sa.Column("mapping_id", sa.String(100), nullable=False),
        sa.Column("inclusion_flag", sa.String(3), nullable=False),
        sa.Column("active_flag", sa.String(1), nullable=False),
        sa.CheckConstraint("inclusion_flag IN ('Yes','No')", name="ck_mappings_inclusion_flag"),
        sa.CheckConstraint("active_flag IN ('Y','N')", name="ck_mappings_active_flag"),
    )
    op.create_index("ix_mappings_seq", "mappings", ["seq"])
    op.create_index("ix_mappings_report_key", "mappings", ["report_name", "mapping_type", "mapping_id"])

    op.create_table(
        "employee_mappings",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("employee_name", sa.String(200), nullable=False),
        sa.Column("report_name", sa.String(200), nullable=False),
        sa.Column("mapping_type", sa.String(20), nullable=False),
        sa.Column("mapping_value", sa.String(100), nullable=False),
        sa.Column("inclusion_flag", sa.String(3), nullable=False),
        sa.CheckConstraint("inclusion_flag IN ('Yes','No')", name="ck_employee_mappings_inclusion_flag"),
    )
    op.create_index("ix_employee_mappings_seq", "employee_mappings", ["seq"])
    op.create_index("ix_employee_mappings_employee_id", "employee_mappings", ["employee_id"])
    op.create_index("ix_employee_mappings_report_employee", "employee_mappings", ["report_name", "employee_id"])

    op.create_table(
        "upload_records",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("file_type", sa.String(50), nullable=False),
        sa.Column("file_name", sa.String(300), nullable=False),
        sa.Column("month", sa.String(30), nullable=False),
        sa.Column("record_count", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("uploaded_by", sa.String(320), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("status IN ('Completed','Failed')", name="ck_upload_records_status"),
    )
    op.create_index("ix_upload_records_seq", "upload_records", ["seq"])
    op.create_index("ix_upload_records_file_type", "upload_records", ["file_type"])


def downgrade() -> None:
    op.drop_table("upload_records")
    op.drop_table("employee_mappings")
    op.drop_table("mappings")
    op.drop_table("reports")
    op.drop_table("employees")
