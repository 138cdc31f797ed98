"""
Repository over the mapping tables.

Routes and core functions never query the session directly; they go through a
MappingStore so tests can hand in any session (or a fresh in-memory database).
Rows are always returned in `seq` order, which is the store's iteration order.
"""

import uuid
from typing import TypeVar

from fastapi import Depends
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from mapping_dashboard.db.session import get_db
from mapping_dashboard.models.employee import Employee
from mapping_dashboard.models.employee_mapping import EmployeeMapping
from mapping_dashboard.models.mapping_record import MappingRecord
from mapping_dashboard.models.report import Report
from mapping_dashboard.models.upload_record import UploadRecord

M = TypeVar("M")


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class MappingStore:
    def __init__(self, db: Session):
        self.db = db

    def _append(self, row: M) -> M:
        model = type(row)
        current = self.db.query(func.max(model.seq)).scalar()
        row.seq = (current or 0) + 1
        self.db.add(row)
        # sessions run with autoflush off; later lookups in the same request must see the row
        self.db.flush()
        return row

    # ---- reports ----

    def list_reports(self) -> list[Report]:
        return self.db.query(Report).order_by(Report.seq.asc()).all()

    def get_report_by_name(self, name: str) -> Report | None:
        return self.db.query(Report).filter(Report.name == name).one_or_none()

    # ---- employees ----

    def _employee_query(self, search: str | None):
        q = self.db.query(Employee)
        if search:
            term = f"%{search.lower()}%"
            q = q.filter(or_(Employee.id.ilike(term), Employee.name.ilike(term)))
        return q

    def list_employees(
        self,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Employee]:
        q = self._employee_query(search).order_by(Employee.seq.asc())
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    def count_employees(self, search: str | None = None) -> int:
        return self._employee_query(search).count()

    def get_employee(self, employee_id: str) -> Employee | None:
        return self.db.get(Employee, employee_id)

    def is_empty(self) -> bool:
        return self.db.query(Employee.id).first() is None and self.db.query(Report.id).first() is None

    # ---- aggregate mapping records ----

    def list_mapping_records(
        self,
        report_name: str | None = None,
        active_only: bool = False,
    ) -> list[MappingRecord]:
        q = self.db.query(MappingRecord)
        if report_name is not None:
            q = q.filter(MappingRecord.report_name == report_name)
        if active_only:
            q = q.filter(MappingRecord.active_flag == "Y")
        return q.order_by(MappingRecord.seq.asc()).all()

    def find_mapping_record(self, report_name: str, mapping_type: str, mapping_id: str) -> MappingRecord | None:
        return (
            self.db.query(MappingRecord)
            .filter(
                MappingRecord.report_name == report_name,
                MappingRecord.mapping_type == mapping_type,
                MappingRecord.mapping_id == mapping_id,
            )
            .order_by(MappingRecord.seq.asc())
            .first()
        )

    def add_mapping_record(self, **fields) -> MappingRecord:
        return self._append(MappingRecord(id=new_id("map"), **fields))

    # ---- per-employee mappings ----

    def list_employee_mappings(
        self,
        report_name: str | None = None,
        employee_id: str | None = None,
        included_only: bool = False,
    ) -> list[EmployeeMapping]:
        q = self.db.query(EmployeeMapping)
        if report_name is not None:
            q = q.filter(EmployeeMapping.report_name == report_name)
        if employee_id is not None:
            q = q.filter(EmployeeMapping.employee_id == employee_id)
        if included_only:
            q = q.filter(EmployeeMapping.inclusion_flag == "Yes")
        return q.order_by(EmployeeMapping.seq.asc()).all()

    def get_employee_mapping(self, mapping_id: str) -> EmployeeMapping | None:
        return self.db.get(EmployeeMapping, mapping_id)

    def find_employee_mapping(
        self, report_name: str, mapping_type: str, mapping_value: str, employee_id: str
    ) -> EmployeeMapping | None:
        return (
            self.db.query(EmployeeMapping)
            .filter(
                EmployeeMapping.report_name == report_name,
                EmployeeMapping.mapping_type == mapping_type,
                EmployeeMapping.mapping_value == mapping_value,
                EmployeeMapping.employee_id == employee_id,
            )
            .order_by(EmployeeMapping.seq.asc())
            .first()
        )

    def add_employee_mapping(self, **fields) -> EmployeeMapping:
        return self._append(EmployeeMapping(id=new_id("em"), **fields))

    def flush(self) -> None:
        self.db.flush()

    # ---- uploads ----

    def list_uploads(self, file_type: str | None = None) -> list[UploadRecord]:
        q = self.db.query(UploadRecord)
        if file_type:
            q = q.filter(UploadRecord.file_type == file_type)
        return q.order_by(UploadRecord.seq.desc()).all()

    def add_upload(self, **fields) -> UploadRecord:
        return self._append(UploadRecord(id=new_id("upload"), **fields))


def get_store(db: Session = Depends(get_db)) -> MappingStore:
    return MappingStore(db)
