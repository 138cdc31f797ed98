"""
Keeps the aggregate mapping records and the per-employee mappings in step.

Both upserts in add_mapping go through the same session, so they commit or roll
back together with the request (see get_db). When no employee can be resolved
for a literal mapping value only the aggregate record is written; a report
criterion without a per-employee row is expected.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError

from mapping_dashboard.core.errors import Internal, InvalidInput, NotFound
from mapping_dashboard.core.mapping_types import MappingType, field_value
from mapping_dashboard.core.resolution import get_report_or_404
from mapping_dashboard.db.store import MappingStore
from mapping_dashboard.models.employee import Employee
from mapping_dashboard.models.employee_mapping import EmployeeMapping
from mapping_dashboard.models.mapping_record import MappingRecord

logger = logging.getLogger(__name__)

INCLUSION_FLAGS = ("Yes", "No")

_REPLACEABLE_FIELDS = (
    "employee_id",
    "employee_name",
    "report_name",
    "mapping_type",
    "mapping_value",
    "inclusion_flag",
)


@dataclass
class AddMappingResult:
    success: bool
    message: str
    mapping_record: MappingRecord
    employee_mapping: EmployeeMapping | None = None


def _reverse_lookup(store: MappingStore, mapping_type: MappingType, value: str) -> Employee | None:
    for e in store.list_employees():
        if field_value(e, mapping_type) == value:
            return e
    return None


def _upsert_mapping_record(
    store: MappingStore, report_name: str, mapping_type: MappingType, mapping_id: str
) -> MappingRecord:
    record = store.find_mapping_record(report_name, mapping_type.snake, mapping_id)
    if record:
        record.inclusion_flag = "Yes"
        record.active_flag = "Y"
        store.flush()
        return record
    return store.add_mapping_record(
        report_name=report_name,
        mapping_type=mapping_type.snake,
        mapping_id=mapping_id,
        inclusion_flag="Yes",
        active_flag="Y",
    )


def _upsert_employee_mapping(
    store: MappingStore, report_name: str, mapping_type: MappingType, mapping_value: str, employee: Employee
) -> EmployeeMapping:
    row = store.find_employee_mapping(report_name, mapping_type.value, mapping_value, employee.id)
    if row:
        row.inclusion_flag = "Yes"
        store.flush()
        return row
    return store.add_employee_mapping(
        employee_id=employee.id,
        employee_name=employee.name,
        report_name=report_name,
        mapping_type=mapping_type.value,
        mapping_value=mapping_value,
        inclusion_flag="Yes",
    )


def add_mapping(
    store: MappingStore,
    *,
    report_name: str | None,
    mapping_type: str | None,
    employee_id: str | None = None,
    mapping_value: str | None = None,
) -> AddMappingResult:
    """
    Add (or re-activate) a report criterion.

    With employee_id the criterion value is read from that employee's field for
    mapping_type. With mapping_value the value is used as given and the first
    employee carrying it, if any, gets the per-employee row.
    """
    if not report_name or not mapping_type:
        raise InvalidInput("Missing required fields")

    parsed = MappingType.parse(mapping_type)
    if parsed is None:
        raise InvalidInput("Invalid mapping type", mapping_type=mapping_type)

    if employee_id and mapping_value:
        raise InvalidInput("Provide either employee_id or mapping_value, not both")
    if not employee_id and not mapping_value:
        raise InvalidInput("Either employee_id or mapping_value is required")

    get_report_or_404(store, report_name)

    try:
        if employee_id:
            employee = store.get_employee(employee_id)
            if not employee:
                raise NotFound("Employee not found", employee_id=employee_id)
            value = field_value(employee, parsed)
        else:
            value = mapping_value
            employee = _reverse_lookup(store, parsed, value)

        record = _upsert_mapping_record(store, report_name, parsed, value)
        employee_row = None
        if employee:
            employee_row = _upsert_employee_mapping(store, report_name, parsed, value, employee)
    except SQLAlchemyError as exc:
        logger.exception("Adding %s=%r to %r failed", parsed.value, mapping_value or employee_id, report_name)
        raise Internal("Failed to add mapping") from exc

    logger.info(
        "Mapping %s %s=%s on %r (employee mapping: %s)",
        record.id,
        record.mapping_type,
        record.mapping_id,
        report_name,
        employee_row.id if employee_row else "none",
    )
    return AddMappingResult(
        success=True,
        message="Mapping added successfully",
        mapping_record=record,
        employee_mapping=employee_row,
    )


def set_inclusion_flag(store: MappingStore, mapping_id: str, flag: str) -> EmployeeMapping:
    """Toggle one per-employee mapping. The aggregate record is left alone."""
    if flag not in INCLUSION_FLAGS:
        raise InvalidInput("Inclusion flag must be 'Yes' or 'No'", inclusion_flag=flag)

    row = store.get_employee_mapping(mapping_id)
    if not row:
        raise NotFound("Mapping not found", mapping_id=mapping_id)

    row.inclusion_flag = flag
    store.flush()
    logger.info("Employee mapping %s inclusion set to %s", mapping_id, flag)
    return row


def save_mapping_changes(store: MappingStore, mappings: Iterable[dict]) -> int:
    """
    Replace stored per-employee mappings by id, keeping their position.

    Ids that are not in the store are skipped. Returns how many rows were replaced.
    """
    replaced = 0
    for incoming in mappings:
        row = store.get_employee_mapping(incoming["id"])
        if not row:
            continue
        for field in _REPLACEABLE_FIELDS:
            if field in incoming:
                setattr(row, field, incoming[field])
        replaced += 1
    store.flush()
    logger.info("Saved %d employee mapping change(s)", replaced)
    return replaced
