from fastapi import APIRouter, Depends, Query

from mapping_dashboard.core.errors import InvalidInput
from mapping_dashboard.core.reconciliation import save_mapping_changes, set_inclusion_flag
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.models.employee_mapping import EmployeeMapping
from mapping_dashboard.schemas.mapping import (
    EmployeeMappingChange,
    EmployeeMappingOut,
    InclusionFlagUpdate,
    SaveMappingChangesResponse,
)

router = APIRouter(prefix="/employee-mappings", tags=["employee-mappings"])


def to_out(m: EmployeeMapping) -> EmployeeMappingOut:
    return EmployeeMappingOut(
        id=m.id,
        employee_id=m.employee_id,
        employee_name=m.employee_name,
        report_name=m.report_name,
        mapping_type=m.mapping_type,
        mapping_value=m.mapping_value,
        inclusion_flag=m.inclusion_flag,
    )


@router.get("", response_model=list[EmployeeMappingOut])
def list_employee_mappings(
    report_name: str | None = Query(default=None),
    store: MappingStore = Depends(get_store),
):
    if not report_name:
        raise InvalidInput("Report name is required")
    return [to_out(m) for m in store.list_employee_mappings(report_name=report_name)]


@router.patch("/{mapping_id}", response_model=EmployeeMappingOut)
def update_inclusion_flag(
    mapping_id: str,
    payload: InclusionFlagUpdate,
    store: MappingStore = Depends(get_store),
):
    return to_out(set_inclusion_flag(store, mapping_id, payload.inclusion_flag))


@router.put("", response_model=SaveMappingChangesResponse)
def save_changes(
    payload: list[EmployeeMappingChange],
    store: MappingStore = Depends(get_store),
):
    """Bulk replace by id. Rows whose id is unknown are ignored."""
    updated = save_mapping_changes(store, [m.model_dump() for m in payload])
    return SaveMappingChangesResponse(success=True, updated=updated)
