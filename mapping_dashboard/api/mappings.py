from fastapi import APIRouter, Depends, Query

from mapping_dashboard.core.reconciliation import add_mapping
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.models.mapping_record import MappingRecord
from mapping_dashboard.schemas.mapping import AddMappingRequest, AddMappingResponse, MappingRecordOut

router = APIRouter(prefix="/mappings", tags=["mappings"])


def to_out(m: MappingRecord) -> MappingRecordOut:
    return MappingRecordOut(
        id=m.id,
        report_name=m.report_name,
        mapping_type=m.mapping_type,
        mapping_id=m.mapping_id,
        inclusion_flag=m.inclusion_flag,
        active_flag=m.active_flag,
    )


@router.get("", response_model=list[MappingRecordOut])
def list_active_mappings(
    report_name: str | None = Query(default=None, description="Only mappings of this report"),
    store: MappingStore = Depends(get_store),
):
    """Mapping records with active_flag Y, in store order. Feeds the spreadsheet export."""
    return [to_out(m) for m in store.list_mapping_records(report_name=report_name, active_only=True)]


@router.post("", response_model=AddMappingResponse)
def create_mapping(
    payload: AddMappingRequest,
    store: MappingStore = Depends(get_store),
):
    """
    Add a criterion to a report, or re-activate it if it already exists.

    Send either employee_id (value taken from that employee) or mapping_value.
    """
    result = add_mapping(
        store,
        report_name=payload.report_name,
        mapping_type=payload.mapping_type,
        employee_id=payload.employee_id,
        mapping_value=payload.mapping_value,
    )
    return AddMappingResponse(
        success=result.success,
        message=result.message,
        mapping_id=result.mapping_record.id,
        employee_mapping_id=result.employee_mapping.id if result.employee_mapping else None,
    )
