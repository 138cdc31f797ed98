from fastapi import APIRouter, Depends, Query

from mapping_dashboard.api.employees import employee_to_out
from mapping_dashboard.core.config import settings
from mapping_dashboard.core.coverage import list_incomplete_mappings
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.schemas.employee import EmployeeWithMappingsOut

router = APIRouter(prefix="/incomplete-mappings", tags=["incomplete-mappings"])


@router.get("", response_model=list[EmployeeWithMappingsOut])
def get_incomplete_mappings(
    threshold: int | None = Query(default=None, ge=1, description="Defaults to INCOMPLETE_MAPPING_THRESHOLD"),
    store: MappingStore = Depends(get_store),
):
    limit = threshold or settings.INCOMPLETE_MAPPING_THRESHOLD
    return [
        EmployeeWithMappingsOut(
            **employee_to_out(c.employee).model_dump(),
            report_count=c.report_count,
            mapped_reports=c.mapped_reports,
        )
        for c in list_incomplete_mappings(store, limit)
    ]
