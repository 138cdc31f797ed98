from fastapi import APIRouter, Depends, Query

from mapping_dashboard.core.employee_details import get_employee_details
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.models.employee import Employee
from mapping_dashboard.schemas.employee import (
    EmployeeDetailsOut,
    EmployeeOut,
    MappedReportOut,
    SupervisorSummary,
)
from mapping_dashboard.schemas.pagination import PaginatedResponse

router = APIRouter(prefix="/employees", tags=["employees"])


def employee_to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=e.id,
        name=e.name,
        title=e.title,
        team_id=e.team_id,
        team_name=e.team_name,
        area_id=e.area_id,
        city_id=e.city_id,
        city_name=e.city_name,
        country_id=e.country_id,
        country_name=e.country_name,
        location=e.location,
        supervisor_id=e.supervisor_id,
    )


@router.get("")
def list_employees(
    search: str | None = Query(default=None, description="Search by employee id or name"),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
    include_pagination: bool = Query(default=False, description="Include pagination metadata"),
    store: MappingStore = Depends(get_store),
):
    """
    List employees in roster order with optional search and pagination.

    Use ?include_pagination=true to get pagination metadata.
    """
    total = store.count_employees(search=search)
    items = [employee_to_out(e) for e in store.list_employees(search=search, limit=limit, offset=offset)]

    if include_pagination:
        return PaginatedResponse.from_slice(items, total=total, limit=limit, offset=offset)
    return items


@router.get("/{employee_id}", response_model=EmployeeDetailsOut)
def get_employee(
    employee_id: str,
    store: MappingStore = Depends(get_store),
):
    """
    Employee details with supervisor summary and the reports the employee is included in.
    """
    details = get_employee_details(store, employee_id)
    e = details.employee
    return EmployeeDetailsOut(
        **employee_to_out(e).model_dump(),
        email=e.email,
        phone=e.phone,
        join_date=e.join_date,
        supervisor=(
            SupervisorSummary(id=details.supervisor.id, name=details.supervisor.name)
            if details.supervisor
            else None
        ),
        reports=[
            MappedReportOut(id=r.id, name=r.name, region=r.region, mapping_type=r.mapping_type)
            for r in details.reports
        ],
    )
