from dataclasses import dataclass, field

from mapping_dashboard.core.errors import NotFound
from mapping_dashboard.db.store import MappingStore
from mapping_dashboard.models.employee import Employee


@dataclass
class MappedReport:
    id: str
    name: str
    region: str
    mapping_type: str


@dataclass
class EmployeeDetails:
    employee: Employee
    supervisor: Employee | None
    reports: list[MappedReport] = field(default_factory=list)


def get_employee_details(store: MappingStore, employee_id: str) -> EmployeeDetails:
    employee = store.get_employee(employee_id)
    if not employee:
        raise NotFound("Employee not found", employee_id=employee_id)

    supervisor = store.get_employee(employee.supervisor_id) if employee.supervisor_id else None

    reports_by_name = {r.name: r for r in store.list_reports()}
    mapped: list[MappedReport] = []
    for m in store.list_employee_mappings(employee_id=employee_id, included_only=True):
        report = reports_by_name.get(m.report_name)
        # mappings can outlive their report
        if report is None:
            continue
        mapped.append(MappedReport(id=report.id, name=report.name, region=report.region, mapping_type=m.mapping_type))

    return EmployeeDetails(employee=employee, supervisor=supervisor, reports=mapped)
