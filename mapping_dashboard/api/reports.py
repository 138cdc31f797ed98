from fastapi import APIRouter, Depends

from mapping_dashboard.api.employees import employee_to_out
from mapping_dashboard.api.org_chart import node_to_out
from mapping_dashboard.core.org_chart import build_org_chart
from mapping_dashboard.core.resolution import get_report_or_404, report_criteria, resolve_report
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.models.report import Report
from mapping_dashboard.schemas.employee import EmployeeOut
from mapping_dashboard.schemas.report import OrgNodeOut, PredicateOut, ReportOut

router = APIRouter(prefix="/reports", tags=["reports"])


def to_out(store: MappingStore, r: Report) -> ReportOut:
    return ReportOut(
        id=r.id,
        name=r.name,
        region=r.region,
        supervisors=list(r.supervisors or []),
        mappings=[PredicateOut(type=p.type, value=p.value) for p in report_criteria(store, r)],
    )


@router.get("", response_model=list[ReportOut])
def list_reports(store: MappingStore = Depends(get_store)):
    return [to_out(store, r) for r in store.list_reports()]


@router.get("/{report_name}", response_model=ReportOut)
def get_report(report_name: str, store: MappingStore = Depends(get_store)):
    return to_out(store, get_report_or_404(store, report_name))


@router.get("/{report_name}/employees", response_model=list[EmployeeOut])
def list_matching_employees(report_name: str, store: MappingStore = Depends(get_store)):
    """Employees selected by any of the report's active, included criteria."""
    return [employee_to_out(e) for e in resolve_report(store, report_name)]


@router.get("/{report_name}/org-chart", response_model=list[OrgNodeOut])
def get_report_org_chart(report_name: str, store: MappingStore = Depends(get_store)):
    """
    Org chart rooted at the report's supervisors. Nodes are flagged when the
    employee is one of those supervisors or has an included mapping on the report.
    """
    report = get_report_or_404(store, report_name)
    mapped_ids = {m.employee_id for m in store.list_employee_mappings(report_name=report.name, included_only=True)}
    forest = build_org_chart(store.list_employees(), list(report.supervisors or []), mapped_ids)
    return [node_to_out(n) for n in forest]
