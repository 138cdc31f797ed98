"""Incomplete-mapping detection, computed from the per-employee mappings on every call."""

from collections import defaultdict
from dataclasses import dataclass

from mapping_dashboard.db.store import MappingStore
from mapping_dashboard.models.employee import Employee


@dataclass
class EmployeeCoverage:
    employee: Employee
    report_count: int
    mapped_reports: str | None


def employee_coverage(store: MappingStore) -> list[EmployeeCoverage]:
    counts: dict[str, int] = defaultdict(int)
    names: dict[str, list[str]] = defaultdict(list)
    for m in store.list_employee_mappings(included_only=True):
        counts[m.employee_id] += 1
        if m.report_name not in names[m.employee_id]:
            names[m.employee_id].append(m.report_name)

    return [
        EmployeeCoverage(
            employee=e,
            report_count=counts.get(e.id, 0),
            mapped_reports=", ".join(names[e.id]) if names.get(e.id) else None,
        )
        for e in store.list_employees()
    ]


def list_incomplete_mappings(store: MappingStore, threshold: int = 2) -> list[EmployeeCoverage]:
    """Employees with fewer than `threshold` included report mappings."""
    return [c for c in employee_coverage(store) if c.report_count < threshold]
