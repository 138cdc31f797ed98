"""Report resolution: which employees a report's criteria select."""

import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError

from mapping_dashboard.core.errors import Internal, NotFound
from mapping_dashboard.core.mapping_types import MappingType, Predicate, matches
from mapping_dashboard.db.store import MappingStore
from mapping_dashboard.models.employee import Employee
from mapping_dashboard.models.mapping_record import MappingRecord
from mapping_dashboard.models.report import Report

logger = logging.getLogger(__name__)


def criteria_from_records(records: Iterable[MappingRecord]) -> list[Predicate]:
    """
    Turn aggregate records into report criteria.

    Inactive records (active_flag N) and opted-out records (inclusion_flag No)
    contribute nothing. Record types are reported in camelCase; an unrecognised
    type is passed through untouched and will simply never match.
    """
    out: list[Predicate] = []
    for r in records:
        if r.active_flag != "Y" or r.inclusion_flag != "Yes":
            continue
        t = MappingType.parse(r.mapping_type)
        out.append(Predicate(type=t.value if t else r.mapping_type, value=r.mapping_id))
    return out


def report_criteria(store: MappingStore, report: Report) -> list[Predicate]:
    return criteria_from_records(store.list_mapping_records(report_name=report.name))


def resolve_employees(employees: Iterable[Employee], criteria: list[Predicate]) -> list[Employee]:
    """Employees matching any predicate, in input order. No criteria selects nobody."""
    if not criteria:
        return []
    return [e for e in employees if any(matches(e, p) for p in criteria)]


def get_report_or_404(store: MappingStore, report_name: str) -> Report:
    report = store.get_report_by_name(report_name)
    if not report:
        raise NotFound("Report not found", report_name=report_name)
    return report


def resolve_report(store: MappingStore, report_name: str) -> list[Employee]:
    report = get_report_or_404(store, report_name)
    try:
        criteria = report_criteria(store, report)
        return resolve_employees(store.list_employees(), criteria)
    except SQLAlchemyError as exc:
        logger.exception("Resolving report %r failed", report_name)
        raise Internal("Failed to fetch matching employees") from exc
