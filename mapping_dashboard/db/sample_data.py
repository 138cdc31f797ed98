"""
Demo roster, reports and mappings loaded into an empty store.

Report criteria are not listed on the reports themselves; they are the active,
included rows of MAPPING_RECORDS.
"""

from sqlalchemy.orm import Session

from mapping_dashboard.models.employee import Employee
from mapping_dashboard.models.employee_mapping import EmployeeMapping
from mapping_dashboard.models.mapping_record import MappingRecord
from mapping_dashboard.models.report import Report

REPORTS = [
    {"id": "report-1", "name": "Q1 Sales Performance", "region": "AMER", "supervisors": ["emp-101", "emp-102"]},
    {"id": "report-2", "name": "European Marketing Metrics", "region": "EMEA", "supervisors": ["emp-203"]},
    {"id": "report-3", "name": "APAC Customer Support", "region": "APAC", "supervisors": ["emp-304", "emp-305"]},
    {
        "id": "report-4",
        "name": "Global Executive Summary",
        "region": "AMER",
        "supervisors": ["emp-101", "emp-203", "emp-304"],
    },
    {"id": "report-5", "name": "New York Office Performance", "region": "AMER", "supervisors": ["emp-102"]},
    {"id": "report-6", "name": "London Team Analysis", "region": "EMEA", "supervisors": ["emp-203"]},
    {"id": "report-7", "name": "Tokyo Office Metrics", "region": "APAC", "supervisors": ["emp-305"]},
]

_TEAMS = {
    "team-sales": "Sales",
    "team-marketing": "Marketing",
    "team-support": "Customer Support",
    "team-executive": "Executive",
}
_CITIES = {
    "nyc": ("New York", "usa", "USA"),
    "sf": ("San Francisco", "usa", "USA"),
    "london": ("London", "uk", "UK"),
    "paris": ("Paris", "france", "France"),
    "tokyo": ("Tokyo", "japan", "Japan"),
    "singapore": ("Singapore", "singapore", "Singapore"),
    "sydney": ("Sydney", "australia", "Australia"),
}

# (id, name, team, area, city, supervisor, title)
_ROSTER = [
    ("emp-101", "John Smith", "team-sales", "area-north-america", "nyc", "emp-401", "Sales Director"),
    ("emp-102", "Sarah Johnson", "team-sales", "area-north-america", "sf", "emp-101", "Sales Manager"),
    ("emp-103", "Michael Brown", "team-marketing", "area-north-america", "nyc", "emp-102", "Marketing Specialist"),
    ("emp-104", "Emily Davis", "team-support", "area-north-america", "nyc", "emp-102", "Support Lead"),
    ("emp-201", "James Wilson", "team-sales", "area-europe", "london", "emp-101", "Sales Manager"),
    ("emp-202", "Emma Taylor", "team-sales", "area-europe", "paris", "emp-201", "Sales Representative"),
    ("emp-203", "Daniel Martinez", "team-marketing", "area-europe", "london", "emp-401", "Marketing Director"),
    ("emp-301", "Sophia Chen", "team-sales", "area-apac", "tokyo", "emp-101", "Sales Manager"),
    ("emp-302", "William Kim", "team-sales", "area-apac", "singapore", "emp-301", "Sales Representative"),
    ("emp-303", "Olivia Wang", "team-marketing", "area-apac", "sydney", "emp-203", "Marketing Specialist"),
    ("emp-304", "Ethan Tanaka", "team-support", "area-apac", "tokyo", "emp-401", "Support Director"),
    ("emp-305", "Ava Patel", "team-support", "area-apac", "singapore", "emp-304", "Support Manager"),
    ("emp-401", "Noah Garcia", "team-executive", "area-global", "nyc", None, "Chief Executive Officer"),
]


def _employee_row(emp_id, name, team, area, city, supervisor, title) -> dict:
    city_name, country_id, country_name = _CITIES[city]
    location = city_name if city_name == country_name else f"{city_name}, {country_name}"
    return {
        "id": emp_id,
        "name": name,
        "title": title,
        "team_id": team,
        "team_name": _TEAMS[team],
        "area_id": area,
        "city_id": city,
        "city_name": city_name,
        "country_id": country_id,
        "country_name": country_name,
        "location": location,
        "supervisor_id": supervisor,
        "email": f"{name.lower().replace(' ', '.')}@company.com",
    }


EMPLOYEES = [_employee_row(*r) for r in _ROSTER]

# (id, report, type, value, inclusion, active)
_RECORDS = [
    ("map-1", "Q1 Sales Performance", "team_id", "team-sales", "Yes", "Y"),
    ("map-2", "Q1 Sales Performance", "country_id", "usa", "Yes", "Y"),
    ("map-3", "European Marketing Metrics", "team_id", "team-marketing", "Yes", "Y"),
    ("map-4", "European Marketing Metrics", "area_id", "area-europe", "Yes", "Y"),
    ("map-5", "APAC Customer Support", "team_id", "team-support", "Yes", "Y"),
    ("map-6", "APAC Customer Support", "area_id", "area-apac", "Yes", "Y"),
    ("map-7", "Global Executive Summary", "employee_id", "emp-101", "Yes", "Y"),
    ("map-8", "Global Executive Summary", "employee_id", "emp-203", "Yes", "Y"),
    ("map-9", "Global Executive Summary", "employee_id", "emp-304", "Yes", "Y"),
    ("map-10", "Global Executive Summary", "employee_id", "emp-401", "Yes", "Y"),
    ("map-11", "New York Office Performance", "city_id", "nyc", "Yes", "Y"),
    ("map-12", "London Team Analysis", "city_id", "london", "Yes", "Y"),
    ("map-13", "Tokyo Office Metrics", "city_id", "tokyo", "Yes", "Y"),
    # retired criteria
    ("map-14", "Q1 Sales Performance", "employee_id", "emp-105", "No", "N"),
    ("map-15", "European Marketing Metrics", "country_id", "germany", "No", "N"),
    ("map-16", "APAC Customer Support", "employee_id", "emp-306", "No", "N"),
    # opted out but still active
    ("map-17", "Q1 Sales Performance", "area_id", "area-north-america", "No", "Y"),
    ("map-18", "European Marketing Metrics", "city_id", "london", "No", "Y"),
    ("map-19", "APAC Customer Support", "country_id", "japan", "No", "Y"),
    ("map-20", "Global Executive Summary", "team_id", "team-executive", "No", "Y"),
]

MAPPING_RECORDS = [
    {
        "id": i,
        "report_name": report,
        "mapping_type": t,
        "mapping_id": v,
        "inclusion_flag": inc,
        "active_flag": act,
    }
    for i, report, t, v, inc, act in _RECORDS
]

_NAMES = {r[0]: r[1] for r in _ROSTER}

# (id, employee, report, type, value, inclusion)
_EMPLOYEE_MAPPINGS = [
    ("em-1", "emp-101", "Q1 Sales Performance", "teamId", "team-sales", "Yes"),
    ("em-2", "emp-102", "Q1 Sales Performance", "teamId", "team-sales", "Yes"),
    ("em-3", "emp-201", "Q1 Sales Performance", "teamId", "team-sales", "Yes"),
    ("em-4", "emp-101", "Q1 Sales Performance", "countryId", "usa", "Yes"),
    ("em-5", "emp-102", "Q1 Sales Performance", "countryId", "usa", "Yes"),
    ("em-6", "emp-103", "Q1 Sales Performance", "countryId", "usa", "No"),
    ("em-7", "emp-103", "European Marketing Metrics", "teamId", "team-marketing", "Yes"),
    ("em-8", "emp-203", "European Marketing Metrics", "teamId", "team-marketing", "Yes"),
    ("em-9", "emp-104", "APAC Customer Support", "teamId", "team-support", "Yes"),
    ("em-10", "emp-304", "APAC Customer Support", "teamId", "team-support", "Yes"),
    ("em-11", "emp-305", "APAC Customer Support", "teamId", "team-support", "No"),
    ("em-12", "emp-101", "Global Executive Summary", "employeeId", "emp-101", "Yes"),
    ("em-13", "emp-203", "Global Executive Summary", "employeeId", "emp-203", "Yes"),
    ("em-14", "emp-304", "Global Executive Summary", "employeeId", "emp-304", "Yes"),
    ("em-15", "emp-401", "Global Executive Summary", "employeeId", "emp-401", "No"),
]

EMPLOYEE_MAPPINGS = [
    {
        "id": i,
        "employee_id": emp,
        "employee_name": _NAMES[emp],
        "report_name": report,
        "mapping_type": t,
        "mapping_value": v,
        "inclusion_flag": inc,
    }
    for i, emp, report, t, v, inc in _EMPLOYEE_MAPPINGS
]


def load_sample_data(db: Session) -> None:
    """Insert the demo dataset. Expects empty tables; does not commit."""
    # supervisors are linked after every employee row exists (self-referencing FK)
    employees = []
    for seq, row in enumerate(EMPLOYEES, start=1):
        e = Employee(seq=seq, **{**row, "supervisor_id": None})
        db.add(e)
        employees.append((e, row["supervisor_id"]))
    db.flush()
    for e, supervisor_id in employees:
        e.supervisor_id = supervisor_id
    db.flush()

    for seq, row in enumerate(REPORTS, start=1):
        db.add(Report(seq=seq, **row))
    for seq, row in enumerate(MAPPING_RECORDS, start=1):
        db.add(MappingRecord(seq=seq, **row))
    for seq, row in enumerate(EMPLOYEE_MAPPINGS, start=1):
        db.add(EmployeeMapping(seq=seq, **row))
    db.flush()
