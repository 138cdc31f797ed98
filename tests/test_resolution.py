import pytest

from mapping_dashboard.core.errors import NotFound
from mapping_dashboard.core.mapping_types import Predicate, matches
from mapping_dashboard.core.resolution import criteria_from_records, resolve_employees, resolve_report
from mapping_dashboard.models.mapping_record import MappingRecord
from tests.helpers import ids, make_employee


def test_any_predicate_is_enough():
    """Test one matching predicate is enough to resolve an employee"""
    a = make_employee("a", team_id="t1", city_id="c1")
    b = make_employee("b", team_id="t2", city_id="c2")
    c = make_employee("c", team_id="t3", city_id="c1")

    result = resolve_employees([a, b, c], [Predicate("teamId", "t2"), Predicate("cityId", "c1")])
    assert ids(result) == ["a", "b", "c"]


def test_empty_criteria_selects_nobody():
    """Test empty criteria resolve to nobody"""
    assert resolve_employees([make_employee("a"), make_employee("b")], []) == []


def test_resolution_agrees_with_evaluator(store):
    """Test resolution selects exactly the employees the evaluator matches"""
    criteria = [Predicate("teamId", "team-support"), Predicate("cityId", "london")]
    employees = store.list_employees()
    selected = set(ids(resolve_employees(employees, criteria)))
    for e in employees:
        assert (e.id in selected) == any(matches(e, p) for p in criteria)


def test_criteria_skip_inactive_and_excluded_records():
    """Test criteria ignore inactive and excluded records"""
    records = [
        MappingRecord(id="1", report_name="R", mapping_type="team_id", mapping_id="t", inclusion_flag="Yes", active_flag="Y"),
        MappingRecord(id="2", report_name="R", mapping_type="city_id", mapping_id="c", inclusion_flag="No", active_flag="Y"),
        MappingRecord(id="3", report_name="R", mapping_type="area_id", mapping_id="a", inclusion_flag="Yes", active_flag="N"),
    ]
    assert criteria_from_records(records) == [Predicate("teamId", "t")]


def test_resolve_seeded_report(store):
    """Test resolving a seeded report"""
    # team-sales OR country usa; the opted-out area_id record adds nothing
    result = ids(resolve_report(store, "Q1 Sales Performance"))
    assert result == ["emp-101", "emp-102", "emp-103", "emp-104", "emp-201", "emp-202", "emp-301", "emp-302", "emp-401"]


def test_resolve_city_report(store):
    """Test resolving a report keyed on a city"""
    assert ids(resolve_report(store, "London Team Analysis")) == ["emp-201", "emp-203"]


def test_resolve_unknown_report(store):
    """Test resolving an unknown report raises NotFound"""
    with pytest.raises(NotFound):
        resolve_report(store, "No Such Report")


def test_report_employees_endpoint(client):
    """Test GET /reports/{name}/employees"""
    r = client.get("/reports/Tokyo Office Metrics/employees")
    assert r.status_code == 200
    assert [e["id"] for e in r.json()] == ["emp-301", "emp-304"]


def test_report_employees_endpoint_not_found(client):
    """Test GET /reports/{name}/employees for an unknown report"""
    r = client.get("/reports/Nope/employees")
    assert r.status_code == 404
    assert r.json()["error"] == "not_found"


def test_report_without_included_criteria_resolves_empty(client, store):
    """Test a report whose criteria are all excluded resolves empty"""
    for record in store.list_mapping_records(report_name="Tokyo Office Metrics"):
        record.active_flag = "N"
    store.flush()

    r = client.get("/reports/Tokyo Office Metrics/employees")
    assert r.status_code == 200
    assert r.json() == []
