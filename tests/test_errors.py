import pytest
from sqlalchemy.exc import SQLAlchemyError

from mapping_dashboard.db import session as session_module
from mapping_dashboard.db.session import get_db
from mapping_dashboard.db.store import MappingStore
from mapping_dashboard.main import app

PARIS = {"report_name": "London Team Analysis", "mapping_type": "cityId", "mapping_value": "paris"}


def _broken(*args, **kwargs):
    raise SQLAlchemyError("connection lost")


@pytest.fixture()
def transactional_client(db_session, session_factory, client, monkeypatch):
    """Client whose requests go through get_db itself, committing or rolling back on a fresh session."""
    db_session.commit()
    monkeypatch.setattr(session_module, "SessionLocal", session_factory)
    app.dependency_overrides.pop(get_db, None)
    return client


def _paris_records(session_factory):
    db = session_factory()
    try:
        return [
            m
            for m in MappingStore(db).list_mapping_records(report_name="London Team Analysis")
            if m.mapping_type == "city_id" and m.mapping_id == "paris"
        ]
    finally:
        db.close()


@pytest.mark.parametrize(
    "method, path, patched",
    [
        ("get", "/employee-mappings?report_name=Q1 Sales Performance", "list_employee_mappings"),
        ("get", "/incomplete-mappings", "list_employee_mappings"),
        ("get", "/mappings", "list_mapping_records"),
        ("get", "/employees/emp-101", "get_employee"),
        ("get", "/uploads", "list_uploads"),
    ],
)
def test_database_errors_are_reported_as_internal(client, monkeypatch, method, path, patched):
    """Test that a failing store query comes back as a categorised 500"""
    monkeypatch.setattr(MappingStore, patched, _broken)

    r = getattr(client, method)(path)

    assert r.status_code == 500
    assert r.json() == {"error": "internal", "detail": "Database error"}


def test_database_error_on_inclusion_flag_update(client, monkeypatch):
    """Test that PATCH /employee-mappings reports a database failure as internal"""
    monkeypatch.setattr(MappingStore, "get_employee_mapping", _broken)

    r = client.patch("/employee-mappings/em-1", json={"inclusion_flag": "No"})

    assert r.status_code == 500
    assert r.json()["error"] == "internal"


def test_add_mapping_commits_both_rows(transactional_client, session_factory):
    """Test that a successful add is committed by the request session"""
    r = transactional_client.post("/mappings", json=PARIS)

    assert r.status_code == 200
    assert r.json()["employee_mapping_id"] is not None
    assert len(_paris_records(session_factory)) == 1


def test_failed_employee_mapping_rolls_back_aggregate_record(transactional_client, session_factory, monkeypatch):
    """Test that when the per-employee row cannot be written the aggregate record is not kept"""
    monkeypatch.setattr(MappingStore, "add_employee_mapping", _broken)

    r = transactional_client.post("/mappings", json=PARIS)

    assert r.status_code == 500
    assert r.json()["error"] == "internal"
    assert _paris_records(session_factory) == []
