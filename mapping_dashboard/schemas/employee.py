from datetime import date
from pydantic import BaseModel


class EmployeeOut(BaseModel):
    id: str
    name: str
    title: str
    team_id: str
    team_name: str
    area_id: str
    city_id: str
    city_name: str
    country_id: str
    country_name: str
    location: str
    supervisor_id: str | None


class SupervisorSummary(BaseModel):
    id: str
    name: str


class MappedReportOut(BaseModel):
    id: str
    name: str
    region: str
    mapping_type: str


class EmployeeDetailsOut(EmployeeOut):
    email: str | None
    phone: str | None
    join_date: date | None
    supervisor: SupervisorSummary | None
    reports: list[MappedReportOut]


class EmployeeWithMappingsOut(EmployeeOut):
    """Employee annotated with how many included report mappings it has"""
    report_count: int
    mapped_reports: str | None
