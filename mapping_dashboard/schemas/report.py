from pydantic import BaseModel

from mapping_dashboard.schemas.employee import EmployeeOut


class PredicateOut(BaseModel):
    type: str
    value: str


class ReportOut(BaseModel):
    id: str
    name: str
    region: str
    supervisors: list[str]
    mappings: list[PredicateOut]


class OrgNodeOut(BaseModel):
    employee: EmployeeOut
    expanded: bool = True
    is_supervisor: bool = False
    is_mapped: bool = False
    children: list["OrgNodeOut"] = []


OrgNodeOut.model_rebuild()
