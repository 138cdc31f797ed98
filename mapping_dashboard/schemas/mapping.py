from typing import Literal
from pydantic import BaseModel, Field


class AddMappingRequest(BaseModel):
    # All optional here so missing fields come back as invalid_input, not a 422
    report_name: str | None = None
    mapping_type: str | None = None
    employee_id: str | None = None
    mapping_value: str | None = None


class AddMappingResponse(BaseModel):
    success: bool
    message: str
    mapping_id: str
    employee_mapping_id: str | None = None


class MappingRecordOut(BaseModel):
    id: str
    report_name: str
    mapping_type: str
    mapping_id: str
    inclusion_flag: Literal["Yes", "No"]
    active_flag: Literal["Y", "N"]


class EmployeeMappingOut(BaseModel):
    id: str
    employee_id: str
    employee_name: str
    report_name: str
    mapping_type: str
    mapping_value: str
    inclusion_flag: Literal["Yes", "No"]


class InclusionFlagUpdate(BaseModel):
    inclusion_flag: str


class EmployeeMappingChange(BaseModel):
    """Full replacement of one stored employee mapping, matched by id"""
    id: str = Field(min_length=1)
    employee_id: str
    employee_name: str
    report_name: str
    mapping_type: str
    mapping_value: str
    inclusion_flag: Literal["Yes", "No"]


class SaveMappingChangesResponse(BaseModel):
    success: bool
    updated: int
