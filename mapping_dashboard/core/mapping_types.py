"""
Mapping predicates and how they select employees.

A predicate is a (type, value) pair. The type names one of the employee's id
fields; the predicate matches when that field equals the value. Types arrive in
two spellings: camelCase on report criteria and per-employee mappings
("teamId"), snake_case on aggregate mapping records ("team_id").
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from mapping_dashboard.models.employee import Employee


class MappingType(str, Enum):
    EMPLOYEE_ID = "employeeId"
    TEAM_ID = "teamId"
    AREA_ID = "areaId"
    CITY_ID = "cityId"
    COUNTRY_ID = "countryId"

    @property
    def snake(self) -> str:
        """teamId -> team_id"""
        return self.value[:-2] + "_id"

    @classmethod
    def parse(cls, raw: str | None) -> "MappingType | None":
        """Accept either spelling; anything else is None."""
        if not raw:
            return None
        for t in cls:
            if raw == t.value or raw == t.snake:
                return t
        return None


_ACCESSORS: dict[MappingType, Callable[[Employee], str | None]] = {
    MappingType.EMPLOYEE_ID: lambda e: e.id,
    MappingType.TEAM_ID: lambda e: e.team_id,
    MappingType.AREA_ID: lambda e: e.area_id,
    MappingType.CITY_ID: lambda e: e.city_id,
    MappingType.COUNTRY_ID: lambda e: e.country_id,
}


@dataclass(frozen=True)
class Predicate:
    type: str
    value: str


def field_value(employee: Employee, mapping_type: MappingType) -> str | None:
    return _ACCESSORS[mapping_type](employee)


def matches(employee: Employee, predicate: Predicate) -> bool:
    # unknown types never match
    mapping_type = MappingType.parse(predicate.type)
    if mapping_type is None:
        return False
    return field_value(employee, mapping_type) == predicate.value
