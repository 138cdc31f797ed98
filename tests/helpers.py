from mapping_dashboard.models.employee import Employee


def make_employee(emp_id: str, supervisor_id: str | None = None, **overrides) -> Employee:
    """Transient employee for the pure engine functions; never added to a session."""
    fields = dict(
        id=emp_id,
        name=overrides.pop("name", emp_id.title()),
        title="Staff",
        team_id="team-x",
        team_name="Team X",
        area_id="area-x",
        city_id="city-x",
        city_name="City X",
        country_id="country-x",
        country_name="Country X",
        location="City X, Country X",
        supervisor_id=supervisor_id,
    )
    fields.update(overrides)
    return Employee(**fields)


def ids(employees) -> list[str]:
    return [e.id for e in employees]


def walk(nodes, depth=0):
    """Yield (depth, employee_id) for every node of an org chart, depth first."""
    for n in nodes:
        yield depth, n.employee.id
        yield from walk(n.children, depth + 1)
