from collections import Counter

from mapping_dashboard.api.org_chart import node_to_out
from mapping_dashboard.core.org_chart import build_org_chart, collect_org_members
from tests.helpers import ids, make_employee, walk


def test_ceo_chart_surfaces_each_report_once(store):
    """Test the chart under the CEO holds every employee exactly once"""
    forest = build_org_chart(store.list_employees(), ["emp-401"])

    assert len(forest) == 1
    root = forest[0]
    assert root.employee.name == "Noah Garcia"
    assert root.expanded is True

    john = next(c for c in root.children if c.employee.name == "John Smith")
    assert {c.employee.name for c in john.children} == {"Sarah Johnson", "James Wilson", "Sophia Chen"}

    counts = Counter(emp_id for _, emp_id in walk(forest))
    assert len(counts) == 13
    assert set(counts.values()) == {1}


def test_nested_supervisor_is_not_repeated_as_root(store):
    """Test a supervisor below another listed supervisor is not its own root"""
    # Sarah Johnson reports to John Smith; both are listed for the Q1 report
    forest = build_org_chart(store.list_employees(), ["emp-101", "emp-102"])

    assert [n.employee.id for n in forest] == ["emp-101"]
    nodes = dict((emp_id, depth) for depth, emp_id in walk(forest))
    assert nodes["emp-102"] == 1
    assert nodes["emp-103"] == 2
    assert Counter(emp_id for _, emp_id in walk(forest)).most_common(1)[0][1] == 1


def test_tree_and_member_set_agree(store):
    """Test the tree holds exactly the collected members"""
    employees = store.list_employees()
    supervisors = ["emp-304", "emp-203", "emp-102"]

    members = collect_org_members(employees, supervisors)
    forest = build_org_chart(employees, supervisors)

    assert sorted(ids(members)) == sorted(emp_id for _, emp_id in walk(forest))
    assert ids(members) == ["emp-102", "emp-103", "emp-104", "emp-203", "emp-303", "emp-304", "emp-305"]


def test_unknown_supervisors_are_ignored(store):
    """Test unknown supervisor ids produce no nodes"""
    assert build_org_chart(store.list_employees(), ["emp-000"]) == []
    assert collect_org_members(store.list_employees(), []) == []


def test_flags():
    """Test supervisor and mapped flags on chart nodes"""
    boss = make_employee("boss")
    a = make_employee("a", "boss")
    b = make_employee("b", "boss")

    forest = build_org_chart([boss, a, b], ["boss"], mapped_ids={"b"})

    root = forest[0]
    assert root.is_supervisor and not root.is_mapped
    assert [(c.employee.id, c.is_supervisor, c.is_mapped) for c in root.children] == [
        ("a", False, False),
        ("b", False, True),
    ]


def test_cycle_terminates():
    """Test a reporting cycle terminates with each member once"""
    x = make_employee("x", "y")
    y = make_employee("y", "x")
    z = make_employee("z", "y")

    forest = build_org_chart([x, y, z], ["x"])
    assert [emp_id for _, emp_id in walk(forest)] == ["x", "y", "z"]

    # both members of the cycle listed: still one tree, each once
    forest = build_org_chart([x, y, z], ["x", "y"])
    assert len(forest) == 1
    assert sorted(emp_id for _, emp_id in walk(forest)) == ["x", "y", "z"]


def _chain(depth):
    return [make_employee(f"e{i}", f"e{i - 1}" if i else None) for i in range(depth)]


def test_deep_reporting_chain():
    """Test a reporting chain deeper than the recursion limit builds and converts"""
    employees = _chain(3000)

    forest = build_org_chart(employees, ["e0"])

    node, depth = forest[0], 0
    while node.children:
        assert len(node.children) == 1
        node, depth = node.children[0], depth + 1
    assert (node.employee.id, depth) == ("e2999", 2999)

    out = node_to_out(forest[0])
    while out.children:
        out = out.children[0]
    assert out.employee.id == "e2999"


def test_org_chart_endpoint(client):
    """Test GET /org-chart for the CEO"""
    r = client.get("/org-chart", params={"supervisor_id": "emp-401"})
    assert r.status_code == 200
    forest = r.json()
    assert forest[0]["employee"]["name"] == "Noah Garcia"
    assert forest[0]["is_supervisor"] is True
    assert forest[0]["children"][0]["employee"]["name"] == "John Smith"


def test_org_chart_endpoint_requires_supervisor(client):
    """Test GET /org-chart without supervisor ids is rejected"""
    assert client.get("/org-chart").status_code == 400


def test_report_org_chart_marks_mapped_employees(client):
    """Test the report org chart marks included employees as mapped"""
    r = client.get("/reports/APAC Customer Support/org-chart")
    assert r.status_code == 200
    forest = r.json()

    # Ava Patel reports to Ethan Tanaka, so only one root
    assert [n["employee"]["id"] for n in forest] == ["emp-304"]
    ethan = forest[0]
    assert ethan["is_mapped"] is True
    ava = ethan["children"][0]
    assert ava["employee"]["id"] == "emp-305"
    assert ava["is_supervisor"] is True
    # em-11 is excluded
    assert ava["is_mapped"] is False
