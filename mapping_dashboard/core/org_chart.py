"""Org chart assembly: supervisor -> report trees rooted at a report's supervisors."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from mapping_dashboard.models.employee import Employee

logger = logging.getLogger(__name__)


@dataclass
class OrgNode:
    employee: Employee
    children: list["OrgNode"] = field(default_factory=list)
    expanded: bool = True
    is_supervisor: bool = False
    is_mapped: bool = False


def _build_adjacency(employees: Iterable[Employee]) -> dict[str, list[Employee]]:
    """Build a supervisor_id -> list[Employee] adjacency map, keeping input order."""
    tree: dict[str, list[Employee]] = defaultdict(list)
    for e in employees:
        if e.supervisor_id:
            tree[e.supervisor_id].append(e)
    return dict(tree)


def _descendant_ids(start_id: str, adjacency: dict[str, list[Employee]]) -> set[str]:
    seen: set[str] = set()
    stack = [start_id]
    while stack:
        current = stack.pop()
        for child in adjacency.get(current, []):
            if child.id not in seen and child.id != start_id:
                seen.add(child.id)
                stack.append(child.id)
    return seen


def collect_org_members(employees: list[Employee], supervisor_ids: Iterable[str]) -> list[Employee]:
    """Supervisors plus everyone reporting to them transitively, once each, in input order."""
    by_id = {e.id: e for e in employees}
    adjacency = _build_adjacency(employees)

    member_ids: set[str] = set()
    for sid in supervisor_ids:
        if sid in by_id:
            member_ids.add(sid)
            member_ids |= _descendant_ids(sid, adjacency)
    return [e for e in employees if e.id in member_ids]


def build_org_chart(
    employees: list[Employee],
    supervisor_ids: list[str],
    mapped_ids: Iterable[str] = (),
) -> list[OrgNode]:
    """
    Build the forest for `supervisor_ids`.

    Every collected member appears exactly once. A supervisor that already sits
    below another listed supervisor is shown there instead of as its own root.
    Unknown supervisor ids are ignored.
    """
    members = collect_org_members(employees, supervisor_ids)
    by_id = {e.id: e for e in members}
    adjacency = _build_adjacency(members)
    roots_in_order = [sid for sid in dict.fromkeys(supervisor_ids) if sid in by_id]
    supervisor_set = set(roots_in_order)
    mapped = set(mapped_ids)

    covered: set[str] = set()
    for sid in roots_in_order:
        covered |= _descendant_ids(sid, adjacency)

    visited: set[str] = set()

    def _node(emp: Employee) -> OrgNode:
        visited.add(emp.id)
        return OrgNode(
            employee=emp,
            is_supervisor=emp.id in supervisor_set,
            is_mapped=emp.id in mapped,
        )

    def _expand(root: Employee) -> OrgNode:
        # explicit stack: chain depth is unbounded
        top = _node(root)
        stack = [(top, iter(adjacency.get(root.id, [])))]
        while stack:
            parent, pending = stack[-1]
            child = next((c for c in pending if c.id not in visited), None)
            if child is None:
                stack.pop()
                continue
            node = _node(child)
            parent.children.append(node)
            stack.append((node, iter(adjacency.get(child.id, []))))
        return top

    forest = [_expand(by_id[sid]) for sid in roots_in_order if sid not in covered]

    # supervisors that only reach each other through a cycle
    for sid in roots_in_order:
        if sid not in visited:
            logger.warning("Supervisor %s is part of a reporting cycle", sid)
            forest.append(_expand(by_id[sid]))

    return forest
