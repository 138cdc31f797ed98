from fastapi import APIRouter, Depends, Query

from mapping_dashboard.api.employees import employee_to_out
from mapping_dashboard.core.errors import InvalidInput
from mapping_dashboard.core.org_chart import OrgNode, build_org_chart
from mapping_dashboard.db.store import MappingStore, get_store
from mapping_dashboard.schemas.report import OrgNodeOut

router = APIRouter(prefix="/org-chart", tags=["org-chart"])


def node_to_out(root: OrgNode) -> OrgNodeOut:
    # children are converted before their parent, without recursion
    order: list[OrgNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(node.children)

    converted: dict[int, OrgNodeOut] = {}
    for node in reversed(order):
        converted[id(node)] = OrgNodeOut(
            employee=employee_to_out(node.employee),
            expanded=node.expanded,
            is_supervisor=node.is_supervisor,
            is_mapped=node.is_mapped,
            children=[converted[id(c)] for c in node.children],
        )
    return converted[id(root)]


@router.get("", response_model=list[OrgNodeOut])
def get_org_chart(
    supervisor_id: list[str] | None = Query(default=None, description="Root supervisor ids, repeatable"),
    store: MappingStore = Depends(get_store),
):
    if not supervisor_id:
        raise InvalidInput("At least one supervisor_id is required")
    return [node_to_out(n) for n in build_org_chart(store.list_employees(), supervisor_id)]
