"""Structural analysis of a workflow graph.

Pure functions over a parsed WorkflowConfig. They report facts (is there a
cycle, what order can nodes run in, which nodes touch no edge) and never
treat those facts as errors; the validator decides what is acceptable.
"""

from collections import deque

from agentgraph.models.workflow import WorkflowConfig


def build_adjacency(workflow: WorkflowConfig) -> dict[str, list[str]]:
    """Map each node id to its successors, one entry per connection.

    Keys follow node declaration order; successors follow connection order.
    Connections whose source is not a declared node are ignored.
    """
    adjacency: dict[str, list[str]] = {node.id: [] for node in workflow.nodes}
    for conn in workflow.connections:
        successors = adjacency.get(conn.source_id)
        if successors is not None:
            successors.append(conn.target_id)
    return adjacency


def in_degrees(workflow: WorkflowConfig) -> dict[str, int]:
    """Number of incoming connections per node."""
    degrees = {node.id: 0 for node in workflow.nodes}
    for conn in workflow.connections:
        if conn.target_id in degrees:
            degrees[conn.target_id] += 1
    return degrees


def out_degrees(workflow: WorkflowConfig) -> dict[str, int]:
    """Number of outgoing connections per node."""
    degrees = {node.id: 0 for node in workflow.nodes}
    for conn in workflow.connections:
        if conn.source_id in degrees:
            degrees[conn.source_id] += 1
    return degrees


def predecessors(workflow: WorkflowConfig) -> dict[str, list[str]]:
    """Map each node id to the sources of its incoming connections."""
    preds: dict[str, list[str]] = {node.id: [] for node in workflow.nodes}
    for conn in workflow.connections:
        if conn.target_id in preds:
            preds[conn.target_id].append(conn.source_id)
    return preds


def detect_cycles(workflow: WorkflowConfig) -> bool:
    """Return True if the connections contain a directed cycle.

    Depth-first search from every unvisited node, tracking the nodes on the
    current path; reaching a node already on the path means a back edge.
    Iterative so deep chains do not hit the recursion limit.
    """
    adjacency = build_adjacency(workflow)
    visited: set[str] = set()
    on_stack: set[str] = set()

    for root in adjacency:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        # (node, iterator over its successors)
        stack = [(root, iter(adjacency[root]))]

        while stack:
            node_id, successors = stack[-1]
            for succ in successors:
                if succ in on_stack:
                    return True
                if succ not in visited:
                    visited.add(succ)
                    on_stack.add(succ)
                    stack.append((succ, iter(adjacency.get(succ, []))))
                    break
            else:
                # all successors explored
                on_stack.discard(node_id)
                stack.pop()

    return False


def topological_order(workflow: WorkflowConfig) -> list[str] | None:
    """Order node ids so every connection points forward (Kahn's algorithm).

    Returns None when the graph has a cycle; no partial order is produced.
    Ties are broken by queue order: declaration order for the initial roots,
    then the order in which nodes become free.
    """
    if detect_cycles(workflow):
        return None

    adjacency = build_adjacency(workflow)
    remaining = in_degrees(workflow)

    queue = deque(node_id for node_id, degree in remaining.items() if degree == 0)
    order: list[str] = []

    while queue:
        node_id = queue.popleft()
        order.append(node_id)
        for succ in adjacency[node_id]:
            if succ not in remaining:
                continue
            remaining[succ] -= 1
            if remaining[succ] == 0:
                queue.append(succ)

    # only reachable if a cycle slipped past detection or the graph is malformed
    if len(order) != len(workflow.nodes):
        return None
    return order


def find_disconnected_nodes(workflow: WorkflowConfig) -> list[str]:
    """Ids of nodes that are neither source nor target of any connection.

    This is a degree check, not reachability: a root with only outgoing
    connections is connected.
    """
    touched: set[str] = set()
    for conn in workflow.connections:
        touched.add(conn.source_id)
        touched.add(conn.target_id)
    return [node.id for node in workflow.nodes if node.id not in touched]
