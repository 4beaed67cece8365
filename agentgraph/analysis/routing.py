"""Routing decisions shared by every adapter.

Where execution starts, and how a node with several outgoing connections is
meant to continue. Fan-out is inferred from the data rather than declared:
if any outgoing connection carries a condition the node branches, otherwise
all targets run in parallel.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from agentgraph.models.workflow import WorkflowConfig, WorkflowConnection

DEFAULT_BRANCH = "default"


@dataclass(frozen=True)
class SingleNext:
    """exactly one outgoing connection."""

    target: str


@dataclass(frozen=True)
class ParallelNext:
    """several unconditioned connections; targets run concurrently."""

    targets: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConditionalNext:
    """Branches keyed by condition label.

    Connections without a condition share the DEFAULT_BRANCH key. When two
    connections map to the same key, the later one wins.
    """

    branches: dict[str, str] = field(default_factory=dict)


FanOut = SingleNext | ParallelNext | ConditionalNext


def classify_fan_out(connections: Sequence[WorkflowConnection]) -> FanOut | None:
    """Classify a node's outgoing connections. None means the node is terminal."""
    if not connections:
        return None
    if len(connections) == 1:
        return SingleNext(target=connections[0].target_id)
    if any(conn.condition for conn in connections):
        return ConditionalNext(
            branches={conn.condition or DEFAULT_BRANCH: conn.target_id for conn in connections}
        )
    return ParallelNext(targets=[conn.target_id for conn in connections])


def fan_out_map(workflow: WorkflowConfig) -> dict[str, FanOut | None]:
    """Classify every node's fan-out in one pass over the connections."""
    outgoing: dict[str, list[WorkflowConnection]] = {node.id: [] for node in workflow.nodes}
    for conn in workflow.connections:
        if conn.source_id in outgoing:
            outgoing[conn.source_id].append(conn)
    return {node_id: classify_fan_out(conns) for node_id, conns in outgoing.items()}


def entry_point(workflow: WorkflowConfig) -> str:
    """The first trigger node if there is one, else the first declared node."""
    trigger = next((node for node in workflow.nodes if node.type == "trigger"), None)
    if trigger is not None:
        return trigger.id
    return workflow.nodes[0].id
