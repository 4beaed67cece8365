"""One-call summary of everything the analysis functions can tell about a workflow."""

from dataclasses import asdict, dataclass, field

from agentgraph.analysis.graph_analysis import (
    detect_cycles,
    find_disconnected_nodes,
    topological_order,
)
from agentgraph.analysis.routing import (
    ConditionalNext,
    FanOut,
    ParallelNext,
    SingleNext,
    entry_point,
    fan_out_map,
)
from agentgraph.models.workflow import WorkflowConfig


@dataclass
class WorkflowAnalysis:
    """Derived facts about a workflow graph.

    Note: has_cycle is reported, not judged. A cyclic workflow still gets an
    analysis; topological_order is None in that case.
    """

    workflow_id: str
    has_cycle: bool
    topological_order: list[str] | None
    disconnected_nodes: list[str]
    entry_point: str
    fan_out: dict[str, FanOut | None] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """JSON-friendly dump; fan-out variants become tagged dicts."""
        data = asdict(self)
        data["fan_out"] = {
            node_id: _fan_out_to_dict(variant) for node_id, variant in self.fan_out.items()
        }
        return data


def _fan_out_to_dict(variant: FanOut | None) -> dict | None:
    if variant is None:
        return None
    if isinstance(variant, SingleNext):
        return {"kind": "single", "target": variant.target}
    if isinstance(variant, ParallelNext):
        return {"kind": "parallel", "targets": list(variant.targets)}
    if isinstance(variant, ConditionalNext):
        return {"kind": "conditional", "branches": dict(variant.branches)}
    raise TypeError(f"unknown fan-out variant: {variant!r}")


def analyze_workflow(workflow: WorkflowConfig) -> WorkflowAnalysis:
    """Run every graph analysis over a parsed workflow."""
    order = topological_order(workflow)
    return WorkflowAnalysis(
        workflow_id=workflow.id,
        has_cycle=order is None and detect_cycles(workflow),
        topological_order=order,
        disconnected_nodes=find_disconnected_nodes(workflow),
        entry_point=entry_point(workflow),
        fan_out=fan_out_map(workflow),
    )
