"""Graph analysis and routing helpers for workflows."""

from agentgraph.analysis.graph_analysis import (
    build_adjacency,
    detect_cycles,
    find_disconnected_nodes,
    in_degrees,
    out_degrees,
    predecessors,
    topological_order,
)
from agentgraph.analysis.routing import (
    DEFAULT_BRANCH,
    ConditionalNext,
    FanOut,
    ParallelNext,
    SingleNext,
    classify_fan_out,
    entry_point,
    fan_out_map,
)
from agentgraph.analysis.workflow_analysis import (
    WorkflowAnalysis,
    analyze_workflow,
)

__all__ = [
    # graph_analysis exports
    "build_adjacency",
    "detect_cycles",
    "find_disconnected_nodes",
    "in_degrees",
    "out_degrees",
    "predecessors",
    "topological_order",
    # routing exports
    "DEFAULT_BRANCH",
    "ConditionalNext",
    "FanOut",
    "ParallelNext",
    "SingleNext",
    "classify_fan_out",
    "entry_point",
    "fan_out_map",
    # workflow_analysis exports
    "WorkflowAnalysis",
    "analyze_workflow",
]
