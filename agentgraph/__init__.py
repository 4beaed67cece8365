"""agentgraph - portable agent and workflow descriptions, validated and translated
to n8n, LangGraph and CrewAI documents."""

from agentgraph.models import (
    AgentConfig,
    AgentValidationResult,
    ValidationFailure,
    ValidationIssue,
    WorkflowConfig,
    WorkflowConnection,
    WorkflowNode,
    WorkflowTrigger,
    WorkflowValidationResult,
    WorkflowVariable,
)
from agentgraph.analysis import (
    analyze_workflow,
    classify_fan_out,
    detect_cycles,
    entry_point,
    find_disconnected_nodes,
    topological_order,
)
from agentgraph.validation import (
    validate_agent_config,
    validate_agent_config_strict,
    validate_partial_agent_config,
    validate_workflow_config,
    validate_workflow_config_strict,
)
from agentgraph.adapters import (
    get_adapter,
    map_agent_to_crew_agent,
    map_agent_to_langchain,
    map_agent_to_n8n_node,
    map_workflow_to_crew,
    map_workflow_to_langgraph,
    map_workflow_to_n8n,
)
from agentgraph.errors import AgentGraphError, UnknownTargetError, WorkflowValidationError
from agentgraph.utils import (
    generate_agent_json_schema,
    generate_agent_json_schema_string,
    generate_workflow_json_schema,
    generate_workflow_json_schema_string,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "AgentConfig",
    "AgentValidationResult",
    "ValidationFailure",
    "ValidationIssue",
    "WorkflowConfig",
    "WorkflowConnection",
    "WorkflowNode",
    "WorkflowTrigger",
    "WorkflowValidationResult",
    "WorkflowVariable",
    # Analysis
    "analyze_workflow",
    "classify_fan_out",
    "detect_cycles",
    "entry_point",
    "find_disconnected_nodes",
    "topological_order",
    # Validation
    "validate_agent_config",
    "validate_agent_config_strict",
    "validate_partial_agent_config",
    "validate_workflow_config",
    "validate_workflow_config_strict",
    # Adapters
    "get_adapter",
    "map_agent_to_crew_agent",
    "map_agent_to_langchain",
    "map_agent_to_n8n_node",
    "map_workflow_to_crew",
    "map_workflow_to_langgraph",
    "map_workflow_to_n8n",
    # Errors
    "AgentGraphError",
    "UnknownTargetError",
    "WorkflowValidationError",
    # JSON Schema
    "generate_agent_json_schema",
    "generate_agent_json_schema_string",
    "generate_workflow_json_schema",
    "generate_workflow_json_schema_string",
]
