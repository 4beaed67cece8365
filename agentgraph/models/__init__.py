"""Data models for agents, workflows and validation results."""

from agentgraph.models.agent_config import (
    AgentConfig,
    AIProvider,
    MemoryConfig,
    ModelParameters,
    PartialAgentConfig,
    Tool,
)
from agentgraph.models.workflow import (
    NodePosition,
    TriggerConfig,
    WorkflowConfig,
    WorkflowConnection,
    WorkflowNode,
    WorkflowTrigger,
    WorkflowVariable,
)
from agentgraph.models.validation_result import (
    AgentValidationResult,
    PartialAgentValidationResult,
    ValidationFailure,
    ValidationIssue,
    WorkflowValidationResult,
)

__all__ = [
    # Agent descriptor
    "AgentConfig",
    "AIProvider",
    "MemoryConfig",
    "ModelParameters",
    "PartialAgentConfig",
    "Tool",
    # Workflow graph
    "NodePosition",
    "TriggerConfig",
    "WorkflowConfig",
    "WorkflowConnection",
    "WorkflowNode",
    "WorkflowTrigger",
    "WorkflowVariable",
    # Validation results
    "AgentValidationResult",
    "PartialAgentValidationResult",
    "ValidationFailure",
    "ValidationIssue",
    "WorkflowValidationResult",
]
