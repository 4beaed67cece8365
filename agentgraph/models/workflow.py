"""Workflow graph model.

A workflow is stored flat: an ordered list of nodes and an ordered list of
connections that refer to nodes by id. Two structural invariants are enforced
at parse time, so anything holding a WorkflowConfig may rely on them:

- every connection's source_id and target_id names a declared node
- every agent node carries exactly one agent reference, either an external
  agent_id (resolved later by the target engine) or an inline AgentConfig
"""

from typing import Any, Literal

from pydantic import AnyUrl, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.base import FrozenCamelModel

NodeType = Literal["agent", "trigger", "condition", "loop", "end"]
TriggerType = Literal["manual", "schedule", "webhook", "event"]
VariableType = Literal["string", "number", "boolean", "object", "array"]

_URL = TypeAdapter(AnyUrl)


class NodePosition(FrozenCamelModel):
    """position in a visual editor; ignored by analysis."""

    x: float
    y: float


class WorkflowNode(FrozenCamelModel):
    """one step in the workflow."""

    id: str = Field(min_length=1)
    type: NodeType
    agent_id: str | None = None  # late-bound reference; empty counts as absent
    agent: AgentConfig | None = None  # inline definition
    position: NodePosition | None = None
    metadata: dict[str, Any] | None = None

    @property
    def is_agent(self) -> bool:
        return self.type == "agent"


class WorkflowConnection(FrozenCamelModel):
    """a directed edge between two nodes."""

    id: str = Field(min_length=1)
    source_id: str = Field(min_length=1)
    target_id: str = Field(min_length=1)
    source_handle: str | None = None
    target_handle: str | None = None
    # marks this edge as one branch of a conditional fan-out
    condition: str | None = None
    label: str | None = None


class TriggerConfig(FrozenCamelModel):
    """Kind-specific trigger settings.

    Unknown keys are kept and passed through to the target documents.
    """

    model_config = ConfigDict(extra="allow")

    schedule: str | None = None  # cron expression
    webhook_url: str | None = None
    event_name: str | None = None

    @field_validator("webhook_url")
    @classmethod
    def _check_webhook_url(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            _URL.validate_python(value)
        except PydanticValidationError:
            raise PydanticCustomError("url", "Invalid url") from None
        return value

    def extra_items(self) -> dict[str, Any]:
        """Passthrough keys that are not part of the declared schema."""
        return dict(self.model_extra or {})


class WorkflowTrigger(FrozenCamelModel):
    """how execution of the workflow begins."""

    type: TriggerType
    config: TriggerConfig | None = None


class WorkflowVariable(FrozenCamelModel):
    """a typed input/output slot, carried into targets as initial state."""

    name: str = Field(min_length=1)
    type: VariableType
    default_value: Any = None
    description: str | None = None
    required: bool | None = None


class WorkflowConfig(FrozenCamelModel):
    """A complete workflow graph."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None
    version: str | None = None

    nodes: list[WorkflowNode]
    connections: list[WorkflowConnection]
    trigger: WorkflowTrigger | None = None
    variables: list[WorkflowVariable] | None = None

    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @field_validator("nodes")
    @classmethod
    def _check_nodes(cls, nodes: list[WorkflowNode]) -> list[WorkflowNode]:
        if not nodes:
            raise PydanticCustomError("nodes_empty", "At least one node is required")

        seen: set[str] = set()
        duplicates: list[str] = []
        for node in nodes:
            if node.id in seen and node.id not in duplicates:
                duplicates.append(node.id)
            seen.add(node.id)
        if duplicates:
            raise PydanticCustomError(
                "duplicate_node_id",
                "Node ids must be unique (duplicated: {ids})",
                {"ids": ", ".join(duplicates)},
            )

        agents = [node for node in nodes if node.is_agent]
        if any(not node.agent_id and node.agent is None for node in agents):
            raise PydanticCustomError(
                "agent_reference_missing",
                "Agent nodes must have either agentId or agent configuration",
            )
        if any(node.agent_id and node.agent is not None for node in agents):
            raise PydanticCustomError(
                "agent_reference_ambiguous",
                "Agent nodes must have either agentId or agent configuration, not both",
            )
        return nodes

    @field_validator("connections")
    @classmethod
    def _check_connection_endpoints(
        cls, connections: list[WorkflowConnection], info: ValidationInfo
    ) -> list[WorkflowConnection]:
        nodes = info.data.get("nodes")
        if nodes is None:
            # nodes already failed; endpoint resolution is meaningless
            return connections

        node_ids = {node.id for node in nodes}
        dangling = [
            conn.id
            for conn in connections
            if conn.source_id not in node_ids or conn.target_id not in node_ids
        ]
        if dangling:
            raise PydanticCustomError(
                "dangling_connection",
                "All connections must reference existing nodes (invalid: {ids})",
                {"ids": ", ".join(dangling)},
            )
        return connections

    @field_validator("variables")
    @classmethod
    def _check_variable_names(
        cls, variables: list[WorkflowVariable] | None
    ) -> list[WorkflowVariable] | None:
        if not variables:
            return variables
        names = [variable.name for variable in variables]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise PydanticCustomError(
                "duplicate_variable",
                "Variable names must be unique (duplicated: {names})",
                {"names": ", ".join(duplicates)},
            )
        return variables

    def node_index(self) -> dict[str, WorkflowNode]:
        """Map node id -> node, in declaration order."""
        return {node.id: node for node in self.nodes}

    def outgoing(self, node_id: str) -> list[WorkflowConnection]:
        """Connections leaving node_id, in declaration order."""
        return [conn for conn in self.connections if conn.source_id == node_id]

    def incoming(self, node_id: str) -> list[WorkflowConnection]:
        """Connections entering node_id, in declaration order."""
        return [conn for conn in self.connections if conn.target_id == node_id]
