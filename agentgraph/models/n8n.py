"""n8n workflow document (node/edge automation format)."""

from typing import Any, Literal

from pydantic import Field

from agentgraph.models.base import CamelModel

Position = tuple[int | float, int | float]


class N8nCredential(CamelModel):
    """credential slot; n8n assigns the real id on import."""

    id: str
    name: str


class N8nNode(CamelModel):
    """a typed unit in an n8n workflow."""

    name: str
    type: str
    type_version: int = 1
    position: Position
    parameters: dict[str, Any] = Field(default_factory=dict)
    credentials: dict[str, N8nCredential] | None = None


class N8nConnection(CamelModel):
    """target of one output of an n8n node."""

    node: str
    type: str = "main"
    index: int = 0


class N8nNodeConnections(CamelModel):
    """outputs of one node; main[output_index] lists the connected targets."""

    main: list[list[N8nConnection]] = Field(default_factory=lambda: [[]])


class N8nWorkflowSettings(CamelModel):
    execution_order: Literal["v0", "v1"] | None = "v1"
    save_execution_progress: bool | None = True
    save_manual_executions: bool | None = True


class N8nWorkflow(CamelModel):
    """a complete n8n workflow, keyed connections by source node name."""

    name: str
    nodes: list[N8nNode]
    connections: dict[str, N8nNodeConnections] = Field(default_factory=dict)
    settings: N8nWorkflowSettings | None = None
    static_data: dict[str, Any] | None = None
    tags: list[str] | None = None
    active: bool = False

    def find_node(self, name: str) -> N8nNode | None:
        """Look up a unit by its name."""
        return next((node for node in self.nodes if node.name == name), None)
