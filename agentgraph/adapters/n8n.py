"""n8n adapter.

Turns agents and workflows into n8n's node/edge automation format. Every node
becomes a typed unit; agent units get a credential slot chosen by provider.
Node positions come from a breadth-first levelling of the graph and only
affect how the workflow looks in the editor.
"""

import logging
from collections import deque
from typing import Any

from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.base import CamelModel
from agentgraph.models.n8n import (
    N8nConnection,
    N8nCredential,
    N8nNode,
    N8nNodeConnections,
    N8nWorkflow,
    N8nWorkflowSettings,
    Position,
)
from agentgraph.models.workflow import WorkflowConfig, WorkflowNode, WorkflowTrigger

logger = logging.getLogger(__name__)

AGENT_NODE_TYPE = "n8n-nodes-langchain.agent"

# provider -> n8n credential type; providers missing here get no credential slot
CREDENTIAL_TYPES: dict[str, str] = {
    "openai": "openAiApi",
    "anthropic": "anthropicApi",
    "google": "googlePalmApi",
    "mistral": "mistralApi",
    "cohere": "cohereApi",
    "azure-openai": "azureOpenAiApi",
    "bedrock": "awsApi",
}

TRIGGER_NODE_TYPES: dict[str, str] = {
    "webhook": "n8n-nodes-base.webhook",
    "schedule": "n8n-nodes-base.scheduleTrigger",
    "event": "n8n-nodes-base.eventTrigger",
    "manual": "n8n-nodes-base.manualTrigger",
}

# vertical offset between siblings on the same level
SIBLING_OFFSET = 100


class N8nAdapterOptions(CamelModel):
    """options for the n8n adapter."""

    start_position: Position = (250, 300)
    node_spacing: int | float = 220
    include_credentials: bool = True
    # None uses executionOrder v1 with progress and manual executions saved
    workflow_settings: N8nWorkflowSettings | None = None


def _agent_parameters(agent: AgentConfig) -> dict[str, Any]:
    parameters: dict[str, Any] = {
        "agentId": agent.id,
        "agentName": agent.name,
        "description": agent.description or "",
        "model": agent.model,
        "provider": agent.provider,
        "systemPrompt": agent.system_prompt or "",
    }

    if agent.parameters is not None:
        params = agent.parameters
        parameters["temperature"] = params.temperature if params.temperature is not None else 0.7
        parameters["maxTokens"] = params.max_tokens if params.max_tokens is not None else 1000
        parameters["topP"] = params.top_p if params.top_p is not None else 1.0
        if params.frequency_penalty is not None:
            parameters["frequencyPenalty"] = params.frequency_penalty
        if params.presence_penalty is not None:
            parameters["presencePenalty"] = params.presence_penalty

    if agent.tools:
        parameters["tools"] = [
            {
                key: value
                for key, value in {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                }.items()
                if value is not None
            }
            for tool in agent.tools
        ]

    if agent.memory is not None:
        parameters["memory"] = agent.memory.to_dict()

    if agent.metadata is not None:
        parameters["metadata"] = dict(agent.metadata)

    return parameters


def _credentials(provider: str) -> dict[str, N8nCredential] | None:
    credential_type = CREDENTIAL_TYPES.get(provider)
    if credential_type is None:
        return None
    # placeholder id; n8n assigns the real one on import
    return {credential_type: N8nCredential(id="1", name=f"{provider} Account")}


def map_agent_to_n8n_node(
    agent: AgentConfig,
    options: N8nAdapterOptions | None = None,
) -> N8nNode:
    """Map an agent descriptor to a single n8n agent unit."""
    options = options or N8nAdapterOptions()
    return N8nNode(
        name=agent.name or agent.id,
        type=AGENT_NODE_TYPE,
        type_version=1,
        position=options.start_position,
        parameters=_agent_parameters(agent),
        credentials=_credentials(agent.provider) if options.include_credentials else None,
    )


def _trigger_node_type(trigger: WorkflowTrigger | None) -> str:
    if trigger is None:
        return TRIGGER_NODE_TYPES["manual"]
    return TRIGGER_NODE_TYPES.get(trigger.type, TRIGGER_NODE_TYPES["manual"])


def _trigger_parameters(trigger: WorkflowTrigger | None) -> dict[str, Any]:
    if trigger is None or trigger.config is None:
        return {}
    config = trigger.config
    parameters: dict[str, Any] = {}
    if config.webhook_url:
        parameters["path"] = config.webhook_url
    if config.schedule:
        parameters["rule"] = config.schedule
    if config.event_name:
        parameters["events"] = [config.event_name]
    # anything else the trigger declared goes through verbatim
    for key, value in config.extra_items().items():
        parameters.setdefault(key, value)
    return parameters


def _map_node(
    node: WorkflowNode,
    workflow: WorkflowConfig,
    position: Position,
    options: N8nAdapterOptions,
) -> N8nNode:
    if node.type == "trigger":
        trigger = workflow.trigger
        return N8nNode(
            name=f"Trigger {node.id}",
            type=_trigger_node_type(trigger),
            position=position,
            parameters=_trigger_parameters(trigger),
        )

    if node.type == "agent":
        if node.agent is not None:
            return map_agent_to_n8n_node(
                node.agent,
                N8nAdapterOptions(
                    start_position=position,
                    include_credentials=options.include_credentials,
                ),
            )
        # late-bound: n8n resolves the agent by id
        return N8nNode(
            name=f"Agent {node.id}",
            type=AGENT_NODE_TYPE,
            position=position,
            parameters={"agentId": node.agent_id},
        )

    if node.type == "condition":
        return N8nNode(
            name=f"Condition {node.id}",
            type="n8n-nodes-base.if",
            position=position,
            parameters={
                "conditions": {
                    "string": [
                        {
                            "value1": "={{$json.condition}}",
                            "operation": "equals",
                            "value2": "true",
                        }
                    ]
                }
            },
        )

    if node.type == "loop":
        return N8nNode(
            name=f"Loop {node.id}",
            type="n8n-nodes-base.splitInBatches",
            position=position,
            parameters={"batchSize": 1, "options": {}},
        )

    if node.type == "end":
        return N8nNode(
            name=f"End {node.id}",
            type="n8n-nodes-base.noOp",
            position=position,
            parameters={},
        )

    return N8nNode(name=node.id, type="n8n-nodes-base.noOp", position=position, parameters={})


def _unique_name(name: str, used: set[str]) -> str:
    """n8n keys connections by unit name, so names must not repeat."""
    if name not in used:
        return name
    suffix = 2
    while f"{name} {suffix}" in used:
        suffix += 1
    return f"{name} {suffix}"


def calculate_node_positions(
    workflow: WorkflowConfig,
    start_position: Position = (250, 300),
    spacing: int | float = 220,
) -> dict[str, Position]:
    """Lay nodes out left to right by breadth-first level.

    Roots (no incoming connections) sit on level 0 in declaration order; each
    node lands on the level where BFS first reaches it. Nodes only reachable
    through a cycle get no position here.
    """
    adjacency: dict[str, list[str]] = {node.id: [] for node in workflow.nodes}
    indegree: dict[str, int] = {node.id: 0 for node in workflow.nodes}
    for conn in workflow.connections:
        if conn.source_id in adjacency:
            adjacency[conn.source_id].append(conn.target_id)
        if conn.target_id in indegree:
            indegree[conn.target_id] += 1

    queue = deque((node_id, 0) for node_id, degree in indegree.items() if degree == 0)
    levels: dict[int, list[str]] = {}
    visited: set[str] = set()

    while queue:
        node_id, level = queue.popleft()
        if node_id in visited:
            continue
        visited.add(node_id)
        levels.setdefault(level, []).append(node_id)
        for succ in adjacency.get(node_id, []):
            if succ in adjacency and succ not in visited:
                queue.append((succ, level + 1))

    start_x, start_y = start_position
    positions: dict[str, Position] = {}
    for level, node_ids in levels.items():
        for index, node_id in enumerate(node_ids):
            positions[node_id] = (start_x + level * spacing, start_y + index * SIBLING_OFFSET)
    return positions


def map_workflow_to_n8n(
    workflow: WorkflowConfig,
    options: N8nAdapterOptions | None = None,
) -> N8nWorkflow:
    """Map a validated workflow to an n8n workflow document.

    Connections whose endpoints cannot be resolved to a unit are dropped with a
    warning. Validation rules such connections out, so this only happens when a
    caller skips it.
    """
    options = options or N8nAdapterOptions()
    start_x, start_y = options.start_position
    positions = calculate_node_positions(workflow, options.start_position, options.node_spacing)

    nodes: list[N8nNode] = []
    unit_names: dict[str, str] = {}  # workflow node id -> n8n unit name
    used_names: set[str] = set()
    for index, node in enumerate(workflow.nodes):
        position = positions.get(node.id, (start_x + index * options.node_spacing, start_y))
        unit = _map_node(node, workflow, position, options)
        unit.name = _unique_name(unit.name, used_names)
        used_names.add(unit.name)
        nodes.append(unit)
        unit_names[node.id] = unit.name

    connections: dict[str, N8nNodeConnections] = {}
    for conn in workflow.connections:
        source_name = unit_names.get(conn.source_id)
        target_name = unit_names.get(conn.target_id)
        if source_name is None or target_name is None:
            logger.warning(
                "dropping connection %s: unresolved endpoint %s -> %s",
                conn.id,
                conn.source_id,
                conn.target_id,
            )
            continue

        # every edge, conditional or not, leaves through output 0
        outputs = connections.setdefault(source_name, N8nNodeConnections())
        outputs.main[0].append(N8nConnection(node=target_name, type="main", index=0))

    tags = workflow.tags
    if tags is None and workflow.metadata is not None:
        metadata_tags = workflow.metadata.get("tags")
        if isinstance(metadata_tags, list):
            tags = [str(tag) for tag in metadata_tags]

    logger.debug(
        "mapped workflow %s to n8n: %d nodes, %d connected sources",
        workflow.id,
        len(nodes),
        len(connections),
    )
    return N8nWorkflow(
        name=workflow.name or workflow.id,
        nodes=nodes,
        connections=connections,
        settings=options.workflow_settings or N8nWorkflowSettings(),
        active=False,
        tags=tags,
    )


class N8nAdapter:
    """n8n target: map_agent -> N8nNode, map_workflow -> N8nWorkflow."""

    name = "n8n"
    options_class = N8nAdapterOptions

    def map_agent(self, agent: AgentConfig, options: N8nAdapterOptions | None = None) -> N8nNode:
        return map_agent_to_n8n_node(agent, options)

    def map_workflow(
        self, workflow: WorkflowConfig, options: N8nAdapterOptions | None = None
    ) -> N8nWorkflow:
        return map_workflow_to_n8n(workflow, options)
