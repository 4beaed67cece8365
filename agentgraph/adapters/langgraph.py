"""LangChain / LangGraph adapter.

Single agents become LangChain agent executor configs. Workflows become a
LangGraph state machine: a node map, an edge list, an explicit entry point,
a state description built from the workflow variables, and an in-memory
checkpointer.
"""

import logging
from typing import Any

from agentgraph.analysis.routing import (
    ConditionalNext,
    FanOut,
    ParallelNext,
    SingleNext,
    entry_point,
    fan_out_map,
)
from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.base import CamelModel
from agentgraph.models.langgraph import (
    LangChainAgent,
    LangChainAgentType,
    LangChainLLM,
    LangChainMemory,
    LangChainMemoryConfig,
    LangChainMemoryType,
    LangChainTool,
    LangGraphCheckpointer,
    LangGraphEdge,
    LangGraphNode,
    LangGraphState,
    LangGraphWorkflow,
)
from agentgraph.models.workflow import WorkflowConfig, WorkflowNode

logger = logging.getLogger(__name__)

MEMORY_TYPES: dict[str, LangChainMemoryType] = {
    "buffer": "buffer",
    "summary": "summary",
    "vector": "knowledge-graph",
    "none": "buffer",
}

MODEL_PREFIXES: dict[str, str] = {
    "openai": "openai/",
    "anthropic": "anthropic/",
    "google": "google/",
    "mistral": "mistral/",
    "cohere": "cohere/",
    "azure-openai": "azure/",
    "bedrock": "bedrock/",
    "custom": "",
}

LLM_TIMEOUT_MS = 60000
LLM_MAX_RETRIES = 2


class LangChainAdapterOptions(CamelModel):
    """options for the LangChain / LangGraph adapter."""

    # None picks a type from the agent's tools and memory
    agent_type: LangChainAgentType | None = None
    verbose: bool = False
    max_iterations: int = 15
    return_intermediate_steps: bool = False


def determine_agent_type(agent: AgentConfig) -> LangChainAgentType:
    """Pick an agent type: tool calling when tools exist, conversational with memory."""
    if agent.tools:
        if agent.provider == "openai":
            return "openai-functions"
        return "zero-shot-react-description"
    if agent.memory is not None and agent.memory.type != "none":
        return "conversational-react-description"
    return "zero-shot-react-description"


def map_model_name(provider: str, model: str) -> str:
    return f"{MODEL_PREFIXES.get(provider, '')}{model}"


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def map_agent_to_langchain(
    agent: AgentConfig,
    options: LangChainAdapterOptions | None = None,
) -> LangChainAgent:
    """Map an agent descriptor to a LangChain agent configuration."""
    options = options or LangChainAdapterOptions()
    params = agent.parameters

    llm = LangChainLLM(
        model_name=map_model_name(agent.provider, agent.model),
        temperature=_default(params and params.temperature, 0.7),
        max_tokens=_default(params and params.max_tokens, 1000),
        top_p=_default(params and params.top_p, 1.0),
        frequency_penalty=_default(params and params.frequency_penalty, 0),
        presence_penalty=_default(params and params.presence_penalty, 0),
        timeout=LLM_TIMEOUT_MS,
        max_retries=LLM_MAX_RETRIES,
    )

    tools = [
        LangChainTool(
            name=tool.name,
            description=tool.description,
            parameters=tool.parameters,
            return_direct=False,
        )
        for tool in agent.tools or []
    ]

    memory = None
    if agent.memory is not None:
        memory = LangChainMemory(
            type=MEMORY_TYPES.get(agent.memory.type, "buffer"),
            config=LangChainMemoryConfig(
                k=agent.memory.max_messages,
                memory_key="chat_history",
                input_key="input",
                output_key="output",
                return_messages=True,
            ),
        )

    return LangChainAgent(
        agent_type=options.agent_type or determine_agent_type(agent),
        llm=llm,
        tools=tools,
        memory=memory,
        system_message=agent.system_prompt,
        verbose=options.verbose,
        max_iterations=options.max_iterations,
        return_intermediate_steps=options.return_intermediate_steps,
    )


def _next_from_fan_out(fan_out: FanOut | None) -> str | list[str] | dict[str, str] | None:
    if fan_out is None:
        return None
    if isinstance(fan_out, SingleNext):
        return fan_out.target
    if isinstance(fan_out, ParallelNext):
        return list(fan_out.targets)
    if isinstance(fan_out, ConditionalNext):
        return dict(fan_out.branches)
    raise TypeError(f"unknown fan-out variant: {fan_out!r}")


def _map_node(node: WorkflowNode, options: LangChainAdapterOptions) -> LangGraphNode:
    if node.type == "trigger":
        return LangGraphNode(
            id=node.id,
            type="prompt",
            config={"template": "Start workflow with input: {input}"},
        )

    if node.type == "agent":
        if node.agent is not None:
            lc_agent = map_agent_to_langchain(node.agent, options).to_dict()
            config = {
                key: lc_agent[key]
                for key in ("agentType", "llm", "tools", "memory", "systemMessage")
                if key in lc_agent
            }
            return LangGraphNode(id=node.id, type="agent", config=config)
        # late-bound: resolved by the runtime
        return LangGraphNode(id=node.id, type="agent", config={"agentId": node.agent_id})

    if node.type == "condition":
        return LangGraphNode(
            id=node.id,
            type="conditional",
            config={"condition": 'lambda x: x.get("condition", True)'},
        )

    if node.type == "loop":
        return LangGraphNode(
            id=node.id,
            type="tool",
            config={"name": "loop", "description": "Iterate over items"},
        )

    if node.type == "end":
        return LangGraphNode(
            id=node.id,
            type="llm",
            config={"template": "Workflow completed. Output: {output}"},
        )

    return LangGraphNode(id=node.id, type="llm", config={})


def _build_state(workflow: WorkflowConfig) -> LangGraphState:
    schema: dict[str, Any] = {}
    default: dict[str, Any] = {}
    for variable in workflow.variables or []:
        schema[variable.name] = variable.type
        if "default_value" in variable.model_fields_set:
            default[variable.name] = variable.default_value

    # implicit channels every graph carries
    schema["input"] = "string"
    schema["output"] = "string"
    default["input"] = ""
    default["output"] = ""
    return LangGraphState(schema_=schema, default=default)


def map_workflow_to_langgraph(
    workflow: WorkflowConfig,
    options: LangChainAdapterOptions | None = None,
) -> LangGraphWorkflow:
    """Map a validated workflow to a LangGraph state graph document."""
    options = options or LangChainAdapterOptions()
    fan_outs = fan_out_map(workflow)

    nodes: dict[str, LangGraphNode] = {}
    for node in workflow.nodes:
        lg_node = _map_node(node, options)
        lg_node.next = _next_from_fan_out(fan_outs.get(node.id))
        nodes[node.id] = lg_node

    edges = [
        LangGraphEdge(source=conn.source_id, target=conn.target_id, condition=conn.condition)
        for conn in workflow.connections
    ]

    logger.debug("mapped workflow %s to langgraph: %d nodes", workflow.id, len(nodes))
    return LangGraphWorkflow(
        name=workflow.name or workflow.id,
        nodes=nodes,
        edges=edges,
        entry_point=entry_point(workflow),
        state=_build_state(workflow),
        checkpointer=LangGraphCheckpointer(type="memory", config={}),
    )


class LangGraphAdapter:
    """LangGraph target: map_agent -> LangChainAgent, map_workflow -> LangGraphWorkflow."""

    name = "langgraph"
    options_class = LangChainAdapterOptions

    def map_agent(
        self, agent: AgentConfig, options: LangChainAdapterOptions | None = None
    ) -> LangChainAgent:
        return map_agent_to_langchain(agent, options)

    def map_workflow(
        self, workflow: WorkflowConfig, options: LangChainAdapterOptions | None = None
    ) -> LangGraphWorkflow:
        return map_workflow_to_langgraph(workflow, options)
