"""LangChain agent and LangGraph state-machine documents."""

from typing import Any, Literal

from pydantic import Field

from agentgraph.models.base import CamelModel

LangChainAgentType = Literal[
    "zero-shot-react-description",
    "react-docstore",
    "self-ask-with-search",
    "conversational-react-description",
    "chat-zero-shot-react-description",
    "chat-conversational-react-description",
    "structured-chat-zero-shot-react-description",
    "openai-functions",
    "openai-multi-functions",
]

LangChainMemoryType = Literal["buffer", "buffer-window", "summary", "entity", "knowledge-graph"]

LangGraphNodeType = Literal["agent", "tool", "llm", "prompt", "conditional"]


class LangChainTool(CamelModel):
    name: str
    description: str
    parameters: dict[str, Any] | None = None
    return_direct: bool = False


class LangChainMemoryConfig(CamelModel):
    k: int | None = None  # window size
    max_token_limit: int | None = None  # summary memory
    memory_key: str | None = None
    input_key: str | None = None
    output_key: str | None = None
    return_messages: bool | None = None


class LangChainMemory(CamelModel):
    type: LangChainMemoryType
    config: LangChainMemoryConfig | None = None


class LangChainLLM(CamelModel):
    """llm settings; model_name is prefixed with the provider."""

    model_name: str
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    timeout: int | None = None  # milliseconds
    max_retries: int | None = None


class LangChainAgent(CamelModel):
    """a single LangChain agent executor configuration."""

    agent_type: LangChainAgentType
    llm: LangChainLLM
    tools: list[LangChainTool] = Field(default_factory=list)
    memory: LangChainMemory | None = None
    system_message: str | None = None
    human_message: str | None = None
    verbose: bool = False
    max_iterations: int = 15
    return_intermediate_steps: bool = False


class LangGraphNode(CamelModel):
    """A node in the state graph.

    next is a single node id, a list of ids run in parallel, or a map of
    condition label -> node id.
    """

    id: str
    type: LangGraphNodeType
    config: dict[str, Any] = Field(default_factory=dict)
    next: str | list[str] | dict[str, str] | None = None


class LangGraphEdge(CamelModel):
    source: str
    target: str
    condition: str | None = None


class LangGraphState(CamelModel):
    """state channels: name -> declared type, and name -> initial value."""

    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")
    default: dict[str, Any] = Field(default_factory=dict)


class LangGraphCheckpointer(CamelModel):
    type: Literal["memory", "sqlite", "postgres"] = "memory"
    config: dict[str, Any] | None = None


class LangGraphWorkflow(CamelModel):
    """a complete LangGraph state graph."""

    name: str
    nodes: dict[str, LangGraphNode]
    edges: list[LangGraphEdge] = Field(default_factory=list)
    entry_point: str
    state: LangGraphState
    checkpointer: LangGraphCheckpointer | None = None
