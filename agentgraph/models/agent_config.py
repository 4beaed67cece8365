"""Agent descriptor: a provider-agnostic description of one AI agent.

This is the record every adapter consumes when a workflow node embeds its
agent inline. Field constraints mirror what the target engines accept
(temperature 0..2, top_p 0..1, penalties -2..2).
"""

from typing import Any, Literal

from pydantic import Field, PositiveInt

from agentgraph.models.base import FrozenCamelModel

AIProvider = Literal[
    "openai",
    "anthropic",
    "google",
    "mistral",
    "cohere",
    "azure-openai",
    "bedrock",
    "custom",
]

MemoryType = Literal["buffer", "summary", "vector", "none"]


class MemoryConfig(FrozenCamelModel):
    """conversation memory settings."""

    type: MemoryType
    max_messages: PositiveInt | None = None
    persistent: bool | None = None


class Tool(FrozenCamelModel):
    """a capability the agent can call."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str
    parameters: dict[str, Any] | None = None  # JSON schema of the tool's arguments
    requires_auth: bool | None = None


class ModelParameters(FrozenCamelModel):
    """sampling parameters passed to the model."""

    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: PositiveInt | None = None
    top_p: float | None = Field(default=None, ge=0, le=1)
    frequency_penalty: float | None = Field(default=None, ge=-2, le=2)
    presence_penalty: float | None = Field(default=None, ge=-2, le=2)
    stop_sequences: list[str] | None = None


class AgentConfig(FrozenCamelModel):
    """a fully specified agent."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None

    provider: AIProvider
    model: str = Field(min_length=1)  # "gpt-4", "claude-3-opus", etc.
    system_prompt: str | None = None

    parameters: ModelParameters | None = None
    tools: list[Tool] | None = None
    memory: MemoryConfig | None = None

    # ids of other agents this one hands off to
    connections: list[str] | None = None
    metadata: dict[str, Any] | None = None


class PartialAgentConfig(FrozenCamelModel):
    """Update payload for an agent: every field optional, same constraints."""

    id: str | None = Field(default=None, min_length=1)
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None

    provider: AIProvider | None = None
    model: str | None = Field(default=None, min_length=1)
    system_prompt: str | None = None

    parameters: ModelParameters | None = None
    tools: list[Tool] | None = None
    memory: MemoryConfig | None = None

    connections: list[str] | None = None
    metadata: dict[str, Any] | None = None
