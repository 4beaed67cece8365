"""Common capability of every target adapter, and lookup by target name.

Adapters share no implementation: each target has its own policy for
credentials, state and process selection. They only agree on the two entry
points below.
"""

from typing import Any, Protocol

from pydantic import BaseModel

from agentgraph.adapters.crewai import CrewAIAdapter
from agentgraph.adapters.langgraph import LangGraphAdapter
from agentgraph.adapters.n8n import N8nAdapter
from agentgraph.errors import UnknownTargetError
from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.workflow import WorkflowConfig


class WorkflowAdapter(Protocol):
    """Maps agents and workflows to one target format."""

    name: str
    options_class: type[BaseModel]

    def map_agent(self, agent: AgentConfig, options: Any = None) -> BaseModel:
        """Map a single agent descriptor."""
        ...

    def map_workflow(self, workflow: WorkflowConfig, options: Any = None) -> BaseModel:
        """Map a validated workflow."""
        ...


_ADAPTERS: dict[str, WorkflowAdapter] = {
    adapter.name: adapter for adapter in (N8nAdapter(), LangGraphAdapter(), CrewAIAdapter())
}


def available_targets() -> list[str]:
    return list(_ADAPTERS)


def get_adapter(target: str) -> WorkflowAdapter:
    """Return the adapter for a target name ("n8n", "langgraph", "crewai").

    Raises:
        UnknownTargetError: if no adapter is registered under that name
    """
    adapter = _ADAPTERS.get(target.lower())
    if adapter is None:
        raise UnknownTargetError(target, available_targets())
    return adapter
