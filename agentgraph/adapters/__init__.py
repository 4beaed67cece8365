"""Adapters that translate agents and workflows into target engine formats."""

from agentgraph.adapters.n8n import (
    N8nAdapter,
    N8nAdapterOptions,
    calculate_node_positions,
    map_agent_to_n8n_node,
    map_workflow_to_n8n,
)
from agentgraph.adapters.langgraph import (
    LangChainAdapterOptions,
    LangGraphAdapter,
    map_agent_to_langchain,
    map_workflow_to_langgraph,
)
from agentgraph.adapters.crewai import (
    CrewAIAdapter,
    CrewAIAdapterOptions,
    determine_process_type,
    map_agent_to_crew_agent,
    map_workflow_to_crew,
)
from agentgraph.adapters.base import WorkflowAdapter, available_targets, get_adapter

__all__ = [
    # n8n
    "N8nAdapter",
    "N8nAdapterOptions",
    "calculate_node_positions",
    "map_agent_to_n8n_node",
    "map_workflow_to_n8n",
    # LangChain / LangGraph
    "LangChainAdapterOptions",
    "LangGraphAdapter",
    "map_agent_to_langchain",
    "map_workflow_to_langgraph",
    # CrewAI
    "CrewAIAdapter",
    "CrewAIAdapterOptions",
    "determine_process_type",
    "map_agent_to_crew_agent",
    "map_workflow_to_crew",
    # registry
    "WorkflowAdapter",
    "available_targets",
    "get_adapter",
]
