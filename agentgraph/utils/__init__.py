"""Utility functions for agentgraph."""

from agentgraph.utils.json_schema import (
    generate_agent_json_schema,
    generate_agent_json_schema_string,
    generate_workflow_json_schema,
    generate_workflow_json_schema_string,
)

__all__ = [
    "generate_agent_json_schema",
    "generate_agent_json_schema_string",
    "generate_workflow_json_schema",
    "generate_workflow_json_schema_string",
]
