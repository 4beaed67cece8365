"""JSON Schema generation for agent and workflow documents.

Useful for form builders and editors that want to validate documents before
they reach the Python side.
"""

import json

from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.workflow import WorkflowConfig


def generate_agent_json_schema() -> dict:
    """JSON Schema for an agent descriptor, using camelCase keys."""
    schema = AgentConfig.model_json_schema(by_alias=True)
    schema["title"] = "AgentConfig"
    return schema


def generate_agent_json_schema_string(indent: int = 2) -> str:
    return json.dumps(generate_agent_json_schema(), indent=indent)


def generate_workflow_json_schema() -> dict:
    """JSON Schema for a workflow document, using camelCase keys.

    Cross-field rules (connection endpoints, agent references, unique ids)
    cannot be expressed here; they are checked by the validator.
    """
    schema = WorkflowConfig.model_json_schema(by_alias=True)
    schema["title"] = "WorkflowConfig"
    return schema


def generate_workflow_json_schema_string(indent: int = 2) -> str:
    return json.dumps(generate_workflow_json_schema(), indent=indent)
