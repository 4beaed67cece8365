"""Validators for agent descriptors and workflows."""

from agentgraph.validation.agent_validator import (
    validate_agent_config,
    validate_agent_config_strict,
    validate_partial_agent_config,
)
from agentgraph.validation.workflow_validator import (
    validate_workflow_config,
    validate_workflow_config_strict,
)

__all__ = [
    "validate_agent_config",
    "validate_agent_config_strict",
    "validate_partial_agent_config",
    "validate_workflow_config",
    "validate_workflow_config_strict",
]
