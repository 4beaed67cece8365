"""Validation entry points for single agent descriptors."""

import logging
from typing import Any

from pydantic import ValidationError

from agentgraph.errors import WorkflowValidationError
from agentgraph.models.agent_config import AgentConfig, PartialAgentConfig
from agentgraph.models.validation_result import (
    AgentValidationResult,
    PartialAgentValidationResult,
)
from agentgraph.validation.issues import failure_from_error

logger = logging.getLogger(__name__)

AGENT_FAILURE_MESSAGE = "Validation failed"


def validate_agent_config(config: Any) -> AgentValidationResult:
    """Validate an agent descriptor without raising.

    Args:
        config: a dict (camelCase or snake_case keys) or an AgentConfig

    Returns:
        AgentValidationResult with data on success, error on failure
    """
    try:
        agent = AgentConfig.model_validate(config)
    except ValidationError as exc:
        logger.debug("agent validation failed with %d issue(s)", exc.error_count())
        return AgentValidationResult(
            success=False,
            error=failure_from_error(AGENT_FAILURE_MESSAGE, exc),
        )
    return AgentValidationResult(success=True, data=agent)


def validate_agent_config_strict(config: Any) -> AgentConfig:
    """Validate an agent descriptor and return it.

    Raises:
        WorkflowValidationError: if the descriptor is invalid
    """
    result = validate_agent_config(config)
    if not result.success:
        raise WorkflowValidationError(result.error)
    return result.data


def validate_partial_agent_config(config: Any) -> PartialAgentValidationResult:
    """Validate a partial descriptor, e.g. the body of an update."""
    try:
        partial = PartialAgentConfig.model_validate(config)
    except ValidationError as exc:
        return PartialAgentValidationResult(
            success=False,
            error=failure_from_error(AGENT_FAILURE_MESSAGE, exc),
        )
    return PartialAgentValidationResult(success=True, data=partial)
