"""Workflow validation: structural parse plus the acyclicity policy.

The graph model enforces field types and the structural invariants while
parsing. On top of that the validator rejects cycles, because validated
workflows are meant for acyclic execution planning. Callers who only want
the raw facts should use agentgraph.analysis directly.
"""

import logging
from typing import Any

from pydantic import ValidationError

from agentgraph.analysis.graph_analysis import detect_cycles
from agentgraph.config import get_settings
from agentgraph.errors import WorkflowValidationError
from agentgraph.models.validation_result import (
    ValidationFailure,
    ValidationIssue,
    WorkflowValidationResult,
)
from agentgraph.models.workflow import WorkflowConfig
from agentgraph.validation.issues import failure_from_error

logger = logging.getLogger(__name__)

WORKFLOW_FAILURE_MESSAGE = "Workflow validation failed"
CYCLE_MESSAGE = "Workflow contains a cycle"


def validate_workflow_config(
    config: Any,
    allow_cycles: bool | None = None,
) -> WorkflowValidationResult:
    """Validate a workflow without raising.

    Args:
        config: a dict (camelCase or snake_case keys) or an already parsed
            WorkflowConfig; re-validating a result's data gives the same verdict
        allow_cycles: accept cyclic graphs. None uses AGENTGRAPH_ALLOW_CYCLES
            (default False)

    Returns:
        WorkflowValidationResult with the parsed workflow or the issues found
    """
    if allow_cycles is None:
        allow_cycles = get_settings().allow_cycles

    try:
        workflow = WorkflowConfig.model_validate(config)
    except ValidationError as exc:
        logger.debug("workflow validation failed with %d issue(s)", exc.error_count())
        return WorkflowValidationResult(
            success=False,
            error=failure_from_error(WORKFLOW_FAILURE_MESSAGE, exc),
        )

    if not allow_cycles and detect_cycles(workflow):
        logger.debug("workflow %s rejected: cycle detected", workflow.id)
        return WorkflowValidationResult(
            success=False,
            error=ValidationFailure(
                message=WORKFLOW_FAILURE_MESSAGE,
                issues=[ValidationIssue(path=["connections"], message=CYCLE_MESSAGE)],
            ),
        )

    return WorkflowValidationResult(success=True, data=workflow)


def validate_workflow_config_strict(
    config: Any,
    allow_cycles: bool | None = None,
) -> WorkflowConfig:
    """Validate a workflow and return it.

    Raises:
        WorkflowValidationError: if the workflow is invalid
    """
    result = validate_workflow_config(config, allow_cycles=allow_cycles)
    if not result.success:
        raise WorkflowValidationError(result.error)
    return result.data
