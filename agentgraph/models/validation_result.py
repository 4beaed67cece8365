"""Result records returned by the validators.

Shape on the wire:
    {"success": true, "data": {...}}
    {"success": false, "error": {"message": "...", "issues": [{"path": [...], "message": "..."}]}}
"""

from pydantic import BaseModel, Field

from agentgraph.models.agent_config import AgentConfig, PartialAgentConfig
from agentgraph.models.workflow import WorkflowConfig


class ValidationIssue(BaseModel):
    """one problem, located by a path of keys/indices from the document root."""

    path: list[str] = Field(default_factory=list)
    message: str


class ValidationFailure(BaseModel):
    """why validation failed."""

    message: str
    issues: list[ValidationIssue] = Field(default_factory=list)


class _ValidationResult(BaseModel):
    success: bool
    error: ValidationFailure | None = None

    def to_dict(self) -> dict:
        """Dump in the wire shape, with data in camelCase."""
        if self.success:
            data = getattr(self, "data", None)
            return {"success": True, "data": data.to_dict() if data is not None else None}
        return {"success": False, "error": self.error.model_dump() if self.error else None}


class AgentValidationResult(_ValidationResult):
    """result of validating a single agent descriptor."""

    data: AgentConfig | None = None


class PartialAgentValidationResult(_ValidationResult):
    """result of validating a partial agent update."""

    data: PartialAgentConfig | None = None


class WorkflowValidationResult(_ValidationResult):
    """result of validating a workflow."""

    data: WorkflowConfig | None = None
