"""Exceptions raised by agentgraph.

Most operations report problems as result values (see the validators). These
exceptions are for the strict entry points and for lookups that cannot return
a sensible value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agentgraph.models.validation_result import ValidationFailure


class AgentGraphError(Exception):
    """Base class for agentgraph errors."""


class WorkflowValidationError(AgentGraphError):
    """Raised by the strict validators when a document is invalid."""

    def __init__(self, failure: ValidationFailure) -> None:
        self.failure = failure
        details = "; ".join(
            f"{'.'.join(issue.path) or '<root>'}: {issue.message}"
            for issue in failure.issues
        )
        super().__init__(f"{failure.message}: {details}" if details else failure.message)

    @property
    def issues(self):
        return self.failure.issues


class UnknownTargetError(AgentGraphError, KeyError):
    """Raised when an adapter is requested for a target that does not exist."""

    def __init__(self, target: str, known: list[str]) -> None:
        self.target = target
        self.known = known
        super().__init__(f"unknown target {target!r}, expected one of {known}")

    def __str__(self) -> str:
        return self.args[0]
