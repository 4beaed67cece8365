"""Conversion of pydantic errors into path-tagged validation issues."""

from pydantic import ValidationError

from agentgraph.models.validation_result import ValidationFailure, ValidationIssue


def issues_from_error(error: ValidationError) -> list[ValidationIssue]:
    """One issue per pydantic error, with the location as a list of strings."""
    return [
        ValidationIssue(
            path=[str(part) for part in err.get("loc", ())],
            message=err.get("msg", "Invalid value"),
        )
        for err in error.errors()
    ]


def failure_from_error(message: str, error: ValidationError) -> ValidationFailure:
    return ValidationFailure(message=message, issues=issues_from_error(error))
