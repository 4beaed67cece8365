"""API routes for workflow validation, analysis and export."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from agentgraph.adapters import get_adapter
from agentgraph.analysis import analyze_workflow
from agentgraph.errors import UnknownTargetError
from agentgraph.models.validation_result import WorkflowValidationResult
from agentgraph.validation import validate_workflow_config
from agentgraph.validation.issues import failure_from_error

router = APIRouter()


class ExportWorkflowRequest(BaseModel):
    """request body for translating a workflow."""

    workflow: dict[str, Any]
    options: dict[str, Any] | None = None


def _invalid(result: WorkflowValidationResult) -> JSONResponse:
    return JSONResponse(status_code=422, content=result.to_dict())


@router.post("/workflows/validate")
def validate_workflow(
    payload: Any = Body(...),
    allow_cycles: bool | None = None,
) -> dict:
    """validate a workflow; always 200, the verdict is in the body."""
    return validate_workflow_config(payload, allow_cycles=allow_cycles).to_dict()


@router.post("/workflows/analyze")
def analyze(payload: Any = Body(...)):
    """derived graph facts for a structurally valid workflow (cycles allowed)."""
    result = validate_workflow_config(payload, allow_cycles=True)
    if not result.success:
        return _invalid(result)
    return analyze_workflow(result.data).to_dict()


@router.post("/workflows/export/{target}")
def export_workflow(target: str, request: ExportWorkflowRequest):
    """translate a workflow into a target document (n8n, langgraph, crewai)."""
    try:
        adapter = get_adapter(target)
    except UnknownTargetError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    result = validate_workflow_config(request.workflow)
    if not result.success:
        return _invalid(result)

    try:
        options = adapter.options_class.model_validate(request.options or {})
    except ValidationError as exc:
        failure = failure_from_error("Invalid adapter options", exc)
        return JSONResponse(
            status_code=422,
            content={"success": False, "error": failure.model_dump()},
        )

    return adapter.map_workflow(result.data, options).to_dict()
