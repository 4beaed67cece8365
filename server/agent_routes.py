"""API routes for single agent descriptors."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from agentgraph.adapters import get_adapter
from agentgraph.errors import UnknownTargetError
from agentgraph.validation import validate_agent_config, validate_partial_agent_config
from agentgraph.validation.issues import failure_from_error

router = APIRouter()


class ExportAgentRequest(BaseModel):
    """request body for translating one agent."""

    agent: dict[str, Any]
    options: dict[str, Any] | None = None


@router.post("/agents/validate")
def validate_agent(payload: Any = Body(...), partial: bool = False) -> dict:
    """validate an agent descriptor; partial=true validates an update payload."""
    if partial:
        return validate_partial_agent_config(payload).to_dict()
    return validate_agent_config(payload).to_dict()


@router.post("/agents/export/{target}")
def export_agent(target: str, request: ExportAgentRequest):
    """translate one agent into the target's agent shape."""
    try:
        adapter = get_adapter(target)
    except UnknownTargetError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    result = validate_agent_config(request.agent)
    if not result.success:
        return JSONResponse(status_code=422, content=result.to_dict())

    try:
        options = adapter.options_class.model_validate(request.options or {})
    except ValidationError as exc:
        failure = failure_from_error("Invalid adapter options", exc)
        return JSONResponse(
            status_code=422,
            content={"success": False, "error": failure.model_dump()},
        )

    return adapter.map_agent(result.data, options).to_dict()
