"""API routes serving JSON Schemas for editors and form builders."""

from fastapi import APIRouter, HTTPException

from agentgraph.utils import generate_agent_json_schema, generate_workflow_json_schema

router = APIRouter()

_SCHEMAS = {
    "agent": generate_agent_json_schema,
    "workflow": generate_workflow_json_schema,
}


@router.get("/schemas/{kind}")
def get_schema(kind: str) -> dict:
    """get the JSON Schema for "agent" or "workflow" documents."""
    generator = _SCHEMAS.get(kind)
    if generator is None:
        raise HTTPException(status_code=404, detail=f"Schema not found: {kind}")
    return generator()
