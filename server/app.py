"""FastAPI application for validating and translating agent workflows."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentgraph import __version__
from agentgraph.adapters import available_targets
from agentgraph.config import configure_logging, get_settings
from server.agent_routes import router as agent_router
from server.schema_routes import router as schema_router
from server.workflow_routes import router as workflow_router

settings = get_settings()
configure_logging(settings)

app = FastAPI(
    title="agentgraph API",
    description="Validate agent workflows and translate them to n8n, LangGraph and CrewAI",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routes
app.include_router(workflow_router, prefix="/api")
app.include_router(agent_router, prefix="/api")
app.include_router(schema_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "targets": available_targets(),
        "endpoints": {
            "validate_workflow": "/api/workflows/validate",
            "analyze_workflow": "/api/workflows/analyze",
            "export_workflow": "/api/workflows/export/{target}",
            "validate_agent": "/api/agents/validate",
            "export_agent": "/api/agents/export/{target}",
            "schemas": "/api/schemas/{agent|workflow}",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
