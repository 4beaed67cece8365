"""Shared builders for agentgraph tests."""

import pytest

from agentgraph.models.workflow import WorkflowConfig


def build_workflow_dict(
    nodes: list,
    edges: list | None = None,
    **extra,
) -> dict:
    """Build a camelCase workflow document.

    nodes: ids (plain agent nodes with a late-bound agentId) or full node dicts
    edges: (source, target) or (source, target, condition) tuples
    """
    node_dicts = []
    for node in nodes:
        if isinstance(node, str):
            node_dicts.append({"id": node, "type": "agent", "agentId": f"{node}-agent"})
        else:
            node_dicts.append(node)

    connections = []
    for index, edge in enumerate(edges or []):
        conn = {"id": f"c{index + 1}", "sourceId": edge[0], "targetId": edge[1]}
        if len(edge) > 2 and edge[2] is not None:
            conn["condition"] = edge[2]
        connections.append(conn)

    document = {
        "id": extra.pop("id", "workflow-1"),
        "name": extra.pop("name", "Test Workflow"),
        "nodes": node_dicts,
        "connections": connections,
    }
    document.update(extra)
    return document


@pytest.fixture
def make_workflow():
    """Factory fixture: same arguments as build_workflow_dict, returns a WorkflowConfig."""

    def _make(nodes: list, edges: list | None = None, **extra) -> WorkflowConfig:
        return WorkflowConfig.model_validate(build_workflow_dict(nodes, edges, **extra))

    return _make


@pytest.fixture
def research_agent() -> dict:
    return {
        "id": "researcher",
        "name": "Research Agent",
        "description": "Conducts research on various topics",
        "provider": "openai",
        "model": "gpt-4",
        "systemPrompt": "You are an expert researcher",
        "parameters": {"temperature": 0.3, "maxTokens": 2000},
        "tools": [
            {"id": "t1", "name": "search", "description": "Search the web", "parameters": {"query": "string"}},
        ],
        "memory": {"type": "buffer", "maxMessages": 10},
    }


@pytest.fixture
def writer_agent() -> dict:
    return {
        "id": "writer",
        "name": "Writer Agent",
        "provider": "anthropic",
        "model": "claude-3-opus",
    }


@pytest.fixture
def make_workflow_dict():
    """Factory fixture returning the raw document instead of a parsed workflow."""
    return build_workflow_dict
